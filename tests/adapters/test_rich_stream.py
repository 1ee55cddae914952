from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_channels.adapters.console.rich_stream import RichStreamAdapter
from lib_log_channels.application.ports import StreamPort
from lib_log_channels.domain.channels import Channel, OutputTarget


def _console(*, color: bool) -> tuple[Console, StringIO]:
    buffer = StringIO()
    if color:
        console = Console(file=buffer, force_terminal=True, color_system="standard")
    else:
        console = Console(file=buffer, force_terminal=False)
    return console, buffer


def test_adapter_satisfies_port() -> None:
    console, _ = _console(color=False)
    assert isinstance(RichStreamAdapter(console=console), StreamPort)


def test_emit_preserves_carriage_returns() -> None:
    console, buffer = _console(color=False)
    adapter = RichStreamAdapter(console=console)
    adapter.emit(Channel.SCREEN, b"progress: 50%\r\n")
    assert buffer.getvalue() == "progress: 50%\r\n"


def test_emit_does_not_interpret_markup() -> None:
    console, buffer = _console(color=False)
    RichStreamAdapter(console=console).emit(Channel.NOTE, b"[bold]literal[/bold]")
    assert buffer.getvalue() == "[bold]literal[/bold]"


def test_colour_is_opt_in() -> None:
    console, buffer = _console(color=True)
    RichStreamAdapter(OutputTarget.STDERR, console=console).emit(Channel.ERROR, b"Error: boom")
    assert buffer.getvalue() == "Error: boom"


def test_colorize_wraps_styled_channels() -> None:
    console, buffer = _console(color=True)
    RichStreamAdapter(OutputTarget.STDERR, console=console, colorize=True).emit(Channel.ERROR, b"Error: boom\r\n")
    output = buffer.getvalue()
    assert output.startswith("\x1b[")
    assert "Error: boom\r\n" in output


def test_colorize_leaves_unstyled_channels_plain() -> None:
    console, buffer = _console(color=True)
    RichStreamAdapter(console=console, colorize=True).emit(Channel.SCREEN, b"plain")
    assert buffer.getvalue() == "plain"


def test_no_color_overrides_colorize() -> None:
    console, buffer = _console(color=True)
    RichStreamAdapter(console=console, colorize=True, no_color=True).emit(Channel.ERROR, b"x")
    assert buffer.getvalue() == "x"


def test_style_overrides_accept_channel_names() -> None:
    console, buffer = _console(color=True)
    RichStreamAdapter(console=console, colorize=True, styles={"note": "green"}).emit(Channel.NOTE, b"ok")
    assert buffer.getvalue() != "ok"
    assert "ok" in buffer.getvalue()


def test_invalid_utf8_is_replaced() -> None:
    console, buffer = _console(color=False)
    RichStreamAdapter(console=console).emit(Channel.SCREEN, b"caf\xc3")
    assert buffer.getvalue() == "caf\ufffd"


def test_default_console_follows_process_streams(capsys: pytest.CaptureFixture[str]) -> None:
    RichStreamAdapter(OutputTarget.STDERR).emit(Channel.WARNING, b"to stderr")
    RichStreamAdapter(OutputTarget.STDOUT).emit(Channel.NOTE, b"to stdout")
    captured = capsys.readouterr()
    assert captured.err == "to stderr"
    assert captured.out == "to stdout"


def test_none_target_is_rejected() -> None:
    with pytest.raises(ValueError):
        RichStreamAdapter(OutputTarget.NONE)
