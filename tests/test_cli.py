"""CLI behaviour coverage for the channel commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_channels import __init__conf__
from lib_log_channels import cli as cli_mod
from lib_log_channels.application.use_cases import build_viewer_command
from lib_log_channels.cli import summary_info


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click command with ``CliRunner`` and capture output."""

    runner = CliRunner()
    original_argv = sys.argv
    sys.argv = [__init__conf__.shell_command]
    try:
        result = runner.invoke(
            cli_mod.cli,
            args or [],
            prog_name=__init__conf__.shell_command,
        )
    finally:
        sys.argv = original_argv
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()
    assert stdout.startswith("Info for lib_log_channels:")


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_channels_lists_policy_table() -> None:
    exit_code, stdout, _ = run_cli(["channels"])

    assert exit_code == 0
    for name in ("error", "warning", "screen", "note", "file_only"):
        assert name in stdout
    assert ".err" in stdout
    assert ".warn" in stdout


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_write_appends_to_channel_file(tmp_path: Path) -> None:
    base = tmp_path / "cli" / "Log"

    exit_code, _stdout, exception = run_cli(
        ["write", "file_only", "nightly import", "--base-path", str(base), "--status", "job", "--no-escalate"],
    )

    assert exception is None
    assert exit_code == 0
    content = base.with_suffix(".file").read_bytes()
    assert content.startswith(b"File created ")
    assert content.endswith(b"job: nightly import\r\n")


def test_cli_write_screen_goes_to_stdout(tmp_path: Path) -> None:
    exit_code, stdout, _ = run_cli(
        ["write", "screen", "50%", "--no-newline", "--base-path", str(tmp_path / "Log"), "--no-escalate"],
    )

    assert exit_code == 0
    assert stdout == "50%"


def test_cli_write_rejects_unknown_channel(tmp_path: Path) -> None:
    exit_code, stdout, _ = run_cli(["write", "debug", "x", "--base-path", str(tmp_path / "Log")])

    assert exit_code != 0
    assert "debug" in stdout
    assert not list(tmp_path.iterdir())


def test_cli_write_error_escalates_with_configured_viewer(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[str] = []

    def fake_start(self: object, command_line: str) -> None:
        launched.append(command_line)

    monkeypatch.setattr("lib_log_channels.adapters.process.SubprocessLauncher.start_process", fake_start)
    monkeypatch.setenv("LOG_VIEWER", "less")
    base = tmp_path / "Log"

    exit_code, _stdout, exception = run_cli(["write", "error", "disk failed", "--base-path", str(base)])

    assert exception is None
    assert exit_code == 0
    assert launched == [build_viewer_command("less", base.with_suffix(".err"))]


def test_cli_demo_writes_every_channel(tmp_path: Path) -> None:
    base = tmp_path / "demo" / "Log"

    exit_code, stdout, _ = run_cli(["demo", "--base-path", str(base)])

    assert exit_code == 0
    assert "demo screen message" in stdout
    for suffix in (".err", ".warn", ".log", ".file"):
        assert f"wrote {base.with_suffix(suffix)}" in stdout
    assert base.with_suffix(".err").read_bytes().endswith(b"demo: Error: demo error message\r\n")
    assert base.with_suffix(".log").read_bytes().endswith(b"demo note message\r\n")


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "traceback_force_color": True}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_resets_preferences_after_no_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, argv or [])
        assert lib_cli_exit_tools.config.traceback is False
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--no-traceback", "info"]) == 0
    assert lib_cli_exit_tools.config.traceback is True
