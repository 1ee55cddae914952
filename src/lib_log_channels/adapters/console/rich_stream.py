"""Rich-backed standard stream adapter implementing :class:`StreamPort`.

Purpose
-------
Mirror channel output on stderr or stdout. The bytes are written verbatim so
carriage returns produced by the CRLF pass survive; Rich only decides whether
the stream is a colour terminal and renders the channel style around the text.

Contents
--------
* :data:`_STYLE_MAP` - default channel-to-style mapping.
* :class:`RichStreamAdapter` - adapter wired by the runtime for each target.

System Role
-----------
Human-facing sink. Colour is opt-in (``colorize=True`` or ``LOG_COLOR``) and is
suppressed whenever the console reports no colour system.
"""

from __future__ import annotations

from typing import Mapping

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from lib_log_channels.application.ports.stream import StreamPort
from lib_log_channels.domain.channels import Channel, OutputTarget

#: Default Rich styles keyed by :class:`Channel`; unlisted channels stay plain.
_STYLE_MAP: Mapping[Channel, str] = {
    Channel.ERROR: "bold red",
    Channel.WARNING: "yellow",
}

_COLOR_SYSTEMS: Mapping[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


class RichStreamAdapter(StreamPort):
    """Write channel bytes to one standard stream through a Rich console."""

    def __init__(
        self,
        target: OutputTarget = OutputTarget.STDOUT,
        *,
        console: Console | None = None,
        colorize: bool = False,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Channel | str, str] | None = None,
    ) -> None:
        if target is OutputTarget.NONE:
            raise ValueError("a stream adapter needs stderr or stdout")
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                stderr=target is OutputTarget.STDERR,
                force_terminal=True if force_color else None,
                no_color=no_color,
            )
        self._target = target
        self._colorize = colorize and not no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            channel = Channel.from_name(key) if isinstance(key, str) else key
            merged[channel] = value
        self._style_map = merged

    @property
    def target(self) -> OutputTarget:
        return self._target

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, channel: Channel, data: bytes) -> None:
        """Write ``data`` for ``channel``, styled when colour is active.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> adapter = RichStreamAdapter(console=Console(file=buffer))
        >>> adapter.emit(Channel.SCREEN, b"50%\\r\\n")
        >>> buffer.getvalue()
        '50%\\r\\n'
        """

        text = data.decode("utf-8", errors="replace")
        stream = self._console.file
        stream.write(self._render(channel, text))
        stream.flush()

    def _render(self, channel: Channel, text: str) -> str:
        style = self._style_map.get(channel, "") if self._colorize else ""
        color_system = _COLOR_SYSTEMS.get(self._console.color_system or "")
        if not style or color_system is None:
            return text
        return Style.parse(style).render(text, color_system=color_system)


__all__ = ["RichStreamAdapter"]
