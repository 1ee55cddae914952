"""The logging engine facade.

Purpose
-------
Coordinate the policy table, the formatter, and the channel sink set behind
one object with ``configure``/``write``/``set_status``/``close``/``shutdown``.

Contents
--------
* :class:`LogEngine` - one per process, built by the composition root or by
  :func:`lib_log_channels.runtime.get_engine`.

System Role
-----------
Outer shell of the clean-architecture stack: concrete adapters are chosen
here, policy stays in the inner layers. The engine does no locking; callers
sharing it across threads serialise access themselves.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from types import TracebackType
from typing import Any, Mapping

from lib_log_channels.adapters import LogFile, SubprocessLauncher, default_viewer_command
from lib_log_channels.application.ports import ClockPort, FileSinkFactory, ProcessLauncherPort, StreamPort
from lib_log_channels.application.sinks import ChannelSinkSet
from lib_log_channels.application.use_cases import create_check, create_shutdown, create_write_message
from lib_log_channels.config import DEFAULT_BASE_PATH, EngineSettings
from lib_log_channels.domain import Channel, OutputTarget

from ._factories import SystemClock, create_streams


class LogEngine:
    """Route messages to the error, warning, screen, note and file-only channels.

    Parameters
    ----------
    base_path:
        Base name of the channel files; the extension is replaced per channel.
        ``None`` leaves the engine unconfigured until :meth:`configure`.
    status:
        Initial status prefix.
    file_factory, streams, launcher, clock:
        Collaborators; defaults are the filesystem, Rich stderr/stdout
        adapters, :class:`SubprocessLauncher`, and the local clock.
    viewer:
        Program opening the error file on :meth:`shutdown`.
    escalate:
        ``False`` disables the viewer launch entirely.
    colorize:
        Style stderr/stdout output when the default streams are used.
    force_color:
        Treat the default streams as colour terminals even when redirected.

    Examples
    --------
    >>> import tempfile
    >>> from pathlib import Path
    >>> base = Path(tempfile.mkdtemp()) / "Log"
    >>> with LogEngine(base, escalate=False) as engine:
    ...     engine.write(Channel.FILE_ONLY, "saved {} rows", 3)
    >>> base.with_suffix(".file").read_bytes().endswith(b"saved 3 rows")
    True
    """

    def __init__(
        self,
        base_path: str | PathLike[str] | None = DEFAULT_BASE_PATH,
        *,
        status: str = "",
        file_factory: FileSinkFactory = LogFile,
        streams: Mapping[OutputTarget, StreamPort] | None = None,
        launcher: ProcessLauncherPort | None = None,
        clock: ClockPort | None = None,
        viewer: str | None = None,
        escalate: bool = True,
        colorize: bool = False,
        force_color: bool = False,
    ) -> None:
        self._status = status
        self._sinks = ChannelSinkSet(
            file_factory=file_factory,
            streams=streams if streams is not None else create_streams(colorize=colorize, force_color=force_color),
            clock=clock if clock is not None else SystemClock(),
        )
        self._write = create_write_message(sinks=self._sinks, status=lambda: self._status)
        self._check = create_check(write=self._write)
        self._shutdown = create_shutdown(
            sinks=self._sinks,
            launcher=launcher if launcher is not None else SubprocessLauncher(),
            viewer=viewer if viewer is not None else default_viewer_command(),
            escalate=escalate,
        )
        self._shut_down = False
        if base_path is not None:
            self.configure(base_path)

    @classmethod
    def from_settings(cls, settings: EngineSettings, **collaborators: Any) -> "LogEngine":
        """Build an engine from resolved :class:`EngineSettings`."""

        return cls(
            settings.base_path,
            status=settings.status,
            viewer=settings.viewer,
            escalate=settings.escalate,
            colorize=settings.colorize,
            force_color=settings.force_color,
            **collaborators,
        )

    def configure(self, base_path: str | PathLike[str], *, reset_content: bool = False) -> None:
        """Close current channel files and open fresh ones under ``base_path``.

        Content flags are cumulative for the session; pass
        ``reset_content=True`` to clear them as well.
        """

        self._sinks.configure(base_path, reset_content=reset_content)
        self._shut_down = False

    def write(self, channel: Channel, message: str, /, *args: Any, **kwargs: Any) -> None:
        """Format ``message`` for ``channel`` and emit it.

        ``args``/``kwargs`` are applied with :meth:`str.format`; without them
        the message is emitted verbatim.

        Raises
        ------
        MessageTooLongError
            When the rendered message does not fit the formatting buffer.
        ChannelNotOpenError
            When the channel file is not open.
        """

        self._write(channel, message, *args, **kwargs)

    def error(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self._write(Channel.ERROR, message, *args, **kwargs)

    def warning(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self._write(Channel.WARNING, message, *args, **kwargs)

    def screen(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self._write(Channel.SCREEN, message, *args, **kwargs)

    def note(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self._write(Channel.NOTE, message, *args, **kwargs)

    def file(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self._write(Channel.FILE_ONLY, message, *args, **kwargs)

    @property
    def status(self) -> str:
        return self._status

    def set_status(self, text: str) -> None:
        """Replace the status prefix; truncation happens when messages are formatted."""

        self._status = text

    def has_content(self, channel: Channel) -> bool:
        return self._sinks.has_content(channel)

    def path_of(self, channel: Channel) -> Path | None:
        return self._sinks.path_of(channel)

    @property
    def is_configured(self) -> bool:
        return self._sinks.is_configured

    def check(
        self,
        condition: object,
        expression: str | None = None,
        *,
        raise_error: bool = False,
        stacklevel: int = 1,
    ) -> bool:
        """Log ``Failed check '<expression>' in <file> line <n>`` when ``condition`` is false.

        Returns ``bool(condition)``; raises :class:`CheckFailedError` instead
        when ``raise_error`` is set.
        """

        return self._check(condition, expression, raise_error=raise_error, stacklevel=stacklevel + 1)

    def close(self) -> None:
        """Flush and close every channel file. Idempotent."""

        self._sinks.close()

    def shutdown(self) -> bool:
        """Close the channels and escalate if the error channel has content.

        Runs once per configuration; later calls return ``False``. Returns
        ``True`` when the viewer was launched.
        """

        if self._shut_down:
            return False
        self._shut_down = True
        return self._shutdown()

    def __enter__(self) -> "LogEngine":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()


__all__ = ["LogEngine"]
