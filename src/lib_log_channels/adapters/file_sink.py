"""Filesystem adapter implementing :class:`FileSinkPort`.

Purpose
-------
Persist channel output to ``<base>.<ext>`` files opened for sequential binary
writes.

Contents
--------
* :class:`LogFile` - truncating, flush-per-write file handle.

System Role
-----------
Created once per channel by :class:`~lib_log_channels.application.sinks.ChannelSinkSet`
through the factory wired in the runtime. :class:`OSError` propagates.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from lib_log_channels.application.ports.file import FileSinkPort


class LogFile(FileSinkPort):
    """Binary, write-only channel file.

    Examples
    --------
    >>> import tempfile
    >>> target = Path(tempfile.mkdtemp()) / "Log.err"
    >>> sink = LogFile()
    >>> sink.open(target)
    >>> sink.write(b"boom\\r\\n")
    >>> sink.close()
    >>> target.read_bytes()
    b'boom\\r\\n'
    """

    def __init__(self) -> None:
        self._path: Path | None = None
        self._handle: BinaryIO | None = None

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def open(self, path: Path) -> None:
        """Create or truncate ``path``; parent directories are created as needed."""

        self.close()
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = path.open("wb")
        self._path = path

    def write(self, data: bytes) -> None:
        if self._handle is None or self._handle.closed:
            raise ValueError(f"log file is not open: {self._path}")
        self._handle.write(data)
        self._handle.flush()

    def close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None and not handle.closed:
            handle.close()


__all__ = ["LogFile"]
