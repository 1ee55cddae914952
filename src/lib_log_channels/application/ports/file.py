"""File sink port describing the persisted half of a channel.

Purpose
-------
Keep the application layer independent from the filesystem so the sink set can
be exercised with in-memory fakes.

Contents
--------
* :class:`FileSinkPort` - open/write/close contract for one channel file.
* :data:`FileSinkFactory` - callable producing fresh, unopened sinks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class FileSinkPort(Protocol):
    """Sequential, write-only handle on a channel file."""

    @property
    def path(self) -> Path | None: ...

    @property
    def is_open(self) -> bool: ...

    def open(self, path: Path) -> None:
        """Create or truncate ``path`` and keep it open for appending."""

    def write(self, data: bytes) -> None:
        """Append ``data`` verbatim."""

    def close(self) -> None:
        """Flush and close; calling it on a closed sink is a no-op."""


FileSinkFactory = Callable[[], FileSinkPort]


__all__ = ["FileSinkFactory", "FileSinkPort"]
