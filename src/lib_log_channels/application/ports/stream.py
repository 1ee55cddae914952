"""Standard-stream port for channels mirrored to stderr or stdout."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_channels.domain.channels import Channel


@runtime_checkable
class StreamPort(Protocol):
    """Emit already-formatted bytes on one standard stream."""

    def emit(self, channel: Channel, data: bytes) -> None:
        """Write ``data`` for ``channel`` without adding a line ending."""


__all__ = ["StreamPort"]
