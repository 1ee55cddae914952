"""Process launcher port used for shutdown escalation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessLauncherPort(Protocol):
    """Start an external program without waiting for it."""

    def start_process(self, command_line: str) -> None:
        """Launch ``command_line``; raise :class:`OSError` when it cannot start."""


__all__ = ["ProcessLauncherPort"]
