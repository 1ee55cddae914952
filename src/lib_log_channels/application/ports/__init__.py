"""Ports consumed by the application layer."""

from __future__ import annotations

from .file import FileSinkFactory, FileSinkPort
from .process import ProcessLauncherPort
from .stream import StreamPort
from .time import ClockPort

__all__ = [
    "ClockPort",
    "FileSinkFactory",
    "FileSinkPort",
    "ProcessLauncherPort",
    "StreamPort",
]
