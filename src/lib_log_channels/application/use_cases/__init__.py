"""Application use cases composed by the runtime."""

from __future__ import annotations

from .check import create_check, failure_message
from .shutdown import build_viewer_command, create_shutdown
from .write_message import WriteMessage, create_write_message

__all__ = [
    "WriteMessage",
    "build_viewer_command",
    "create_check",
    "create_shutdown",
    "create_write_message",
    "failure_message",
]
