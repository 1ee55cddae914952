"""Concrete adapters for files, standard streams, and external processes."""

from __future__ import annotations

from .console import RichStreamAdapter
from .file_sink import LogFile
from .process import SubprocessLauncher, default_viewer_command

__all__ = ["LogFile", "RichStreamAdapter", "SubprocessLauncher", "default_viewer_command"]
