"""Subprocess adapter implementing :class:`ProcessLauncherPort`."""

from __future__ import annotations

import shlex
import subprocess
import sys

from lib_log_channels.application.ports.process import ProcessLauncherPort


def default_viewer_command(platform: str | None = None) -> str:
    """Return the program used to display the error file on ``platform``.

    Examples
    --------
    >>> default_viewer_command("win32")
    'notepad.exe'
    >>> default_viewer_command("linux")
    'xdg-open'
    """

    platform = platform or sys.platform
    if platform.startswith("win"):
        return "notepad.exe"
    if platform == "darwin":
        return "open"
    return "xdg-open"


class SubprocessLauncher(ProcessLauncherPort):
    """Start a detached process and return immediately."""

    def __init__(self, *, posix: bool | None = None) -> None:
        self._posix = not sys.platform.startswith("win") if posix is None else posix

    def split(self, command_line: str) -> list[str]:
        """Split ``command_line`` into arguments, dropping the quotes on Windows too."""

        args = shlex.split(command_line, posix=self._posix)
        if not self._posix:
            args = [arg[1:-1] if len(arg) > 1 and arg[0] == arg[-1] == '"' else arg for arg in args]
        if not args:
            raise ValueError("empty command line")
        return args

    def start_process(self, command_line: str) -> None:
        subprocess.Popen(  # noqa: S603 - the command comes from trusted configuration
            self.split(command_line),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
        )


__all__ = ["SubprocessLauncher", "default_viewer_command"]
