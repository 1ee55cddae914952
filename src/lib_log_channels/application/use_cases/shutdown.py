"""Shutdown orchestration with error-channel escalation.

Purpose
-------
Close every channel file and, when the error channel received content during
the session, open its file in an external viewer.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable

from lib_log_channels.application.ports.process import ProcessLauncherPort
from lib_log_channels.application.sinks import ChannelSinkSet
from lib_log_channels.domain.channels import Channel

logger = logging.getLogger(__name__)


def build_viewer_command(viewer: str, path: Path, *, posix: bool | None = None) -> str:
    """Return the command line opening ``path`` with ``viewer``.

    ``viewer`` is used verbatim so it may carry its own arguments; ``path`` is
    quoted with the rules of the platform shell (``posix`` defaults to the
    running platform).

    Examples
    --------
    >>> print(build_viewer_command("xdg-open", Path('my"run/Log.err'), posix=True))
    xdg-open 'my"run/Log.err'
    >>> print(build_viewer_command("notepad.exe", Path("my logs/Log.err"), posix=False))
    notepad.exe "my logs/Log.err"
    """

    if posix is None:
        posix = not sys.platform.startswith("win")
    quoted = shlex.quote(str(path)) if posix else subprocess.list2cmdline([str(path)])
    return f"{viewer} {quoted}"


def create_shutdown(
    *,
    sinks: ChannelSinkSet,
    launcher: ProcessLauncherPort,
    viewer: str,
    escalate: bool = True,
) -> Callable[[], bool]:
    """Return the teardown callable.

    The callable closes ``sinks`` and returns ``True`` when it launched the
    viewer. Launch failures are logged and swallowed because the host is
    already exiting.
    """

    def shutdown() -> bool:
        sinks.close()
        if not sinks.has_content(Channel.ERROR):
            return False
        path = sinks.path_of(Channel.ERROR)
        if not escalate or not viewer or path is None:
            logger.debug("error channel has content; viewer escalation disabled")
            return False
        command_line = build_viewer_command(viewer, path)
        try:
            launcher.start_process(command_line)
        except (OSError, ValueError) as exc:
            logger.debug("could not launch viewer %r: %s", command_line, exc)
            return False
        return True

    return shutdown


__all__ = ["build_viewer_command", "create_shutdown"]
