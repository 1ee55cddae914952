"""Failure checks reported through the error channel.

Purpose
-------
Give host code a single call that verifies a condition, records the failure
on the error channel, and optionally raises.
"""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Callable

from lib_log_channels.domain.channels import Channel
from lib_log_channels.domain.errors import CheckFailedError

from .write_message import WriteMessage

CheckCallable = Callable[..., bool]


def failure_message(expression: str, file_name: str, line_number: int) -> str:
    """Return the text logged for a failed check.

    Examples
    --------
    >>> failure_message("x > 0", "app.py", 12)
    "Failed check 'x > 0' in app.py line 12\\n"
    """

    return f"Failed check '{expression}' in {file_name} line {line_number}\n"


def create_check(*, write: WriteMessage) -> CheckCallable:
    """Build the check callable bound to ``write``.

    The returned callable accepts ``(condition, expression=None, *,
    raise_error=False, stacklevel=1)`` and returns ``bool(condition)``.
    ``stacklevel`` selects which caller frame is reported.
    """

    def check(condition: object, expression: str | None = None, *, raise_error: bool = False, stacklevel: int = 1) -> bool:
        if condition:
            return True
        frame = inspect.stack(context=0)[stacklevel]
        description = expression if expression is not None else "condition"
        message = failure_message(description, Path(frame.filename).name, frame.lineno)
        write(Channel.ERROR, message)
        if raise_error:
            raise CheckFailedError(message.rstrip("\n"))
        return False

    return check


__all__ = ["CheckCallable", "create_check", "failure_message"]
