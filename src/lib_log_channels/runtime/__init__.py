"""Runtime façade exposing the process-wide logging engine.

Purpose
-------
Give host applications one place to build the engine (:func:`init`), reach it
from anywhere (:func:`get_engine`), and tear it down deterministically
(:func:`shutdown`). Explicit :class:`LogEngine` instances remain available for
composition roots that prefer passing the engine around.

Contents
--------
* ``init`` / ``get_engine`` / ``shutdown`` / ``is_initialised``.
* Channel shortcuts ``write``, ``set_status``, ``has_content``, ``check``.
* Re-exports of :class:`LogEngine` and :func:`coerce_channel`.

System Role
-----------
Outermost layer: resolves :class:`~lib_log_channels.config.EngineSettings`,
wires adapters, and stores the singleton behind a re-entrant lock so lazy
initialisation happens exactly once.
"""

from __future__ import annotations

from os import PathLike
from typing import Any

from lib_log_channels.config import build_engine_settings
from lib_log_channels.domain import Channel

from ._engine import LogEngine
from ._factories import coerce_channel
from ._state import _STATE_LOCK, clear_engine, current_engine, is_initialised, set_engine


def init(
    *,
    base_path: str | PathLike[str] | None = None,
    status: str | None = None,
    viewer: str | None = None,
    escalate: bool | None = None,
    colorize: bool | None = None,
    force_color: bool | None = None,
    **collaborators: Any,
) -> LogEngine:
    """Build the process-wide engine and return it.

    Keyword arguments are merged with the ``LOG_*`` environment overrides by
    :func:`~lib_log_channels.config.build_engine_settings`. ``collaborators``
    (``file_factory``, ``streams``, ``launcher``, ``clock``) are passed to
    :class:`LogEngine` unchanged.

    Raises
    ------
    RuntimeError
        If an engine is already installed; call :func:`shutdown` first.
    """

    with _STATE_LOCK:
        if is_initialised():
            raise RuntimeError(
                "lib_log_channels.init() cannot be called twice without shutdown(); call lib_log_channels.shutdown() first",
            )
        settings = build_engine_settings(
            base_path=base_path,
            status=status,
            viewer=viewer,
            escalate=escalate,
            colorize=colorize,
            force_color=force_color,
        )
        engine = LogEngine.from_settings(settings, **collaborators)
        set_engine(engine)
        return engine


def get_engine() -> LogEngine:
    """Return the installed engine, building one from settings on first use."""

    with _STATE_LOCK:
        if not is_initialised():
            return init()
        return current_engine()


def shutdown() -> bool:
    """Tear down the installed engine and clear the singleton.

    Returns ``True`` when the error viewer was launched.

    Raises
    ------
    RuntimeError
        If no engine is installed.
    """

    with _STATE_LOCK:
        engine = current_engine()
        clear_engine()
    return engine.shutdown()


def write(channel: Channel | str, message: str, /, *args: Any, **kwargs: Any) -> None:
    """Write ``message`` to ``channel`` on the process-wide engine."""

    get_engine().write(coerce_channel(channel), message, *args, **kwargs)


def set_status(text: str) -> None:
    get_engine().set_status(text)


def has_content(channel: Channel | str) -> bool:
    return get_engine().has_content(coerce_channel(channel))


def check(condition: object, expression: str | None = None, *, raise_error: bool = False) -> bool:
    """Report a failed ``condition`` on the error channel of the process-wide engine."""

    return get_engine().check(condition, expression, raise_error=raise_error, stacklevel=2)


__all__ = [
    "LogEngine",
    "check",
    "coerce_channel",
    "get_engine",
    "has_content",
    "init",
    "is_initialised",
    "set_status",
    "shutdown",
    "write",
]
