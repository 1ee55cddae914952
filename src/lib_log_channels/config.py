"""Configuration helpers: ``.env`` loading and engine settings.

Purpose
-------
Resolve the engine configuration from keyword arguments and ``LOG_*``
environment variables, optionally seeded from the nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :func:`should_use_dotenv` / :func:`enable_dotenv`.
* :class:`EngineSettings` and :func:`build_engine_settings`.

System Role
-----------
Used by the runtime accessor and the CLI. Environment variables take
precedence over keyword arguments so deployments can re-target logging
without code changes:

``LOG_BASE_PATH``  base path of the channel files (default ``Log``)
``LOG_STATUS``     initial status prefix
``LOG_VIEWER``     program opening the error file at shutdown
``LOG_ESCALATE``   launch the viewer when the error channel has content
``LOG_COLOR``      colour stderr/stdout output when the terminal supports it
``LOG_FORCE_COLOR`` treat stderr/stdout as colour terminals even when redirected
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

from .adapters.process import default_viewer_command

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
DEFAULT_BASE_PATH = "Log"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_dotenv_lock = Lock()
_dotenv_loaded = False
_dotenv_path: Path | None = None


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_EXAMPLE_BOOL']
    """

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def _find_env_file(start: Path) -> Path | None:
    # find_dotenv only searches upwards from the cwd or the calling module.
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(search_from: str | PathLike[str] | None = None) -> Path | None:
    """Load the nearest ``.env`` above ``search_from`` (default: the cwd).

    Existing environment variables are never overridden. The file is loaded at
    most once per process; later calls return the path found the first time.
    """

    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        if _dotenv_loaded:
            return _dotenv_path
        if search_from is None:
            found = find_dotenv(usecwd=True)
            path = Path(found).resolve() if found else None
        else:
            path = _find_env_file(Path(search_from).resolve())
        if path is not None:
            load_dotenv(path, override=False)
            logger.debug("loaded environment from %s", path)
        _dotenv_loaded = True
        _dotenv_path = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        _dotenv_loaded = False
        _dotenv_path = None


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Resolved configuration for one :class:`~lib_log_channels.runtime.LogEngine`."""

    base_path: Path
    status: str = ""
    viewer: str = ""
    escalate: bool = True
    colorize: bool = False
    force_color: bool = False


def build_engine_settings(
    *,
    base_path: str | PathLike[str] | None = None,
    status: str | None = None,
    viewer: str | None = None,
    escalate: bool | None = None,
    colorize: bool | None = None,
    force_color: bool | None = None,
) -> EngineSettings:
    """Merge keyword arguments, environment overrides, and defaults.

    Examples
    --------
    >>> for name in ("LOG_BASE_PATH", "LOG_ESCALATE"):
    ...     _ = os.environ.pop(name, None)
    >>> settings = build_engine_settings(base_path="run/app.txt", escalate=False)
    >>> settings.base_path.as_posix(), settings.escalate
    ('run/app.txt', False)
    """

    resolved_base = os.getenv("LOG_BASE_PATH") or (base_path if base_path is not None else DEFAULT_BASE_PATH)
    resolved_status = os.getenv("LOG_STATUS", status if status is not None else "")
    resolved_viewer = os.getenv("LOG_VIEWER") or viewer or default_viewer_command()
    return EngineSettings(
        base_path=Path(resolved_base),
        status=resolved_status,
        viewer=resolved_viewer,
        escalate=_env_bool("LOG_ESCALATE", True if escalate is None else escalate),
        colorize=_env_bool("LOG_COLOR", False if colorize is None else colorize),
        force_color=_env_bool("LOG_FORCE_COLOR", False if force_color is None else force_color),
    )


__all__ = [
    "DEFAULT_BASE_PATH",
    "DOTENV_ENV_VAR",
    "EngineSettings",
    "build_engine_settings",
    "enable_dotenv",
    "should_use_dotenv",
]
