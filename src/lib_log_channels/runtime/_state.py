"""Process-wide engine slot and access helpers."""

from __future__ import annotations

from threading import RLock

from ._engine import LogEngine

_ENGINE: LogEngine | None = None
_STATE_LOCK = RLock()


def set_engine(engine: LogEngine) -> None:
    """Install ``engine`` as the active singleton."""

    with _STATE_LOCK:
        global _ENGINE
        _ENGINE = engine


def clear_engine() -> LogEngine | None:
    """Remove and return the active engine if present."""

    with _STATE_LOCK:
        global _ENGINE
        engine, _ENGINE = _ENGINE, None
        return engine


def current_engine() -> LogEngine:
    """Return the active engine or raise when uninitialised."""

    with _STATE_LOCK:
        if _ENGINE is None:
            raise RuntimeError("lib_log_channels.init() must be called before using the logging API")
        return _ENGINE


def is_initialised() -> bool:
    """Return ``True`` when an engine is installed."""

    with _STATE_LOCK:
        return _ENGINE is not None


__all__ = ["clear_engine", "current_engine", "is_initialised", "set_engine"]
