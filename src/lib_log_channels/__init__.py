"""Public package surface of :mod:`lib_log_channels`.

Host code either owns a :class:`LogEngine` explicitly or uses the process-wide
accessor (:func:`init`, :func:`get_engine`, :func:`write`, :func:`shutdown`).
"""

from __future__ import annotations

from .config import EngineSettings, build_engine_settings, enable_dotenv
from .domain import (
    CHANNEL_POLICIES,
    Channel,
    ChannelNotOpenError,
    ChannelPolicy,
    CheckFailedError,
    ContractViolationError,
    LOG_BUFFER_SIZE,
    LogChannelsError,
    MAX_STATUS_SIZE,
    MessageTooLongError,
    OutputTarget,
    UnknownChannelError,
    policy_of,
)
from .runtime import (
    LogEngine,
    check,
    get_engine,
    has_content,
    init,
    is_initialised,
    set_status,
    shutdown,
    write,
)

__all__ = [
    "CHANNEL_POLICIES",
    "Channel",
    "ChannelNotOpenError",
    "ChannelPolicy",
    "CheckFailedError",
    "ContractViolationError",
    "EngineSettings",
    "LOG_BUFFER_SIZE",
    "LogChannelsError",
    "LogEngine",
    "MAX_STATUS_SIZE",
    "MessageTooLongError",
    "OutputTarget",
    "UnknownChannelError",
    "build_engine_settings",
    "check",
    "enable_dotenv",
    "get_engine",
    "has_content",
    "init",
    "is_initialised",
    "policy_of",
    "set_status",
    "shutdown",
    "write",
]
