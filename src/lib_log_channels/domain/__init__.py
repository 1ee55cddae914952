"""Domain types and pure algorithms used by the channel logger."""

from __future__ import annotations

from .channels import CHANNEL_POLICIES, Channel, ChannelPolicy, OutputTarget, policy_of
from .errors import (
    ChannelNotOpenError,
    CheckFailedError,
    ContractViolationError,
    LogChannelsError,
    MessageTooLongError,
    UnknownChannelError,
)
from .formatting import (
    LOG_BUFFER_SIZE,
    MAX_MESSAGE_BYTES,
    MAX_STATUS_SIZE,
    BoundedWriter,
    FormattedMessage,
    format_message,
    normalize_newlines,
    render_message,
)

__all__ = [
    "BoundedWriter",
    "CHANNEL_POLICIES",
    "Channel",
    "ChannelNotOpenError",
    "ChannelPolicy",
    "CheckFailedError",
    "ContractViolationError",
    "FormattedMessage",
    "LOG_BUFFER_SIZE",
    "LogChannelsError",
    "MAX_MESSAGE_BYTES",
    "MAX_STATUS_SIZE",
    "MessageTooLongError",
    "OutputTarget",
    "UnknownChannelError",
    "format_message",
    "normalize_newlines",
    "policy_of",
    "render_message",
]
