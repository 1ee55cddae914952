"""Exception hierarchy shared by every layer of the channel logger.

Purpose
-------
Separate programming errors (contract violations) from ordinary runtime
conditions so callers can tell "fix your code" apart from "the disk is full".

Contents
--------
* :class:`LogChannelsError` - common base class.
* :class:`ContractViolationError` and its subclasses raised when the engine is
  used outside its documented lifecycle.
* :class:`CheckFailedError` raised by :meth:`LogEngine.check` on request.

System Role
-----------
File-system failures are *not* wrapped here; :class:`OSError` propagates
unchanged from the adapters.
"""

from __future__ import annotations


class LogChannelsError(Exception):
    """Base class for all errors raised by :mod:`lib_log_channels`."""


class ContractViolationError(LogChannelsError, RuntimeError):
    """Raised when calling code breaks the engine's usage contract."""


class UnknownChannelError(ContractViolationError):
    """Raised when a value that is not a :class:`Channel` is looked up."""


class ChannelNotOpenError(ContractViolationError):
    """Raised when writing to a channel whose sinks are not open."""


class MessageTooLongError(ContractViolationError, ValueError):
    """Raised when a rendered message does not fit the formatting buffer."""


class CheckFailedError(LogChannelsError):
    """Raised by a failed check when the caller asked for an exception."""


__all__ = [
    "ChannelNotOpenError",
    "CheckFailedError",
    "ContractViolationError",
    "LogChannelsError",
    "MessageTooLongError",
    "UnknownChannelError",
]
