"""Use case turning a caller message into channel output.

Purpose
-------
Join the formatter and the sink set: render the caller arguments, apply the
status prefix, header and CRLF pass for the channel's policy, then route the
bytes.

Contents
--------
* :func:`create_write_message` - factory returning the per-call callable.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from lib_log_channels.domain.channels import Channel, policy_of
from lib_log_channels.domain.formatting import FormattedMessage, format_message, render_message
from lib_log_channels.application.sinks import ChannelSinkSet


class WriteMessage(Protocol):
    def __call__(self, channel: Channel, message: str, /, *args: Any, **kwargs: Any) -> FormattedMessage: ...


def create_write_message(*, sinks: ChannelSinkSet, status: Callable[[], str]) -> WriteMessage:
    """Build the write pipeline bound to ``sinks``.

    Parameters
    ----------
    sinks:
        Channel sink set receiving the formatted bytes.
    status:
        Zero-argument callable returning the current status string; read on
        every call so later :meth:`set_status` calls take effect.
    """

    def write_message(channel: Channel, message: str, /, *args: Any, **kwargs: Any) -> FormattedMessage:
        policy = policy_of(channel)
        rendered = render_message(message, *args, **kwargs)
        formatted = format_message(rendered, policy, status())
        sinks.write(channel, formatted.data)
        return formatted

    return write_message


__all__ = ["WriteMessage", "create_write_message"]
