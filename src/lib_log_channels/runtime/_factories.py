"""Factories for the concrete collaborators of :class:`LogEngine`."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from lib_log_channels.adapters import RichStreamAdapter
from lib_log_channels.application.ports import ClockPort, StreamPort
from lib_log_channels.domain import Channel, OutputTarget


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware local timestamps."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


def create_streams(*, colorize: bool = False, force_color: bool = False) -> Mapping[OutputTarget, StreamPort]:
    """Return one Rich stream adapter per standard stream."""

    return {
        target: RichStreamAdapter(target, colorize=colorize, force_color=force_color)
        for target in (OutputTarget.STDERR, OutputTarget.STDOUT)
    }


def coerce_channel(channel: Channel | str) -> Channel:
    """Normalise channel inputs (enum or name) into :class:`Channel`.

    Examples
    --------
    >>> coerce_channel("note") is Channel.NOTE
    True
    >>> coerce_channel(Channel.ERROR) is Channel.ERROR
    True
    """

    if isinstance(channel, Channel):
        return channel
    return Channel.from_name(channel)


__all__ = ["SystemClock", "coerce_channel", "create_streams"]
