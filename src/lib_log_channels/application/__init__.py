"""Application layer: ports, the channel sink set, and use cases."""

from __future__ import annotations

from .sinks import ChannelSinkSet, ChannelState, creation_banner

__all__ = ["ChannelSinkSet", "ChannelState", "creation_banner"]
