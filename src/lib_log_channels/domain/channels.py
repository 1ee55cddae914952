"""Channel identities and their static routing policies.

Purpose
-------
Describe the five output channels and the fixed rule each one follows: which
file extension it persists to, which header it carries, which standard stream
mirrors it, and whether the shared status string is prefixed.

Contents
--------
* :class:`Channel` - ordered, contiguous channel enumeration.
* :class:`OutputTarget` - standard stream selector.
* :class:`ChannelPolicy` - immutable routing rule.
* :data:`CHANNEL_POLICIES` / :func:`policy_of` - the read-only policy table.

System Role
-----------
Leaf of the dependency graph. The formatter, the sink set, and the engine look
policies up here on every write; nothing mutates the table at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownChannelError


class Channel(Enum):
    """Independent logging destinations, iterable from first to last."""

    ERROR = 0
    WARNING = 1
    SCREEN = 2
    NOTE = 3
    FILE_ONLY = 4

    @property
    def index(self) -> int:
        """Return the position of the channel inside per-channel arrays."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Channel":
        """Resolve a case-insensitive channel name.

        Examples
        --------
        >>> Channel.from_name("warning") is Channel.WARNING
        True
        >>> Channel.from_name("file") is Channel.FILE_ONLY
        True
        """

        normalized = name.strip().upper().replace("-", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown channel: {name!r}") from exc


_ALIASES = {"FILE": "FILE_ONLY", "FILEONLY": "FILE_ONLY", "WARN": "WARNING", "ERR": "ERROR"}


class OutputTarget(Enum):
    """Standard stream that mirrors a channel, if any."""

    STDERR = "stderr"
    STDOUT = "stdout"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ChannelPolicy:
    """Static routing rule attached to one :class:`Channel`.

    Attributes
    ----------
    file_extension:
        Extension substituted into the base path; ``None`` means the channel
        never persists to a file.
    header:
        Label written before every payload (may be empty).
    output_target:
        Standard stream that also receives the message.
    add_status_prefix:
        Whether the shared status string is injected before the payload.
    """

    file_extension: str | None
    header: str
    output_target: OutputTarget
    add_status_prefix: bool

    @property
    def persists(self) -> bool:
        return self.file_extension is not None


CHANNEL_POLICIES: Mapping[Channel, ChannelPolicy] = MappingProxyType(
    {
        Channel.ERROR: ChannelPolicy("err", "Error: ", OutputTarget.STDERR, True),
        Channel.WARNING: ChannelPolicy("warn", "Warning: ", OutputTarget.STDERR, True),
        Channel.SCREEN: ChannelPolicy(None, "", OutputTarget.STDOUT, False),
        Channel.NOTE: ChannelPolicy("log", "", OutputTarget.STDOUT, False),
        Channel.FILE_ONLY: ChannelPolicy("file", "", OutputTarget.NONE, True),
    }
)
"""Shipped policy set, one entry per :class:`Channel`."""


def policy_of(channel: Channel) -> ChannelPolicy:
    """Return the policy for ``channel``.

    Raises
    ------
    UnknownChannelError
        When ``channel`` is not a :class:`Channel` member.

    Examples
    --------
    >>> policy_of(Channel.NOTE).file_extension
    'log'
    """

    if not isinstance(channel, Channel):
        raise UnknownChannelError(f"Not a log channel: {channel!r}")
    return CHANNEL_POLICIES[channel]


__all__ = ["CHANNEL_POLICIES", "Channel", "ChannelPolicy", "OutputTarget", "policy_of"]
