"""Per-channel runtime state: file sink, standard stream, and content flag.

Purpose
-------
Own the five channel files and stream bindings on behalf of the engine and
enforce the lifecycle ``Unconfigured -> Open -> Written -> Closed``.

Contents
--------
* :class:`ChannelState` - mutable record for one channel.
* :class:`ChannelSinkSet` - configure/write/close/has_content operations.
* :func:`creation_banner` - first bytes of every channel file.

System Role
-----------
Application-layer service. It depends only on ports, so the filesystem and the
standard streams are injected by the runtime composition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import Mapping

from lib_log_channels.domain.channels import Channel, OutputTarget, policy_of
from lib_log_channels.domain.errors import ChannelNotOpenError

from .ports import ClockPort, FileSinkFactory, FileSinkPort, StreamPort

logger = logging.getLogger(__name__)

BANNER_PREFIX = b"File created "


def creation_banner(moment: datetime) -> bytes:
    """Return the banner written at the top of each channel file.

    The timestamp uses the fixed-width ``asctime`` layout followed by a line
    feed.

    Examples
    --------
    >>> creation_banner(datetime(2024, 3, 5, 7, 8, 9))
    b'File created Tue Mar  5 07:08:09 2024\\n'
    """

    return BANNER_PREFIX + moment.ctime().encode("ascii") + b"\n"


@dataclass(slots=True)
class ChannelState:
    """Runtime sinks of a single channel."""

    file_sink: FileSinkPort | None = None
    stream: StreamPort | None = None
    has_content: bool = False


class ChannelSinkSet:
    """Route formatted bytes to the file and stream owned by each channel."""

    def __init__(
        self,
        *,
        file_factory: FileSinkFactory,
        streams: Mapping[OutputTarget, StreamPort],
        clock: ClockPort,
    ) -> None:
        self._file_factory = file_factory
        self._streams = dict(streams)
        self._clock = clock
        self._states = tuple(ChannelState() for _ in Channel)
        self._configured = False

    @property
    def is_configured(self) -> bool:
        return self._configured

    def configure(self, base_path: str | PathLike[str], *, reset_content: bool = False) -> None:
        """(Re)open every channel file next to ``base_path``.

        Open files are closed first. Each channel with a file extension gets a
        freshly truncated ``<base>.<ext>`` starting with :func:`creation_banner`.
        Content flags survive reconfiguration unless ``reset_content`` is set.

        Raises
        ------
        ValueError
            When ``base_path`` has no file name component.
        OSError
            When a channel file cannot be created.
        """

        base = Path(base_path)
        if not base.name:
            raise ValueError(f"base path must name a file: {str(base_path)!r}")

        self.close()
        self._configured = False
        banner = creation_banner(self._clock.now())
        for channel in Channel:
            policy = policy_of(channel)
            state = self._states[channel.index]
            if reset_content:
                state.has_content = False
            state.file_sink = None
            if policy.file_extension is not None:
                sink = self._file_factory()
                sink.open(base.with_suffix(f".{policy.file_extension}"))
                sink.write(banner)
                state.file_sink = sink
            state.stream = self._streams.get(policy.output_target)
        self._configured = True
        logger.debug("channel files configured under %s", base)

    def write(self, channel: Channel, data: bytes) -> None:
        """Append ``data`` to the channel file and mirror it on the channel stream.

        The content flag is set even when ``data`` is empty.

        Raises
        ------
        ChannelNotOpenError
            When the sink set was never configured, or the channel persists to a
            file that is closed.
        """

        policy = policy_of(channel)
        state = self._states[channel.index]
        if not self._configured:
            raise ChannelNotOpenError(f"{channel.name} written before the channels were configured")
        file_sink = state.file_sink
        if policy.persists and (file_sink is None or not file_sink.is_open):
            raise ChannelNotOpenError(f"{channel.name} channel file is not open")

        state.has_content = True
        if not data:
            return
        if file_sink is not None:
            file_sink.write(data)
        if state.stream is not None:
            state.stream.emit(channel, data)

    def close(self) -> None:
        """Flush and close every open channel file. Safe to call repeatedly."""

        for state in self._states:
            if state.file_sink is not None and state.file_sink.is_open:
                state.file_sink.close()

    def has_content(self, channel: Channel) -> bool:
        policy_of(channel)
        return self._states[channel.index].has_content

    def path_of(self, channel: Channel) -> Path | None:
        """Return the file path bound to ``channel``; ``None`` if it has no file."""

        policy_of(channel)
        sink = self._states[channel.index].file_sink
        return sink.path if sink is not None else None


__all__ = ["BANNER_PREFIX", "ChannelSinkSet", "ChannelState", "creation_banner"]
