"""Bounded message formatting shared by every channel.

Purpose
-------
Turn a caller message into the exact bytes a channel emits: the optional
status prefix, the channel header, and the payload with bare line feeds
expanded to CRLF, all inside a buffer whose size is fixed up front.

Contents
--------
* :data:`LOG_BUFFER_SIZE`, :data:`MAX_STATUS_SIZE`, :data:`MAX_MESSAGE_BYTES`.
* :class:`BoundedWriter` - cursor over a pre-sized ``bytearray``.
* :func:`render_message` - ``str.format`` rendering of caller arguments.
* :func:`normalize_line_endings` / :func:`normalize_newlines` - CRLF pass.
* :func:`format_message` - the full pipeline returning :class:`FormattedMessage`.

System Role
-----------
Pure domain logic: no I/O, no shared state. Each call owns its own writer so
concurrent callers never share a scratch buffer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .channels import ChannelPolicy
from .errors import MessageTooLongError

LOG_BUFFER_SIZE = 2048
"""Capacity of the scratch buffer; rendered messages must stay below it."""

MAX_STATUS_SIZE = 1024
"""Maximum number of status bytes copied in front of a payload."""

MAX_MESSAGE_BYTES = LOG_BUFFER_SIZE - 1
"""Upper bound on the bytes a single write may emit."""

_CR = 0x0D
_STATUS_SEPARATOR = b": "


class BoundedWriter:
    """Append-only cursor over a fixed-length byte region.

    Writes that do not fit are truncated; the writer never grows.

    Examples
    --------
    >>> writer = BoundedWriter(4)
    >>> writer.write(b"abcdef")
    4
    >>> writer.getvalue(), writer.remaining
    (b'abcd', 0)
    """

    __slots__ = ("_buffer", "_position")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._buffer = bytearray(capacity)
        self._position = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def written(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._position

    def write(self, data: bytes) -> int:
        """Copy as much of ``data`` as fits and return the number of bytes copied."""

        count = min(len(data), self.remaining)
        if count:
            end = self._position + count
            self._buffer[self._position : end] = memoryview(data)[:count]
            self._position = end
        return count

    def getvalue(self) -> bytes:
        return bytes(self._buffer[: self._position])


@dataclass(frozen=True, slots=True)
class FormattedMessage:
    """Final bytes for one write."""

    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def text(self) -> str:
        """Return the payload decoded for text streams."""

        return self.data.decode("utf-8", errors="replace")


def render_message(template: str, *args: Any, **kwargs: Any) -> str:
    """Render ``template`` with ``str.format`` when arguments are supplied.

    Plain messages are returned untouched so literal braces survive.

    Examples
    --------
    >>> render_message("{} of {total}", 3, total=5)
    '3 of 5'
    >>> render_message("{literal}")
    '{literal}'
    """

    if not args and not kwargs:
        return template
    return template.format(*args, **kwargs)


def normalize_line_endings(data: bytes, writer: BoundedWriter) -> int:
    """Copy ``data`` into ``writer`` turning bare line feeds into CRLF.

    A line feed gains a carriage return unless it is the very first byte of
    ``data`` or is already preceded by one. Copying stops once the writer is
    full; a CRLF pair is never split. Returns the number of bytes written.
    """

    start = writer.written
    cursor = 0
    length = len(data)
    while cursor < length:
        newline = data.find(b"\n", cursor)
        if newline == -1:
            _write_whole_characters(data[cursor:], writer)
            break
        chunk = data[cursor:newline]
        if len(chunk) > writer.remaining:
            _write_whole_characters(chunk, writer)
            break
        writer.write(chunk)
        ending = b"\r\n" if newline > 0 and data[newline - 1] != _CR else b"\n"
        if writer.remaining < len(ending):
            break
        writer.write(ending)
        cursor = newline + 1
    return writer.written - start


def normalize_newlines(data: bytes, limit: int = MAX_MESSAGE_BYTES) -> bytes:
    """Return ``data`` with bare line feeds expanded, truncated to ``limit`` bytes.

    Examples
    --------
    >>> normalize_newlines(b"a\\nb")
    b'a\\r\\nb'
    >>> normalize_newlines(b"\\n")
    b'\\n'
    """

    writer = BoundedWriter(limit)
    normalize_line_endings(data, writer)
    return writer.getvalue()


def _utf8_boundary(data: bytes, limit: int) -> int:
    """Return the largest cut point <= ``limit`` that does not split a UTF-8 character.

    Examples
    --------
    >>> _utf8_boundary("\u00e9\u00e9".encode("utf-8"), 3)
    2
    """

    if limit >= len(data):
        return len(data)
    while limit > 0 and data[limit] & 0xC0 == 0x80:
        limit -= 1
    return limit


def _write_whole_characters(data: bytes, writer: BoundedWriter) -> int:
    return writer.write(data[: _utf8_boundary(data, writer.remaining)])


def _truncate_utf8(data: bytes, limit: int) -> bytes:
    return data[: _utf8_boundary(data, limit)]


def format_message(message: str, policy: ChannelPolicy, status: str = "") -> FormattedMessage:
    """Compose the bytes a channel emits for ``message``.

    Layout: ``[status ": "]`` when the policy asks for a prefix and ``status``
    is non-empty, then ``policy.header``, then the CRLF-normalized payload.
    The payload is truncated so the whole result never exceeds
    :data:`MAX_MESSAGE_BYTES`.

    Raises
    ------
    MessageTooLongError
        When the UTF-8 encoded message reaches :data:`LOG_BUFFER_SIZE`.
    """

    payload = message.encode("utf-8")
    if len(payload) >= LOG_BUFFER_SIZE:
        raise MessageTooLongError(
            f"rendered message is {len(payload)} bytes; it must stay below {LOG_BUFFER_SIZE}",
        )

    writer = BoundedWriter(MAX_MESSAGE_BYTES)
    if policy.add_status_prefix and status:
        writer.write(_truncate_utf8(status.encode("utf-8"), MAX_STATUS_SIZE))
        writer.write(_STATUS_SEPARATOR)
    if policy.header:
        writer.write(policy.header.encode("utf-8"))
    normalize_line_endings(payload, writer)

    result = writer.getvalue()
    assert len(result) <= MAX_MESSAGE_BYTES
    return FormattedMessage(result)


__all__ = [
    "BoundedWriter",
    "FormattedMessage",
    "LOG_BUFFER_SIZE",
    "MAX_MESSAGE_BYTES",
    "MAX_STATUS_SIZE",
    "format_message",
    "normalize_line_endings",
    "normalize_newlines",
    "render_message",
]
