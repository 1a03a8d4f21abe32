"""
Codec for the 4-byte color record of the lighting-control protocol.

Record Layout
=============

Every color travels as a fixed, tightly packed 4-byte record::

    [R] [G] [B] [reserved]
     │   │   │   └─ Always written as 0; read and discarded
     │   │   └─ Blue  (u8)
     │   └─ Green (u8)
     └─ Red   (u8)

A run of ``count`` colors is simply ``count`` records back to back. The
count itself comes from the surrounding protocol message; this module does
no framing and reads no length prefix. All fields are single bytes, so byte
order does not apply.

The reserved byte is a placeholder. It is never interpreted as alpha and
never validated on read.

Decoding is all-or-nothing: if the input holds fewer than ``4 * count``
bytes, :class:`~ledcolor.exceptions.TruncatedInputError` is raised and no
colors are returned.
"""

import logging
import operator
import struct
from collections.abc import Iterable
from typing import BinaryIO

from ledcolor.exceptions import BufferTooSmallError, InvalidArgumentError, TruncatedInputError
from ledcolor.models.color import Color

logger = logging.getLogger(__name__)

RESERVED_BYTE = 0

_RECORD = struct.Struct("<BBBB")

RECORD_SIZE = _RECORD.size


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise InvalidArgumentError(name, value, "must be zero or positive")
    return value


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def decode_from(buffer: bytes | bytearray | memoryview, count: int, offset: int = 0) -> list[Color]:
    """
    Decode ``count`` color records from a bytes-like object.

    Args:
        buffer: Source bytes
        count: Number of records to decode
        offset: Position of the first record in ``buffer``

    Returns:
        The decoded colors, in wire order

    Raises:
        InvalidArgumentError: If count or offset is negative
        TruncatedInputError: If fewer than ``4 * count`` bytes follow ``offset``

    Example:
        >>> decode_from(bytes([255, 128, 0, 0]), 1)
        [Color(r=255, g=128, b=0)]
    """
    count = _non_negative("count", count)
    offset = _non_negative("offset", offset)

    needed = RECORD_SIZE * count
    available = max(0, len(buffer) - offset)
    if available < needed:
        raise TruncatedInputError(count=count, expected=needed, available=available)

    colors = []
    for position in range(offset, offset + needed, RECORD_SIZE):
        r, g, b, _reserved = _RECORD.unpack_from(buffer, position)
        colors.append(Color(r, g, b))
    return colors


def decode(stream: BinaryIO, count: int) -> list[Color]:
    """
    Read ``count`` color records from a binary stream.

    Advances the stream by ``4 * count`` bytes on success. On failure no
    colors are returned and, if the stream is seekable, its position is
    put back where it was.

    Args:
        stream: Binary stream positioned at the first record
        count: Number of records to read (supplied by the enclosing message)

    Raises:
        InvalidArgumentError: If count is negative
        TruncatedInputError: If the stream ends before ``4 * count`` bytes
    """
    count = _non_negative("count", count)
    needed = RECORD_SIZE * count

    start = stream.tell() if stream.seekable() else None
    data = _read_exact(stream, needed)

    if len(data) < needed:
        if start is not None:
            stream.seek(start)
        logger.debug(f"Truncated color block: wanted {needed} bytes, stream had {len(data)}")
        raise TruncatedInputError(count=count, expected=needed, available=len(data))

    colors = decode_from(data, count)
    logger.debug(f"Decoded {count} colors ({needed} bytes)")
    return colors


def encode(color: Color) -> bytes:
    """
    Encode one color as its 4-byte record ``[R, G, B, 0]``.

    Example:
        >>> encode(Color(255, 128, 0))
        b'\\xff\\x80\\x00\\x00'
    """
    return _RECORD.pack(color.r, color.g, color.b, RESERVED_BYTE)


def encode_many(colors: Iterable[Color]) -> bytes:
    """Encode colors as consecutive records, ready to follow a count field."""
    return b"".join(encode(color) for color in colors)


def copy_to(color: Color, buffer: bytearray | memoryview, offset: int) -> None:
    """
    Write one color record into ``buffer`` at ``offset``.

    Args:
        color: Color to write
        buffer: Writable bytes-like destination
        offset: Index of the record's first byte

    Raises:
        InvalidArgumentError: If offset is negative
        BufferTooSmallError: If ``offset + 4`` exceeds the buffer length
    """
    offset = _non_negative("offset", offset)
    required = offset + RECORD_SIZE
    if required > len(buffer):
        raise BufferTooSmallError(offset=offset, required=required, available=len(buffer))

    _RECORD.pack_into(buffer, offset, color.r, color.g, color.b, RESERVED_BYTE)
