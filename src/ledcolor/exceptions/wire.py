"""Wire format exceptions.

This module defines exceptions raised by the 4-byte color record codec:
- WireFormatError: Base class for codec errors
- TruncatedInputError: Not enough bytes to decode the requested colors
- BufferTooSmallError: Destination buffer cannot hold an encoded record
"""

from .base import LedColorError


class WireFormatError(LedColorError):
    """Color records could not be read or written."""
    pass


class TruncatedInputError(WireFormatError):
    """Fewer bytes are available than the requested color count needs."""

    def __init__(self, count: int, expected: int, available: int):
        """
        Initialize truncated input error.

        Args:
            count: Number of colors requested
            expected: Bytes required for `count` records
            available: Bytes actually available
        """
        super().__init__(
            user_message=f"Color data is truncated: expected {expected} bytes, got {available}",
            technical_message=(
                f"Cannot decode {count} color records: need {expected} bytes, "
                f"only {available} available"
            ),
            recovery_hint="Check that the color count matches the payload length",
        )
        self.count = count
        self.expected = expected
        self.available = available


class BufferTooSmallError(WireFormatError):
    """The destination buffer is too small for an in-place encode."""

    def __init__(self, offset: int, required: int, available: int):
        """
        Initialize buffer too small error.

        Args:
            offset: Offset the record was to be written at
            required: Buffer length needed to hold the record at `offset`
            available: Actual buffer length
        """
        super().__init__(
            user_message=f"Buffer too small: need {required} bytes, buffer has {available}",
            technical_message=(
                f"Cannot write color record at offset {offset}: "
                f"buffer length {available} < {required}"
            ),
            recovery_hint="Allocate 4 bytes per color before copying records into the buffer",
        )
        self.offset = offset
        self.required = required
        self.available = available
