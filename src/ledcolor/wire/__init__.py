"""Wire format for colors: fixed 4-byte ``[R, G, B, reserved]`` records."""

from .codec import (
    RECORD_SIZE,
    RESERVED_BYTE,
    copy_to,
    decode,
    decode_from,
    encode,
    encode_many,
)

__all__ = [
    "RECORD_SIZE",
    "RESERVED_BYTE",
    "copy_to",
    "decode",
    "decode_from",
    "encode",
    "encode_many",
]
