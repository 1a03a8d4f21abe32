"""Narrowing of computed values into 8-bit color channels.

Every conversion that produces a channel from floating point math goes
through one of these helpers, so the overflow behavior is the same
everywhere:

- HSV conversion uses :func:`round_channel` (nearest, ties to even).
  Rounding is what makes ``Color.from_hsv(*color.to_hsv()) == color`` exact
  for every byte triple; truncation would lose one step whenever the float
  math lands just below an integer.
- Generators (sine rainbow, lerp) use :func:`truncate_channel` (toward zero).

Both clamp into [0, 255] *after* narrowing. Values never wrap modulo 256:
a sine rainbow dipping to -1 yields 0, not 255.
"""

import math

from ledcolor.exceptions import OutOfRangeError

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp_channel(value: int) -> int:
    """Clamp an integer into the 0-255 channel range."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, value))


def round_channel(value: float) -> int:
    """Round to the nearest integer (ties to even), then clamp.

    Example:
        >>> round_channel(127.5)
        128
        >>> round_channel(255.7)
        255
    """
    return clamp_channel(round(value))


def truncate_channel(value: float) -> int:
    """Truncate toward zero, then clamp.

    Example:
        >>> truncate_channel(127.9)
        127
        >>> truncate_channel(-0.5)
        0
        >>> truncate_channel(-40.0)
        0
    """
    return clamp_channel(math.trunc(value))


def check_unit_interval(name: str, value: float) -> float:
    """Reject values outside [0.0, 1.0] (NaN included).

    Raises:
        OutOfRangeError: If value is not within [0.0, 1.0]
    """
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeError(name, value, "between 0.0 and 1.0")
    return value
