"""Color model for LED control."""

import math
import string

from pydantic import BaseModel, ConfigDict, Field

from ledcolor.exceptions import InvalidArgumentError, OutOfRangeError
from ledcolor.utils.channels import check_unit_interval, round_channel, truncate_channel

# Which of the (v, p, q, t) candidates feed (r, g, b) in each 60 degree hue sector
_HSV_SECTORS: tuple[tuple[int, int, int], ...] = (
    (0, 3, 1),  # v, t, p
    (2, 0, 1),  # q, v, p
    (1, 0, 3),  # p, v, t
    (1, 2, 0),  # p, q, v
    (3, 1, 0),  # t, p, v
    (0, 1, 2),  # v, p, q
)


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Three independent 0-255 channels. Colors compare and hash by ``(r, g, b)``
    only. The model is frozen: operations return new instances, and
    :meth:`replace` stands in for channel setters.

    Channels may be given positionally or by keyword::

        >>> Color(255, 128, 0) == Color(r=255, g=128, b=0)
        True
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(default=0, ge=0, le=255, description="Red (0-255)")
    g: int = Field(default=0, ge=0, le=255, description="Green (0-255)")
    b: int = Field(default=0, ge=0, le=255, description="Blue (0-255)")

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        super().__init__(r=r, g=g, b=b)

    def __str__(self) -> str:
        # Trailing space is part of the established display format
        return f"R:{self.r}, G:{self.g}, B:{self.b} "

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(0, 0, 0)

    @classmethod
    def from_hex(cls, hex_string: str) -> "Color":
        """Parse a CSS hex color string ('#FF8000' or 'FF8000').

        Raises:
            InvalidArgumentError: If the string is not six hex digits
        """
        digits = hex_string[1:] if hex_string.startswith("#") else hex_string
        if len(digits) != 6 or not all(ch in string.hexdigits for ch in digits):
            raise InvalidArgumentError("hex color", hex_string, "expected six hex digits like '#FF8000'")
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        """Create a color from HSV values.

        Args:
            hue: Degrees. Any finite value; wraps into [0, 360).
            saturation: 0.0 to 1.0
            value: 0.0 to 1.0

        Returns:
            The color converted to RGB. Channels are rounded to nearest
            (ties to even) and clamped, see ``ledcolor.utils.channels``.

        Raises:
            OutOfRangeError: If saturation or value is outside [0, 1],
                or hue is not finite

        Example:
            >>> Color.from_hsv(0, 1.0, 1.0)
            Color(r=255, g=0, b=0)
            >>> Color.from_hsv(-120, 1.0, 1.0)
            Color(r=0, g=0, b=255)
        """
        check_unit_interval("saturation", saturation)
        check_unit_interval("value", value)
        if not math.isfinite(hue):
            raise OutOfRangeError("hue", hue, "a finite number of degrees")

        sector = math.floor(hue / 60)
        f = hue / 60 - sector

        value *= 255
        candidates = (
            round_channel(value),
            round_channel(value * (1 - saturation)),
            round_channel(value * (1 - f * saturation)),
            round_channel(value * (1 - (1 - f) * saturation)),
        )

        r, g, b = _HSV_SECTORS[sector % 6]
        return cls(candidates[r], candidates[g], candidates[b])

    def to_hsv(self) -> tuple[float, float, float]:
        """Convert to HSV.

        Returns:
            ``(hue, saturation, value)`` with hue in [0, 360) and the other
            two in [0.0, 1.0]. Achromatic colors (all channels equal) have
            hue 0.
        """
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        delta = high - low

        hue = 0.0
        if delta != 0:
            if self.r == high:
                hue = (self.g - self.b) / delta
            elif self.g == high:
                hue = 2.0 + (self.b - self.r) / delta
            else:
                hue = 4.0 + (self.r - self.g) / delta

        hue *= 60
        if hue < 0.0:
            hue += 360

        saturation = 0.0 if high == 0 else 1.0 - low / high
        return hue, saturation, high / 255

    def clone(self) -> "Color":
        """Return an independent copy with the same channel values."""
        return self.model_copy()

    def replace(self, **channels: int) -> "Color":
        """Return a new color with the given channels changed.

        Example:
            >>> Color(10, 20, 30).replace(g=200)
            Color(r=10, g=200, b=30)
        """
        return type(self)(**{**self.model_dump(), **channels})

    def lerp(self, other: "Color", t: float) -> "Color":
        """Linearly interpolate towards ``other``.

        ``t`` is not clamped: values outside [0, 1] extrapolate. Channels
        are truncated toward zero and clamped into [0, 255].

        Raises:
            OutOfRangeError: If ``t`` is infinite or NaN
        """
        if not math.isfinite(t):
            raise OutOfRangeError("t", t, "a finite number")
        return type(self)(
            truncate_channel(self.r + (other.r - self.r) * t),
            truncate_channel(self.g + (other.g - self.g) * t),
            truncate_channel(self.b + (other.b - self.b) * t),
        )

    def complement(self) -> "Color":
        """Return the color that sums with this one to white."""
        return type(self)(255 - self.r, 255 - self.g, 255 - self.b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(255, 0, 0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
