"""Named colors and color pattern generators.

All colors are standard 8-bit RGB (0-255 per channel). Callers that need a
wire representation encode them with ``ledcolor.wire``.

Example:
    ```python
    from ledcolor.colors import COLORS, hue_rainbow, lerp

    strip = list(hue_rainbow(30, saturation=0.8))
    fade = [lerp(COLORS.RED, COLORS.BLUE, i / 9) for i in range(10)]
    ```
"""

from ledcolor.models.color import Color

from .patterns import (
    ColorSequence,
    HueRainbow,
    SinRainbow,
    complement,
    hue_rainbow,
    lerp,
    sin_rainbow,
)


class COLORS:
    """Standard color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # PRIMARY COLORS (Full saturation)
    # ============================================================================

    RED: Color = Color(255, 0, 0)
    GREEN: Color = Color(0, 255, 0)
    BLUE: Color = Color(0, 0, 255)
    YELLOW: Color = Color(255, 255, 0)
    MAGENTA: Color = Color(255, 0, 255)
    CYAN: Color = Color(0, 255, 255)
    WHITE: Color = Color(255, 255, 255)
    BLACK: Color = Color(0, 0, 0)
    """Black (off)"""

    # ============================================================================
    # SECONDARY COLORS
    # ============================================================================

    ORANGE: Color = Color(255, 128, 0)
    PURPLE: Color = Color(128, 0, 255)
    PINK: Color = Color(255, 0, 128)
    LIME: Color = Color(128, 255, 0)
    TEAL: Color = Color(0, 255, 128)
    INDIGO: Color = Color(0, 128, 255)

    # ============================================================================
    # GREYS
    # ============================================================================

    GREY_DARK: Color = Color(64, 64, 64)
    """Dark grey - 25% brightness"""

    GREY: Color = Color(128, 128, 128)
    """Mid grey - 50% brightness"""

    GREY_LIGHT: Color = Color(192, 192, 192)
    """Light grey - 75% brightness"""


__all__ = [
    "COLORS",
    "ColorSequence",
    "HueRainbow",
    "SinRainbow",
    "complement",
    "hue_rainbow",
    "lerp",
    "sin_rainbow",
]
