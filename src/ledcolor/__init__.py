"""ledcolor: RGB color value type, HSV conversion, wire codec and patterns for LED control."""

__version__ = "0.1.0"

from .colors import COLORS, complement, hue_rainbow, lerp, sin_rainbow
from .models import Color

__all__ = [
    "COLORS",
    "Color",
    "complement",
    "hue_rainbow",
    "lerp",
    "sin_rainbow",
]
