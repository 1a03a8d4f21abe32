"""Patterned color sequences for addressable lighting.

Generators return :class:`ColorSequence` objects rather than one-shot
iterators. A sequence stores only its parameters and computes each color on
access, so it is lazy, has a known ``len()``, supports indexing and slicing,
and can be iterated any number of times::

    >>> rainbow = hue_rainbow(6)
    >>> len(rainbow)
    6
    >>> rainbow[0]
    Color(r=255, g=0, b=0)
    >>> list(rainbow) == list(rainbow)
    True

An ``amount`` of zero gives an empty sequence. A negative ``amount`` raises
:class:`~ledcolor.exceptions.InvalidArgumentError`.
"""

import math
import operator
from collections.abc import Iterator, Sequence
from typing import overload

from ledcolor.exceptions import InvalidArgumentError
from ledcolor.models.color import Color
from ledcolor.utils.channels import check_unit_interval, truncate_channel

_THIRD_TURN = 2 * math.pi / 3


class ColorSequence(Sequence[Color]):
    """Base class for lazily generated, finite, restartable color sequences.

    Subclasses implement :meth:`_color_at` for indices in ``[0, len(self))``.
    """

    def __init__(self, amount: int):
        amount = operator.index(amount)
        if amount < 0:
            raise InvalidArgumentError("amount", amount, "must be zero or positive")
        self._amount = amount

    def _color_at(self, index: int) -> Color:
        raise NotImplementedError

    def __len__(self) -> int:
        return self._amount

    @overload
    def __getitem__(self, index: int) -> Color: ...

    @overload
    def __getitem__(self, index: slice) -> list[Color]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._color_at(i) for i in range(*index.indices(self._amount))]

        index = operator.index(index)
        if index < 0:
            index += self._amount
        if not 0 <= index < self._amount:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._color_at(index)

    def __iter__(self) -> Iterator[Color]:
        for i in range(self._amount):
            yield self._color_at(i)


class HueRainbow(ColorSequence):
    """Colors sampled at evenly spaced hues through :meth:`Color.from_hsv`."""

    def __init__(
        self,
        amount: int,
        hue_start: float = 0,
        hue_percent: float = 1.0,
        saturation: float = 1.0,
        value: float = 1.0,
    ):
        super().__init__(amount)
        self.hue_start = hue_start
        self.hue_percent = hue_percent
        self.saturation = check_unit_interval("saturation", saturation)
        self.value = check_unit_interval("value", value)

    def _color_at(self, index: int) -> Color:
        hue = self.hue_start + 360.0 * self.hue_percent / self._amount * index
        return Color.from_hsv(hue, self.saturation, self.value)

    def __repr__(self) -> str:
        return (
            f"HueRainbow(amount={self._amount}, hue_start={self.hue_start}, "
            f"hue_percent={self.hue_percent}, saturation={self.saturation}, value={self.value})"
        )


class SinRainbow(ColorSequence):
    """Colors from three sine waves a third of a turn apart.

    Each channel is ``floor + width * sin(offset + 2*pi*range/amount*i + phase)``
    with phase 0, 2*pi/3 and 4*pi/3 for red, green and blue. Results are
    truncated toward zero and clamped into [0, 255], so a ``floor``/``width``
    pair that overshoots saturates at the channel limits instead of wrapping.
    """

    def __init__(
        self,
        amount: int,
        floor: int = 127,
        width: int = 128,
        range: float = 1.0,
        offset: float = math.pi / 2,
    ):
        super().__init__(amount)
        self.floor = floor
        self.width = width
        self.range = range
        self.offset = offset

    def _channel(self, angle: float) -> int:
        return truncate_channel(self.floor + self.width * math.sin(angle))

    def _color_at(self, index: int) -> Color:
        angle = self.offset + (2 * math.pi * self.range) / self._amount * index
        return Color(
            self._channel(angle),
            self._channel(angle + _THIRD_TURN),
            self._channel(angle + 2 * _THIRD_TURN),
        )

    def __repr__(self) -> str:
        return (
            f"SinRainbow(amount={self._amount}, floor={self.floor}, width={self.width}, "
            f"range={self.range}, offset={self.offset})"
        )


def hue_rainbow(
    amount: int,
    hue_start: float = 0,
    hue_percent: float = 1.0,
    saturation: float = 1.0,
    value: float = 1.0,
) -> HueRainbow:
    """Generate a smooth rainbow by stepping through hues.

    Args:
        amount: How many colors to generate
        hue_start: The hue of the first color, in degrees
        hue_percent: How much of the hue circle to use; 1.0 is the full circle
        saturation: HSV saturation of every color, 0.0 to 1.0
        value: HSV value of every color, 0.0 to 1.0

    Raises:
        InvalidArgumentError: If amount is negative
        OutOfRangeError: If saturation or value is outside [0, 1]
    """
    return HueRainbow(amount, hue_start, hue_percent, saturation, value)


def sin_rainbow(
    amount: int,
    floor: int = 127,
    width: int = 128,
    range: float = 1.0,
    offset: float = math.pi / 2,
) -> SinRainbow:
    """Generate a smooth rainbow from phase-shifted sine waves.

    Args:
        amount: How many colors to generate
        floor: The least bright any channel can be
        width: The brightness variation of any channel
        range: Fraction of the full wave spread across the sequence
        offset: Angle (radians) the first color is generated with

    Raises:
        InvalidArgumentError: If amount is negative
    """
    return SinRainbow(amount, floor, width, range, offset)


def lerp(a: Color, b: Color, t: float) -> Color:
    """Get the color between ``a`` and ``b`` at ``t`` (see :meth:`Color.lerp`)."""
    return a.lerp(b, t)


def complement(color: Color) -> Color:
    """Get the complement of ``color``; the two sum to white per channel."""
    return color.complement()
