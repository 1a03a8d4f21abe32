"""Unit tests for color presets and pattern generators."""

import math

import pytest

from ledcolor.colors import COLORS, HueRainbow, SinRainbow, complement, hue_rainbow, lerp, sin_rainbow
from ledcolor.exceptions import InvalidArgumentError, OutOfRangeError
from ledcolor.models import Color


class TestPresets:
    """Test the COLORS constants."""

    @pytest.mark.unit
    def test_primaries(self):
        """Test primary presets match their HSV hues."""
        assert COLORS.RED == Color.from_hsv(0, 1.0, 1.0)
        assert COLORS.GREEN == Color.from_hsv(120, 1.0, 1.0)
        assert COLORS.BLUE == Color.from_hsv(240, 1.0, 1.0)

    @pytest.mark.unit
    def test_black_and_white_are_complements(self):
        """Test that black and white complement each other."""
        assert complement(COLORS.BLACK) == COLORS.WHITE
        assert COLORS.BLACK == Color.off()


class TestHueRainbow:
    """Test hue_rainbow generator."""

    @pytest.mark.unit
    def test_six_colors_sixty_degrees_apart(self):
        """Test the classic six-step rainbow."""
        rainbow = hue_rainbow(6)
        assert isinstance(rainbow, HueRainbow)
        assert list(rainbow) == [
            Color(255, 0, 0),
            Color(255, 255, 0),
            Color(0, 255, 0),
            Color(0, 255, 255),
            Color(0, 0, 255),
            Color(255, 0, 255),
        ]

    @pytest.mark.unit
    def test_first_color_is_hue_start(self):
        """Test the first color comes from hue_start."""
        assert hue_rainbow(10, hue_start=120)[0] == Color(0, 255, 0)

    @pytest.mark.unit
    def test_matches_from_hsv(self):
        """Test every element equals from_hsv at the computed hue."""
        amount = 7
        rainbow = hue_rainbow(amount, hue_start=15, hue_percent=0.5, saturation=0.6, value=0.8)
        for i, color in enumerate(rainbow):
            hue = 15 + 360.0 * 0.5 / amount * i
            assert color == Color.from_hsv(hue, 0.6, 0.8)

    @pytest.mark.unit
    def test_len_and_restart(self):
        """Test the sequence is sized and can be iterated repeatedly."""
        rainbow = hue_rainbow(12)
        assert len(rainbow) == 12
        first = list(rainbow)
        second = list(rainbow)
        assert first == second
        assert len(first) == 12

    @pytest.mark.unit
    def test_indexing_and_slicing(self):
        """Test negative indices, slices and bounds."""
        rainbow = hue_rainbow(6)
        assert rainbow[-1] == Color(255, 0, 255)
        assert rainbow[1:3] == [Color(255, 255, 0), Color(0, 255, 0)]
        assert rainbow[::-1][0] == Color(255, 0, 255)
        with pytest.raises(IndexError):
            rainbow[6]
        with pytest.raises(IndexError):
            rainbow[-7]

    @pytest.mark.unit
    def test_contains(self):
        """Test membership checks work through the Sequence interface."""
        assert Color(0, 0, 255) in hue_rainbow(6)
        assert Color(1, 2, 3) not in hue_rainbow(6)

    @pytest.mark.unit
    def test_zero_amount_is_empty(self):
        """Test amount 0 gives an empty sequence."""
        assert list(hue_rainbow(0)) == []
        assert len(hue_rainbow(0)) == 0

    @pytest.mark.unit
    def test_negative_amount_rejected(self):
        """Test a negative amount raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            hue_rainbow(-1)

    @pytest.mark.unit
    def test_invalid_saturation_rejected_eagerly(self):
        """Test bad HSV parameters fail at creation, even for an empty sequence."""
        with pytest.raises(OutOfRangeError):
            hue_rainbow(0, saturation=1.5)
        with pytest.raises(OutOfRangeError):
            hue_rainbow(3, value=-0.1)


class TestSinRainbow:
    """Test sin_rainbow generator."""

    @pytest.mark.unit
    def test_first_red_channel_peaks(self):
        """Test that the default offset starts red at floor + width."""
        rainbow = sin_rainbow(12)
        assert isinstance(rainbow, SinRainbow)
        assert len(rainbow) == 12
        assert rainbow[0].r == 255

    @pytest.mark.unit
    def test_channels_follow_formula(self):
        """Test each channel against the sine formula, truncated toward zero."""
        amount = 9
        for i, color in enumerate(sin_rainbow(amount, floor=100, width=50, range=0.5, offset=0.3)):
            angle = 0.3 + (2 * math.pi * 0.5) / amount * i
            expected = [
                math.trunc(100 + 50 * math.sin(angle + phase))
                for phase in (0, 2 * math.pi / 3, 2 * 2 * math.pi / 3)
            ]
            assert list(color.to_rgb_tuple()) == expected

    @pytest.mark.unit
    def test_flat_wave(self):
        """Test zero width yields the floor on every channel."""
        assert list(sin_rainbow(4, floor=40, width=0)) == [Color(40, 40, 40)] * 4

    @pytest.mark.unit
    def test_overshoot_clamps(self):
        """Test that values beyond the byte range saturate instead of wrapping."""
        assert list(sin_rainbow(3, floor=300, width=0)) == [Color(255, 255, 255)] * 3
        assert list(sin_rainbow(3, floor=-50, width=0)) == [Color(0, 0, 0)] * 3

        for color in sin_rainbow(50, floor=0, width=255):
            assert all(0 <= channel <= 255 for channel in color.to_rgb_tuple())

    @pytest.mark.unit
    def test_default_range_stays_in_bytes(self):
        """Test the default floor/width pair never leaves 0-255."""
        for color in sin_rainbow(360):
            assert all(0 <= channel <= 255 for channel in color.to_rgb_tuple())

    @pytest.mark.unit
    def test_zero_and_negative_amount(self):
        """Test empty and invalid amounts."""
        assert list(sin_rainbow(0)) == []
        with pytest.raises(InvalidArgumentError):
            sin_rainbow(-3)


class TestLerp:
    """Test linear interpolation."""

    @pytest.mark.unit
    def test_endpoints(self, strip_colors):
        """Test lerp(a, b, 0) == a and lerp(a, b, 1) == b."""
        for a in strip_colors:
            for b in strip_colors:
                assert lerp(a, b, 0) == a
                assert lerp(a, b, 1) == b

    @pytest.mark.unit
    def test_midpoint_truncates(self):
        """Test that fractional results truncate toward zero."""
        assert lerp(COLORS.BLACK, COLORS.WHITE, 0.5) == Color(127, 127, 127)
        assert lerp(COLORS.WHITE, COLORS.BLACK, 0.5) == Color(127, 127, 127)

    @pytest.mark.unit
    def test_extrapolation_clamps(self):
        """Test t outside [0, 1] extrapolates and clamps at the byte limits."""
        a = Color(100, 100, 100)
        b = Color(200, 150, 100)
        assert lerp(a, b, 2.0) == Color(255, 200, 100)
        assert lerp(a, b, -2.0) == Color(0, 0, 100)

    @pytest.mark.unit
    @pytest.mark.parametrize("t", [math.inf, -math.inf, math.nan])
    def test_non_finite_t_rejected(self, t):
        """Test infinite or NaN t raises instead of producing a channel."""
        with pytest.raises(OutOfRangeError):
            lerp(COLORS.BLACK, COLORS.WHITE, t)
        with pytest.raises(OutOfRangeError):
            COLORS.BLACK.lerp(COLORS.WHITE, t)


class TestComplement:
    """Test complement."""

    @pytest.mark.unit
    def test_complement(self):
        """Test per-channel 255 - value."""
        assert complement(Color(10, 20, 30)) == Color(245, 235, 225)

    @pytest.mark.unit
    def test_involution(self, channel_grid):
        """Test complement(complement(c)) == c."""
        for color in channel_grid[::7]:
            assert complement(complement(color)) == color
