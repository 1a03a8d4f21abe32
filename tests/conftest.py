"""Pytest fixtures for tests."""

import pytest

from ledcolor.models import Color

# Sparse grid over the byte range that still hits both ends and the midpoint
CHANNEL_SAMPLES = sorted(set(range(0, 256, 15)) | {1, 2, 127, 128, 253, 254})


@pytest.fixture
def channel_grid():
    """Every (r, g, b) combination of the sampled channel values."""
    return [Color(r, g, b) for r in CHANNEL_SAMPLES for g in CHANNEL_SAMPLES for b in CHANNEL_SAMPLES]


@pytest.fixture
def strip_colors():
    """A short strip of mixed colors, as sent to a device."""
    return [
        Color(255, 0, 0),
        Color(0, 255, 0),
        Color(0, 0, 255),
        Color(12, 34, 56),
        Color(255, 255, 255),
        Color(0, 0, 0),
    ]
