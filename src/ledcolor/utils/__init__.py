"""Generic utility modules for ledcolor.

- channels: Narrowing floats into 8-bit channels (round/truncate, then clamp)
"""

from .channels import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    check_unit_interval,
    clamp_channel,
    round_channel,
    truncate_channel,
)

__all__ = [
    "CHANNEL_MAX",
    "CHANNEL_MIN",
    "check_unit_interval",
    "clamp_channel",
    "round_channel",
    "truncate_channel",
]
