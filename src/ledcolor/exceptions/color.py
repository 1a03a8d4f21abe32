"""Color value exceptions.

This module defines exceptions for invalid color inputs:
- ColorValueError: Base class for color value errors
- OutOfRangeError: A bounded input (HSV saturation/value) is out of range
- InvalidArgumentError: An argument is malformed (negative amount, bad hex string)

Both concrete errors are also ``ValueError`` so plain Python callers can
catch them without knowing about this hierarchy.
"""

from typing import Any

from .base import LedColorError


class ColorValueError(LedColorError):
    """A color operation received an unusable input."""
    pass


class OutOfRangeError(ColorValueError, ValueError):
    """A numeric input falls outside its allowed range."""

    def __init__(self, name: str, value: Any, expected: str):
        """
        Initialize out-of-range error.

        Args:
            name: Name of the offending parameter (e.g. "saturation")
            value: The rejected value
            expected: Description of the allowed range (e.g. "between 0.0 and 1.0")
        """
        super().__init__(
            user_message=f"{name} must be {expected}, got {value!r}",
            technical_message=f"Out of range: {name}={value!r} (expected {expected})",
            recoverable=True,
            recovery_hint=f"Pass a {name} {expected}",
        )
        self.name = name
        self.value = value
        self.expected = expected


class InvalidArgumentError(ColorValueError, ValueError):
    """An argument is malformed or negative where a count is expected."""

    def __init__(self, name: str, value: Any, reason: str):
        """
        Initialize invalid argument error.

        Args:
            name: Name of the offending parameter (e.g. "amount")
            value: The rejected value
            reason: Why the value is invalid
        """
        super().__init__(
            user_message=f"Invalid {name} {value!r}: {reason}",
            technical_message=f"Invalid argument {name}={value!r}: {reason}",
            recoverable=True,
        )
        self.name = name
        self.value = value
        self.reason = reason
