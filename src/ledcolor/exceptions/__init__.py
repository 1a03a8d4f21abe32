"""
Custom exception hierarchy for ledcolor.

## Exception Hierarchy

```
LedColorError (base)
├── ColorValueError
│   ├── OutOfRangeError
│   └── InvalidArgumentError
└── WireFormatError
    ├── TruncatedInputError
    └── BufferTooSmallError
```

## Usage

All custom exceptions inherit from `LedColorError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: HSV Input Out of Range

```python
from ledcolor.exceptions import OutOfRangeError

raise OutOfRangeError("saturation", 1.5, "between 0.0 and 1.0")

# User sees: "saturation must be between 0.0 and 1.0, got 1.5"
```

### Example: Truncated Wire Payload

```python
from ledcolor.exceptions import TruncatedInputError

raise TruncatedInputError(count=2, expected=8, available=7)

# User sees: "Color data is truncated: expected 8 bytes, got 7"
# Recovery hint: "Check that the color count matches the payload length"
```
"""

from .base import LedColorError
from .color import ColorValueError, InvalidArgumentError, OutOfRangeError
from .wire import BufferTooSmallError, TruncatedInputError, WireFormatError

__all__ = [
    # Base
    "LedColorError",
    # Color values
    "ColorValueError",
    "InvalidArgumentError",
    "OutOfRangeError",
    # Wire format
    "BufferTooSmallError",
    "TruncatedInputError",
    "WireFormatError",
]
