"""
Custom exception hierarchy for bargraph.

## Exception Hierarchy

```
BargraphError (base)
├── DriverError
│   ├── ColumnOutOfRangeError
│   ├── InvalidColorError
│   ├── InvalidBlinkFrequencyError
│   └── DeviceIndexError
├── BusWriteError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All driver argument errors are raised before anything is written to the
bus. `BusWriteError` comes from the bus adapter and is passed through the
driver unchanged.

### Example: Column Out Of Range

```python
from bargraph.exceptions import ColumnOutOfRangeError

raise ColumnOutOfRangeError(column=24, columns=24)

# User sees: "Column 24 out of range (max 23)"
# Recovery hint: "Use a column between 0 and 23."
```
"""

from .base import BargraphError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .driver import (
    BusWriteError,
    ColumnOutOfRangeError,
    DeviceIndexError,
    DriverError,
    InvalidBlinkFrequencyError,
    InvalidColorError,
)
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_bus_error,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "BargraphError",
    # Bus
    "BusWriteError",
    "ColumnOutOfRangeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "DeviceIndexError",
    # Driver
    "DriverError",
    # Handlers
    "ErrorContext",
    "InvalidBlinkFrequencyError",
    "InvalidColorError",
    "format_error_for_display",
    "wrap_bus_error",
    "wrap_pydantic_error",
]
