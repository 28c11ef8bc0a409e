"""
Centralized error handling utilities.

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, driver, config modules)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Recovery Hints** - Tell users what to do when things fail

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Column outside bargraph | `ColumnOutOfRangeError` | `raise ColumnOutOfRangeError(24, columns=24)` |
| Unsupported blink rate | `InvalidBlinkFrequencyError` | `raise InvalidBlinkFrequencyError(0x03, BLINK_FREQUENCIES)` |
| I2C transfer failed | `wrap_bus_error` | `raise wrap_bus_error(e, address=0x70) from e` |
| Config value invalid | `wrap_pydantic_error` | `raise wrap_pydantic_error(e, str(path)) from e` |
| Log a failing section and re-raise | `ErrorContext` | `with ErrorContext("write device 2"): ...` |
"""

import logging
from typing import Optional

from .base import BargraphError
from .config import ConfigFileInvalidError, ConfigValidationError
from .driver import BusWriteError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("write device 1", logger_instance=logger):
            bus.write(0x71, payload)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, BargraphError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> BargraphError:
    """
    Convert Pydantic validation errors to bargraph exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            if len(errors) == 1:
                first_error = errors[0]
                field = ".".join(str(loc) for loc in first_error.get('loc', ())) or "config"
                reason = first_error.get('msg', 'validation failed')
                value = first_error.get('input', None)

                return ConfigValidationError(
                    field=field,
                    value=value,
                    error_msg=reason,
                    file_path=file_path
                )

            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ())) or "config"
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_bus_error(error: Exception, address: int, bus: Optional[int] = None) -> BargraphError:
    """
    Convert low-level I2C errors to bargraph exceptions.

    Args:
        error: The original exception from the I2C library
        address: The device address being written
        bus: I2C bus number (if known)

    Returns:
        A BusWriteError carrying the original error text
    """
    if isinstance(error, BargraphError):
        return error
    return BusWriteError(address=address, original_error=str(error), bus=bus)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, BargraphError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
