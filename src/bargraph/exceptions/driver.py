"""Driver and bus exceptions.

This module defines exceptions raised while addressing or writing to
bargraph devices:
- DriverError: Base class for argument errors caught before any bus write
- ColumnOutOfRangeError: Column outside [0, columns)
- InvalidColorError: Color value is not OFF/GREEN/RED/YELLOW
- InvalidBlinkFrequencyError: Blink frequency not in the supported set
- DeviceIndexError: Device index outside [0, devices)
- BusWriteError: The I2C transfer itself failed
"""

from typing import Any, Iterable, Optional

from .base import BargraphError


class DriverError(BargraphError):
    """A driver call was rejected before anything was sent to the bus."""

    def __init__(self, user_message: str, device: Optional[int] = None, **kwargs):
        """
        Initialize driver error.

        Args:
            user_message: User-friendly error message
            device: The device index involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device = device


class ColumnOutOfRangeError(DriverError):
    """Column is outside the configured bargraph width."""

    def __init__(self, column: Any, columns: int):
        """
        Initialize column range error.

        Args:
            column: The rejected column
            columns: Number of configured columns
        """
        super().__init__(
            user_message=f"Column {column} out of range (max {columns - 1})",
            technical_message=f"column={column!r} not in [0, {columns})",
            recoverable=True,
            recovery_hint=f"Use a column between 0 and {columns - 1}.",
        )
        self.column = column
        self.columns = columns


class InvalidColorError(DriverError):
    """Color value is not one of OFF, GREEN, RED or YELLOW."""

    def __init__(self, color: Any):
        super().__init__(
            user_message=f"Invalid LED color: {color!r}",
            recoverable=True,
            recovery_hint="Valid colors: 0 (off), 1 (green), 2 (red), 3 (yellow).",
        )
        self.color = color


class InvalidBlinkFrequencyError(DriverError):
    """Blink frequency is not one of the chip's supported rates."""

    def __init__(self, frequency: Any, allowed: Iterable[int]):
        """
        Initialize blink frequency error.

        Args:
            frequency: The rejected frequency value
            allowed: Supported frequency codes
        """
        codes = ", ".join(f"0x{code:02X}" for code in sorted(allowed))
        super().__init__(
            user_message=f"Invalid blink frequency {frequency!r}; should be one of {codes}",
            recoverable=True,
            recovery_hint=f"Use one of {codes}, or None to disable blinking.",
        )
        self.frequency = frequency


class DeviceIndexError(DriverError):
    """Device index does not name a configured device."""

    def __init__(self, device: Any, devices: int):
        super().__init__(
            user_message=f"Device {device} out of range ({devices} configured)",
            technical_message=f"device={device!r} not in [0, {devices})",
            device=device if isinstance(device, int) else None,
            recoverable=True,
            recovery_hint="Check the 'addresses' and 'devices' configuration values.",
        )
        self.devices = devices


class BusWriteError(BargraphError):
    """An I2C write to a device failed."""

    def __init__(self, address: int, original_error: Optional[str] = None, bus: Optional[int] = None):
        """
        Initialize bus write error.

        Args:
            address: The 7-bit address of the device being written
            original_error: The error reported by the I2C layer
            bus: I2C bus number (if known)
        """
        user_msg = f"Failed to write to device at address 0x{address:02X}"
        tech_msg = user_msg
        if bus is not None:
            tech_msg += f" on /dev/i2c-{bus}"
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Check wiring and the device address. "
                "Run 'i2cdetect -y 1' to list devices on the bus."
            ),
        )
        self.address = address
        self.bus = bus
