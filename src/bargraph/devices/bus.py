"""I2C bus adapters implementing the BusWriter protocol."""

import logging
from typing import List, Optional, Tuple

from smbus2 import SMBus, i2c_msg

from bargraph.exceptions import BargraphError, wrap_bus_error

logger = logging.getLogger(__name__)


class SMBusWriter:
    """
    BusWriter backed by smbus2.

    Each write is sent as a single raw I2C message (command byte + data),
    so a 17-byte display write reaches the chip as one transaction.

    Usage:
        with SMBusWriter(bus_number=1) as bus:
            bargraph = BicolorBargraph(bus, config)
    """

    def __init__(self, bus_number: int = 1):
        self.bus_number = bus_number
        try:
            self._bus: Optional[SMBus] = SMBus(bus_number)
        except OSError as e:
            raise BargraphError(
                user_message=f"Failed to open /dev/i2c-{bus_number}",
                technical_message=f"Failed to open /dev/i2c-{bus_number}: {e}",
                recoverable=True,
                recovery_hint="Enable I2C and check that your user is in the 'i2c' group.",
            ) from e
        logger.info(f"Opened /dev/i2c-{bus_number}")

    def write(self, address: int, data: bytes) -> None:
        """Write data to a device in one transaction."""
        if self._bus is None:
            raise BargraphError(f"/dev/i2c-{self.bus_number} is closed")
        try:
            self._bus.i2c_rdwr(i2c_msg.write(address, bytes(data)))
        except OSError as e:
            raise wrap_bus_error(e, address=address, bus=self.bus_number) from e

    def close(self) -> None:
        if self._bus is None:
            return
        try:
            self._bus.close()
        finally:
            self._bus = None

    def __enter__(self) -> "SMBusWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DryRunBusWriter:
    """BusWriter that records and logs writes instead of touching hardware."""

    def __init__(self):
        self.writes: List[Tuple[int, bytes]] = []

    def write(self, address: int, data: bytes) -> None:
        self.writes.append((address, bytes(data)))
        logger.info(f"[dry-run] 0x{address:02X} <- {bytes(data).hex(' ')}")

    def close(self) -> None:
        pass

    def __enter__(self) -> "DryRunBusWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
