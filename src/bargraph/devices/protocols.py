"""Bus collaborator protocol."""

from __future__ import annotations

from typing import Protocol


class BusWriter(Protocol):
    """Protocol for the I2C write primitive the driver depends on."""

    def write(self, address: int, data: bytes) -> None:
        """
        Write bytes to a device as one bus transaction.

        Args:
            address: 7-bit I2C address of the device
            data: Complete payload, command byte first

        Note:
            Must block until the transfer completes and raise on failure.
        """
        ...
