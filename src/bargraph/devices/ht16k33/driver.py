"""Bicolor bargraph driver."""

import logging
from typing import Iterator, List, Optional

from bargraph.devices.protocols import BusWriter
from bargraph.exceptions import DeviceIndexError, ErrorContext, InvalidColorError
from bargraph.models import BargraphConfig, BargraphDevice, LedColor, PowerState
from bargraph.models.device import BUFFER_SIZE

from .commands import BlinkFrequency, HT16K33Commands
from .mapper import BargraphMapper, BitPosition

logger = logging.getLogger(__name__)


class BicolorBargraph:
    """
    Drive one or more HT16K33-backed bicolor bargraphs on a shared bus.

    Each device owns a 16-byte display buffer. Every ``led``/``clear`` call
    stages the change on a copy, writes the whole buffer to the chip and
    only then keeps the copy, so a buffer always matches the last write
    that reached the hardware.

    Every operation takes ``device``: an index in ``0..device_count-1``, or
    None (the default) to apply it to all devices in index order. A bus
    failure on one device stops the broadcast; earlier devices keep what
    was written.
    """

    def __init__(self, bus: BusWriter, config: Optional[BargraphConfig] = None):
        """
        Initialize and switch on every configured device.

        Each device is sent, in order: oscillator on, blink disabled,
        initial brightness, cleared display.

        Args:
            bus: Bus write primitive shared by all devices
            config: Addresses and display options (default: one device at 0x70)
        """
        self.config = config or BargraphConfig()
        self.bus = bus
        self.mapper = BargraphMapper(self.config.columns)
        self.commands = HT16K33Commands()
        self.devices: List[BargraphDevice] = [
            BargraphDevice(index=index, address=address)
            for index, address in enumerate(self.config.device_addresses)
        ]

        for device in self.devices:
            self.on(device=device.index)
            self.blink(None, device=device.index)
            self.brightness(self.config.brightness, device=device.index)
            self.clear(device=device.index)
            logger.info(f"Initialized bargraph {device.label}")

    @property
    def columns(self) -> int:
        return self.mapper.columns

    @property
    def device_count(self) -> int:
        return len(self.devices)

    # ---------------- power / display setup ----------------

    def on(self, *, device: Optional[int] = None) -> None:
        """Take device(s) out of standby."""
        payload = self.commands.on()
        for target in self._targets(device):
            self._send(target, payload)
            target.power = PowerState.ON

    def off(self, *, device: Optional[int] = None) -> None:
        """Put device(s) in standby. Display RAM is kept."""
        payload = self.commands.off()
        for target in self._targets(device):
            self._send(target, payload)
            target.power = PowerState.STANDBY

    def brightness(self, percent: float, *, device: Optional[int] = None) -> None:
        """
        Set brightness.

        Args:
            percent: 0-100, clamped and mapped to the chip's 16 levels
            device: Device index, or None for all devices
        """
        payload = self.commands.brightness(percent)
        for target in self._targets(device):
            self._send(target, payload)

    def blink(self, frequency: BlinkFrequency, *, device: Optional[int] = None) -> None:
        """
        Set blink rate.

        Args:
            frequency: 0x00, 0x02, 0x04 or 0x06 (see BlinkRate), or None/False to disable
            device: Device index, or None for all devices

        Raises:
            InvalidBlinkFrequencyError: Before anything is sent, for unsupported rates
        """
        payload = self.commands.blink(frequency)
        for target in self._targets(device):
            self._send(target, payload)

    # ---------------- display buffer ----------------

    def led(self, column: int, color: int, *, device: Optional[int] = None) -> None:
        """
        Set one column to a color.

        Args:
            column: Logical column (0 to columns-1)
            color: LedColor value (OFF, GREEN, RED, YELLOW)
            device: Device index, or None for all devices

        Raises:
            ColumnOutOfRangeError: Before anything is sent, for a bad column
            InvalidColorError: Before anything is sent, for a bad color
        """
        bits = self.mapper.column_to_bits(column)
        value = self._check_color(color)

        for target in self._targets(device):
            staged = bytearray(target.buffer)
            _apply_bit(staged, bits.green, bool(value & LedColor.GREEN))
            _apply_bit(staged, bits.red, bool(value & LedColor.RED))
            self._write_display(target, staged)

    def clear(self, *, device: Optional[int] = None) -> None:
        """Turn off every LED."""
        for target in self._targets(device):
            self._write_display(target, bytearray(BUFFER_SIZE))

    # ---------------- inspection ----------------

    def buffer(self, device: int) -> bytes:
        """Return a copy of a device's display buffer."""
        return bytes(self._device(device).buffer)

    def power_state(self, device: int) -> PowerState:
        """Return a device's power state."""
        return self._device(device).power

    def __iter__(self) -> Iterator[BargraphDevice]:
        return iter(self.devices)

    # ---------------- internal helpers ----------------

    def _device(self, index: int) -> BargraphDevice:
        if isinstance(index, bool) or not isinstance(index, int):
            raise DeviceIndexError(index, self.device_count)
        if not 0 <= index < self.device_count:
            raise DeviceIndexError(index, self.device_count)
        return self.devices[index]

    def _targets(self, device: Optional[int]) -> List[BargraphDevice]:
        if device is None:
            return list(self.devices)
        return [self._device(device)]

    @staticmethod
    def _check_color(color: int) -> LedColor:
        if isinstance(color, bool) or not isinstance(color, int):
            raise InvalidColorError(color)
        try:
            return LedColor(color)
        except ValueError:
            raise InvalidColorError(color) from None

    def _write_display(self, target: BargraphDevice, staged: bytearray) -> None:
        self._send(target, self.commands.display_write(staged))
        target.buffer[:] = staged

    def _send(self, target: BargraphDevice, payload: bytes) -> None:
        with ErrorContext(f"write {target.label}", logger_instance=logger):
            self.bus.write(target.address, payload)
        logger.debug(f"Wrote {payload.hex()} to {target.label}")


def _apply_bit(buffer: bytearray, position: BitPosition, lit: bool) -> None:
    if lit:
        buffer[position.byte] |= 1 << position.bit
    else:
        buffer[position.byte] &= ~(1 << position.bit) & 0xFF
