"""
Low-level command builder for HT16K33 LED drivers.

HT16K33 Command Bytes
=====================

Every I2C write to the HT16K33 starts with one command byte. The high
nibble selects the command, the low nibble carries its argument::

    0x20 | s    System setup      s=1 oscillator on, s=0 standby
    0x80 | d    Display setup     d = blink code | display-on bit
    0xE0 | b    Dimming           b = 0..15
    0x00        Display RAM       followed by 16 data bytes (rows 0-7)

Display Write Flow
------------------

::

    Your code calls:
    bargraph.led(12, LedColor.GREEN, device=0)
          ↓
    BargraphMapper.column_to_bits(12):
      cathode 0, anode 4 → green at byte 1, bit 4
          ↓
    buffer[1] |= 1 << 4
          ↓
    HT16K33Commands.display_write(buffer):
      [0x00, b0, b1, ..., b15]
       │     └─ 8 rows, low byte (red) then high byte (green)
       └─ RAM address pointer = row 0
          ↓
    BusWriter.write(0x70, payload)

Blink Codes
-----------

The display setup command always carries the display-on bit (0x01);
blinking is selected in bits 1-2:

- **0x00**: no blinking
- **0x02**: 2 Hz
- **0x04**: 1 Hz
- **0x06**: 0.5 Hz

Disabling blinking therefore still sends ``0x81``.

This module knows only about command bytes; it never talks to the bus.
"""

import math
from typing import Optional, Union

from bargraph.exceptions import InvalidBlinkFrequencyError
from bargraph.models.device import BUFFER_SIZE

SYSTEM_SETUP = 0x20
SYSTEM_SETUP_NORMAL = 0x01
SYSTEM_SETUP_STANDBY = 0x00
BLINK = 0x80
BLINK_DISPLAY_ON = 0x01
BLINK_FREQUENCIES = frozenset({0x00, 0x02, 0x04, 0x06})
BRIGHTNESS = 0xE0
BRIGHTNESS_LEVELS = 16
DISPLAY_RAM = 0x00

BlinkFrequency = Optional[Union[int, bool]]


class HT16K33Commands:
    """Builds HT16K33 command payloads."""

    @staticmethod
    def map_brightness(percent: float) -> int:
        """
        Map a brightness percentage to the chip's 0-15 dimming level.

        Values outside 0-100 are clamped.
        """
        percent = min(max(percent, 0), 100)
        return int(math.floor(percent * (BRIGHTNESS_LEVELS - 1) / 100))

    @staticmethod
    def blink_code(frequency: BlinkFrequency) -> int:
        """
        Validate a blink frequency and return its code.

        None and False mean "blinking disabled" (code 0x00).

        Raises:
            InvalidBlinkFrequencyError: If frequency is not a supported code
        """
        if frequency is None or frequency is False:
            return 0x00
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise InvalidBlinkFrequencyError(frequency, BLINK_FREQUENCIES)
        if frequency not in BLINK_FREQUENCIES:
            raise InvalidBlinkFrequencyError(frequency, BLINK_FREQUENCIES)
        return int(frequency)

    def on(self) -> bytes:
        """Build oscillator-on (normal operation) command."""
        return bytes([SYSTEM_SETUP | SYSTEM_SETUP_NORMAL])

    def off(self) -> bytes:
        """Build standby command."""
        return bytes([SYSTEM_SETUP | SYSTEM_SETUP_STANDBY])

    def brightness(self, percent: float) -> bytes:
        """Build dimming command for a percentage."""
        return bytes([BRIGHTNESS | self.map_brightness(percent)])

    def blink(self, frequency: BlinkFrequency) -> bytes:
        """Build display setup command with the given blink rate."""
        return bytes([BLINK | BLINK_DISPLAY_ON | self.blink_code(frequency)])

    def display_write(self, buffer: Union[bytes, bytearray]) -> bytes:
        """
        Build a full display RAM write.

        Args:
            buffer: 16-byte display buffer

        Returns:
            Command byte 0x00 followed by the buffer bytes
        """
        if len(buffer) != BUFFER_SIZE:
            raise ValueError(f"Display buffer must be {BUFFER_SIZE} bytes, got {len(buffer)}")
        return bytes([DISPLAY_RAM]) + bytes(buffer)
