"""Enumerations for the bargraph driver."""

from enum import Enum, IntEnum


class LedColor(IntEnum):
    """Bicolor LED values; YELLOW lights both the red and green dies."""

    OFF = 0
    GREEN = 1
    RED = 2
    YELLOW = 3  # GREEN | RED


class BlinkRate(IntEnum):
    """HT16K33 blink frequency codes (already shifted into bits 1-2)."""

    OFF = 0x00
    HZ_2 = 0x02
    HZ_1 = 0x04
    HZ_HALF = 0x06


class PowerState(str, Enum):
    """Per-device oscillator state."""

    UNINITIALIZED = "uninitialized"
    ON = "on"  # Normal operation
    STANDBY = "standby"  # Oscillator off, display RAM retained
