"""Data models for the bargraph driver."""

from .config import BargraphConfig
from .device import BUFFER_SIZE, BargraphDevice
from .enums import BlinkRate, LedColor, PowerState

__all__ = [
    "BUFFER_SIZE",
    # Models
    "BargraphConfig",
    "BargraphDevice",
    # Enums
    "BlinkRate",
    "LedColor",
    "PowerState",
]
