"""CLI commands for bargraph."""

from .config import config
from .display import blink, brightness, clear, led, off, on

__all__ = ["blink", "brightness", "clear", "config", "led", "off", "on"]
