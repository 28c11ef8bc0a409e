"""bargraph: driver for HT16K33 bicolor LED bargraphs."""

__version__ = "0.1.0"

from .devices import BicolorBargraph, BusWriter, DryRunBusWriter, SMBusWriter
from .models import BargraphConfig, BlinkRate, LedColor, PowerState

__all__ = [
    "BargraphConfig",
    "BicolorBargraph",
    "BlinkRate",
    "BusWriter",
    "DryRunBusWriter",
    "LedColor",
    "PowerState",
    "SMBusWriter",
]
