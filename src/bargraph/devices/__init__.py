"""Bargraph device drivers and bus adapters."""

from .bus import DryRunBusWriter, SMBusWriter
from .ht16k33 import BicolorBargraph
from .protocols import BusWriter

__all__ = [
    "BicolorBargraph",
    "BusWriter",
    "DryRunBusWriter",
    "SMBusWriter",
]
