"""HT16K33-specific device code."""

from .commands import BLINK_FREQUENCIES, HT16K33Commands
from .driver import BicolorBargraph
from .mapper import BargraphMapper, BitPosition, LedBits

__all__ = [
    "BLINK_FREQUENCIES",
    "BargraphMapper",
    "BicolorBargraph",
    "BitPosition",
    "HT16K33Commands",
    "LedBits",
]
