"""Per-device state owned by the driver."""

from dataclasses import dataclass, field

from .enums import PowerState

BUFFER_SIZE = 16  # 8 rows x 16 bits


@dataclass
class BargraphDevice:
    """One HT16K33 chip and its display buffer."""
    index: int
    address: int
    buffer: bytearray = field(default_factory=lambda: bytearray(BUFFER_SIZE))
    power: PowerState = PowerState.UNINITIALIZED

    def __post_init__(self) -> None:
        if len(self.buffer) != BUFFER_SIZE:
            raise ValueError(f"Display buffer must be {BUFFER_SIZE} bytes, got {len(self.buffer)}")

    @property
    def label(self) -> str:
        """Short name used in log messages."""
        return f"device {self.index} (0x{self.address:02X})"
