"""Column mapping for bicolor bargraphs."""

from typing import NamedTuple, Tuple

from bargraph.exceptions import ColumnOutOfRangeError
from bargraph.models.config import DEFAULT_COLUMNS


class BitPosition(NamedTuple):
    """Location of one LED die inside the display buffer."""
    byte: int
    bit: int


class LedBits(NamedTuple):
    """Buffer positions of a column's red and green dies."""
    red: BitPosition
    green: BitPosition


class BargraphMapper:
    """
    Mapping from logical bargraph columns to HT16K33 display RAM bits.

    The bargraph is wired as two 12-column halves sharing three cathode
    rows. Within a row the left half uses anodes 0-3 and the right half
    anodes 4-7; green dies sit 8 anodes above their red partner, i.e. in
    the high byte of the row.

    - column_to_matrix(): column → (cathode, anode)
    - column_to_bits(): column → red and green (byte, bit) positions

    Example:
        column 0  → cathode 0, anode 0 → red byte 0 bit 0, green byte 1 bit 0
        column 11 → cathode 2, anode 3 → red byte 4 bit 3, green byte 5 bit 3
        column 12 → cathode 0, anode 4 → red byte 0 bit 4, green byte 1 bit 4
    """

    HALF_WIDTH = 12
    COLUMNS_PER_CATHODE = 4
    ROW_BITS = 16
    GREEN_OFFSET = 8

    def __init__(self, columns: int = DEFAULT_COLUMNS):
        """
        Initialize mapper for a bargraph width.

        Args:
            columns: Number of logical columns (default: 24)
        """
        self.columns = columns

    def check_column(self, column: int) -> int:
        """Return column unchanged, or raise ColumnOutOfRangeError."""
        if isinstance(column, bool) or not isinstance(column, int):
            raise ColumnOutOfRangeError(column, self.columns)
        if not 0 <= column < self.columns:
            raise ColumnOutOfRangeError(column, self.columns)
        return column

    def column_to_matrix(self, column: int) -> Tuple[int, int]:
        """
        Convert a logical column to (cathode, anode) coordinates.

        Raises:
            ColumnOutOfRangeError: If column is not in [0, columns)
        """
        self.check_column(column)

        if column < self.HALF_WIDTH:
            cathode = column // self.COLUMNS_PER_CATHODE
            anode = column % self.COLUMNS_PER_CATHODE
        else:
            cathode = (column - self.HALF_WIDTH) // self.COLUMNS_PER_CATHODE
            anode = column % self.COLUMNS_PER_CATHODE + 4

        return cathode, anode

    def column_to_bits(self, column: int) -> LedBits:
        """
        Convert a logical column to its red and green buffer positions.

        Raises:
            ColumnOutOfRangeError: If column is not in [0, columns)
        """
        cathode, anode = self.column_to_matrix(column)
        red_index = cathode * self.ROW_BITS + anode
        green_index = red_index + self.GREEN_OFFSET
        return LedBits(
            red=BitPosition(*divmod(red_index, 8)),
            green=BitPosition(*divmod(green_index, 8)),
        )
