"""Unit tests for BargraphMapper."""

import pytest

from bargraph.devices.ht16k33 import BargraphMapper, BitPosition
from bargraph.exceptions import ColumnOutOfRangeError


class TestBargraphMapper:
    """Test mapping from logical columns to display buffer bits."""

    @pytest.fixture
    def mapper(self):
        """Create a 24-column mapper for testing."""
        return BargraphMapper(columns=24)

    def test_column_to_matrix_first_column(self, mapper):
        """Test that column 0 maps to cathode 0, anode 0."""
        assert mapper.column_to_matrix(0) == (0, 0)

    def test_column_to_matrix_left_half(self, mapper):
        """Test columns in the left half use anodes 0-3."""
        assert mapper.column_to_matrix(3) == (0, 3)
        assert mapper.column_to_matrix(4) == (1, 0)
        assert mapper.column_to_matrix(9) == (2, 1)

    def test_column_to_matrix_half_boundary(self, mapper):
        """Test the 11/12 boundary between the two halves."""
        assert mapper.column_to_matrix(11) == (2, 3)
        assert mapper.column_to_matrix(12) == (0, 4)

    def test_column_to_matrix_last_column(self, mapper):
        """Test that column 23 stays inside cathode 2."""
        assert mapper.column_to_matrix(23) == (2, 7)

    def test_column_to_bits_first_column(self, mapper):
        """Test column 0: red in the row's low byte, green in the high byte."""
        bits = mapper.column_to_bits(0)
        assert bits.red == BitPosition(byte=0, bit=0)
        assert bits.green == BitPosition(byte=1, bit=0)

    def test_column_to_bits_column_12(self, mapper):
        """Test column 12: green bit index 12 is byte 1, bit 4."""
        bits = mapper.column_to_bits(12)
        assert bits.red == BitPosition(byte=0, bit=4)
        assert bits.green == BitPosition(byte=1, bit=4)

    def test_column_to_bits_column_11(self, mapper):
        """Test column 11 lands in row 2 (bytes 4 and 5)."""
        bits = mapper.column_to_bits(11)
        assert bits.red == BitPosition(byte=4, bit=3)
        assert bits.green == BitPosition(byte=5, bit=3)

    def test_column_to_bits_last_column(self, mapper):
        """Test column 23 maps to the top bit of row 2."""
        bits = mapper.column_to_bits(23)
        assert bits.red == BitPosition(byte=4, bit=7)
        assert bits.green == BitPosition(byte=5, bit=7)

    def test_all_columns_in_range_and_distinct(self, mapper):
        """Test every column gets two distinct in-range positions, unique across columns."""
        seen = set()
        for column in range(24):
            bits = mapper.column_to_bits(column)
            assert bits.red != bits.green
            for position in bits:
                assert 0 <= position.byte < 16
                assert 0 <= position.bit < 8
                assert position not in seen
                seen.add(position)
        assert len(seen) == 48

    def test_mapping_is_stable(self, mapper):
        """Test that repeated calls and fresh mappers agree."""
        other = BargraphMapper(columns=24)
        for column in range(24):
            assert mapper.column_to_bits(column) == mapper.column_to_bits(column)
            assert mapper.column_to_bits(column) == other.column_to_bits(column)

    def test_column_equal_to_columns_rejected(self, mapper):
        """Test that column == columns raises."""
        with pytest.raises(ColumnOutOfRangeError) as exc_info:
            mapper.column_to_bits(24)
        assert exc_info.value.column == 24
        assert exc_info.value.columns == 24

    def test_negative_column_rejected(self, mapper):
        """Test that negative columns raise."""
        with pytest.raises(ColumnOutOfRangeError):
            mapper.column_to_matrix(-1)

    def test_non_integer_column_rejected(self, mapper):
        """Test that floats and bools are not columns."""
        with pytest.raises(ColumnOutOfRangeError):
            mapper.column_to_bits(1.5)
        with pytest.raises(ColumnOutOfRangeError):
            mapper.column_to_bits(True)

    def test_narrow_bargraph(self):
        """Test that a narrower bargraph rejects columns past its width."""
        mapper = BargraphMapper(columns=12)
        assert mapper.column_to_matrix(11) == (2, 3)
        with pytest.raises(ColumnOutOfRangeError):
            mapper.column_to_matrix(12)
