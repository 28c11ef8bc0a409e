"""Tests for the exception hierarchy and handlers."""

import logging

import pytest

from bargraph.exceptions import (
    BargraphError,
    BusWriteError,
    ColumnOutOfRangeError,
    DriverError,
    ErrorContext,
    InvalidBlinkFrequencyError,
    format_error_for_display,
    wrap_bus_error,
)


class TestMessages:
    """Test user messages and recovery hints."""

    def test_column_error(self):
        error = ColumnOutOfRangeError(column=30, columns=24)
        assert isinstance(error, DriverError)
        assert str(error) == "Column 30 out of range (max 23)"
        assert "0 and 23" in error.get_full_message()

    def test_blink_error_lists_codes(self):
        error = InvalidBlinkFrequencyError(3, {0x00, 0x02, 0x04, 0x06})
        assert "0x00, 0x02, 0x04, 0x06" in error.user_message

    def test_format_custom_error(self):
        message, hint = format_error_for_display(BusWriteError(address=0x70))
        assert message == "Failed to write to device at address 0x70"
        assert "i2cdetect" in hint

    def test_format_standard_error(self):
        message, hint = format_error_for_display(OSError("boom"))
        assert message == "OSError: boom"
        assert hint is None


class TestWrapBusError:
    def test_wraps_os_error(self):
        error = wrap_bus_error(OSError(121, "Remote I/O error"), address=0x72, bus=1)
        assert isinstance(error, BusWriteError)
        assert "/dev/i2c-1" in error.technical_message

    def test_keeps_bargraph_error(self):
        original = BargraphError("already wrapped")
        assert wrap_bus_error(original, address=0x70) is original


class TestErrorContext:
    def test_logs_and_reraises(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(BusWriteError):
                with ErrorContext("write device 0"):
                    raise BusWriteError(address=0x70, original_error="nack")
        assert "Failed to write device 0" in caplog.text
        assert "nack" in caplog.text

    def test_suppresses_when_asked(self):
        with ErrorContext("write device 0", re_raise=False) as ctx:
            raise OSError("boom")
        assert isinstance(ctx.error, OSError)
