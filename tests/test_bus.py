"""Tests for the I2C bus adapters."""

from unittest.mock import patch

import pytest

from bargraph import BicolorBargraph, DryRunBusWriter, SMBusWriter
from bargraph.exceptions import BargraphError, BusWriteError


class TestSMBusWriter:
    """Test the smbus2-backed writer with SMBus mocked out."""

    @pytest.fixture
    def smbus(self):
        with patch("bargraph.devices.bus.SMBus") as smbus_cls:
            yield smbus_cls

    def test_opens_bus_number(self, smbus):
        SMBusWriter(bus_number=3)
        smbus.assert_called_once_with(3)

    def test_write_is_single_message(self, smbus):
        """Test a write goes out as one i2c_rdwr transaction."""
        writer = SMBusWriter()
        payload = bytes([0x00]) + bytes(16)

        writer.write(0x70, payload)

        bus = smbus.return_value
        bus.i2c_rdwr.assert_called_once()
        (msg,) = bus.i2c_rdwr.call_args.args
        assert msg.addr == 0x70
        assert bytes(msg) == payload

    def test_write_error_is_wrapped(self, smbus):
        """Test OSError from the bus becomes BusWriteError."""
        smbus.return_value.i2c_rdwr.side_effect = OSError(121, "Remote I/O error")
        writer = SMBusWriter(bus_number=1)

        with pytest.raises(BusWriteError) as exc_info:
            writer.write(0x71, b"\x21")

        assert exc_info.value.address == 0x71
        assert exc_info.value.bus == 1
        assert "Remote I/O error" in exc_info.value.technical_message

    def test_open_failure(self, smbus):
        smbus.side_effect = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(BargraphError) as exc_info:
            SMBusWriter(bus_number=9)
        assert "/dev/i2c-9" in exc_info.value.user_message

    def test_close(self, smbus):
        """Test close releases the bus and later writes fail."""
        with SMBusWriter() as writer:
            pass

        smbus.return_value.close.assert_called_once()
        with pytest.raises(BargraphError):
            writer.write(0x70, b"\x21")


class TestDryRunBusWriter:
    """Test the recording writer."""

    def test_records_writes(self):
        bus = DryRunBusWriter()
        bus.write(0x70, b"\x21")
        bus.write(0x71, bytearray([0xE7]))
        assert bus.writes == [(0x70, b"\x21"), (0x71, b"\xe7")]

    def test_drives_bargraph(self):
        """Test the driver initializes against the dry-run bus."""
        bus = DryRunBusWriter()
        BicolorBargraph(bus)
        assert [data[0] for _, data in bus.writes] == [0x21, 0x81, 0xEF, 0x00]
