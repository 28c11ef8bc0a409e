"""Tests for BargraphConfig and its persistence."""

import json

import pytest
from pydantic import ValidationError

from bargraph import BargraphConfig
from bargraph.exceptions import ConfigFileInvalidError, ConfigValidationError


class TestBargraphConfig:
    """Test config defaults and validation."""

    def test_defaults(self):
        """Test a default config drives one device at 0x70."""
        config = BargraphConfig()
        assert config.addresses == [0x70]
        assert config.devices == 1
        assert config.columns == 24
        assert config.brightness == 100
        assert config.bus == 1

    def test_devices_default_to_address_count(self):
        config = BargraphConfig(addresses=[0x70, 0x71, 0x72])
        assert config.devices == 3
        assert config.device_addresses == [0x70, 0x71, 0x72]

    def test_devices_subset(self):
        config = BargraphConfig(addresses=[0x70, 0x71, 0x72], devices=2)
        assert config.device_addresses == [0x70, 0x71]

    def test_more_devices_than_addresses(self):
        with pytest.raises(ValidationError):
            BargraphConfig(addresses=[0x70], devices=2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"addresses": []},
            {"addresses": [0x80]},
            {"addresses": [0x70, 0x70]},
            {"columns": 0},
            {"columns": 25},
            {"brightness": 101},
            {"brightness": -1},
            {"devices": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test out-of-range config values are rejected."""
        with pytest.raises(ValidationError):
            BargraphConfig(**kwargs)


class TestConfigPersistence:
    """Test loading and saving config files."""

    def test_missing_file_gives_default(self, temp_dir):
        config = BargraphConfig.load_or_default(temp_dir / "config.json")
        assert config == BargraphConfig()

    def test_save_and_load(self, temp_dir):
        """Test a saved config loads back equal."""
        path = temp_dir / "config.json"
        config = BargraphConfig(addresses=[0x71, 0x72], columns=12, brightness=40)

        config.save(path)

        assert BargraphConfig.load_or_default(path) == config

    def test_save_creates_backup(self, temp_dir):
        path = temp_dir / "config.json"
        BargraphConfig().save(path)
        BargraphConfig(brightness=10).save(path)

        backup = path.with_suffix(".json.bak")
        assert backup.exists()
        assert json.loads(backup.read_text())["brightness"] == 100

    def test_invalid_json(self, temp_dir):
        """Test syntax errors raise ConfigFileInvalidError."""
        path = temp_dir / "config.json"
        path.write_text('{"addresses": [112],}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            BargraphConfig.load_or_default(path)
        assert exc_info.value.file_path == str(path)

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError):
            BargraphConfig.load_or_default(path)

    def test_invalid_value(self, temp_dir):
        """Test bad values raise ConfigValidationError naming the field."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"columns": 30}))

        with pytest.raises(ConfigValidationError) as exc_info:
            BargraphConfig.load_or_default(path)
        assert exc_info.value.field == "columns"
        assert "24 columns" in exc_info.value.recovery_hint
