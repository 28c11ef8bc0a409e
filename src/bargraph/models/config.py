"""Driver configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from bargraph.utils.persistence import PydanticPersistence

HT16K33_ADDRESS = 0x70
DEFAULT_BRIGHTNESS = 100
DEFAULT_COLUMNS = 24
MAX_COLUMNS = 24

DEFAULT_CONFIG_PATH = Path.home() / ".bargraph" / "config.json"


class BargraphConfig(BaseModel):
    """Bus addresses and display options for a chain of bargraphs."""

    addresses: list[int] = Field(
        default_factory=lambda: [HT16K33_ADDRESS],
        min_length=1,
        description="7-bit I2C address of each device, in device index order",
    )
    devices: int | None = Field(
        default=None,
        ge=1,
        description="Number of devices to drive (None = one per address)",
    )
    columns: int = Field(
        default=DEFAULT_COLUMNS,
        ge=1,
        le=MAX_COLUMNS,
        description="Logical columns per bargraph",
    )
    brightness: int = Field(
        default=DEFAULT_BRIGHTNESS,
        ge=0,
        le=100,
        description="Initial brightness in percent",
    )
    bus: int = Field(default=1, ge=0, description="I2C bus number (/dev/i2c-N)")

    @field_validator("addresses")
    @classmethod
    def check_addresses(cls, addresses: list[int]) -> list[int]:
        for address in addresses:
            if not 0x00 <= address <= 0x7F:
                raise ValueError(f"address 0x{address:X} is not a 7-bit I2C address")
        if len(set(addresses)) != len(addresses):
            raise ValueError("addresses must be unique")
        return addresses

    @model_validator(mode="after")
    def default_device_count(self) -> "BargraphConfig":
        if self.devices is None:
            self.devices = len(self.addresses)
        elif self.devices > len(self.addresses):
            raise ValueError(
                f"devices={self.devices} but only {len(self.addresses)} address(es) configured"
            )
        return self

    @property
    def device_addresses(self) -> list[int]:
        """Addresses of the devices actually driven."""
        return self.addresses[: self.devices]

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "BargraphConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.bargraph/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
