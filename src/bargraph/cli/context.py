"""Shared state and helpers for CLI commands."""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

import click
from pydantic import ValidationError

from bargraph.devices import BicolorBargraph, DryRunBusWriter, SMBusWriter
from bargraph.exceptions import format_error_for_display, wrap_pydantic_error
from bargraph.models import BargraphConfig

logger = logging.getLogger(__name__)


class I2CAddress(click.ParamType):
    """7-bit I2C address given in decimal or with a 0x prefix."""

    name = "address"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            address = int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not a valid address", param, ctx)
        if not 0x00 <= address <= 0x7F:
            self.fail(f"{value} is not a 7-bit I2C address", param, ctx)
        return address


@dataclass
class CliState:
    """Global options collected by the root command."""
    config_path: Optional[Path] = None
    addresses: List[int] = field(default_factory=list)
    bus: Optional[int] = None
    columns: Optional[int] = None
    dry_run: bool = False
    log_path: Optional[Path] = None

    def load_config(self) -> BargraphConfig:
        """Load the config file and apply command-line overrides."""
        base = BargraphConfig.load_or_default(self.config_path)

        overrides = {}
        if self.addresses:
            overrides["addresses"] = self.addresses
            overrides["devices"] = None
        if self.bus is not None:
            overrides["bus"] = self.bus
        if self.columns is not None:
            overrides["columns"] = self.columns
        if not overrides:
            return base

        try:
            return BargraphConfig.model_validate({**base.model_dump(), **overrides})
        except ValidationError as e:
            raise wrap_pydantic_error(e, "command line") from e

    @contextmanager
    def open_bargraph(self) -> Iterator[BicolorBargraph]:
        """Open the bus and yield an initialized driver."""
        config = self.load_config()
        bus = DryRunBusWriter() if self.dry_run else SMBusWriter(config.bus)
        with bus:
            yield BicolorBargraph(bus, config)
            if self.dry_run:
                for address, data in bus.writes:
                    click.echo(f"0x{address:02X} <- {data.hex(' ')}")

    def fail(self, error: Exception) -> None:
        """Report an error to the user and exit with status 1."""
        logger.error(f"Command failed: {error}", exc_info=True)

        user_message, recovery_hint = format_error_for_display(error)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        if self.log_path:
            click.echo(f"\nFor details, check the log file: {self.log_path}", err=True)
        sys.exit(1)
