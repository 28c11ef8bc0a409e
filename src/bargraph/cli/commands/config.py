"""Config command implementations."""

import click

from bargraph.cli.context import CliState
from bargraph.exceptions import BargraphError
from bargraph.models.config import DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Show or save driver configuration."""
    pass


@config.command(name="show")
@click.pass_obj
def show(state: CliState):
    """Display the effective configuration."""
    try:
        cfg = state.load_config()
    except BargraphError as e:
        state.fail(e)
        return

    click.echo(f"Config file: {state.config_path or DEFAULT_CONFIG_PATH}")
    click.echo(f"  bus:        /dev/i2c-{cfg.bus}")
    click.echo(f"  addresses:  {', '.join(f'0x{a:02X}' for a in cfg.addresses)}")
    click.echo(f"  devices:    {cfg.devices}")
    click.echo(f"  columns:    {cfg.columns}")
    click.echo(f"  brightness: {cfg.brightness}%")


@config.command(name="save")
@click.pass_obj
def save(state: CliState):
    """Save the effective configuration (including -a/--bus/--columns overrides)."""
    path = state.config_path or DEFAULT_CONFIG_PATH
    try:
        cfg = state.load_config()
        cfg.save(path)
    except BargraphError as e:
        state.fail(e)
        return
    click.echo(f"Saved configuration to {path}")
