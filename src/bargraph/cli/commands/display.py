"""Display command implementations."""

from typing import Optional

import click

from bargraph.cli.context import CliState
from bargraph.exceptions import BargraphError
from bargraph.models import BlinkRate, LedColor

BLINK_CHOICES = {
    "off": None,
    "2hz": BlinkRate.HZ_2,
    "1hz": BlinkRate.HZ_1,
    "0.5hz": BlinkRate.HZ_HALF,
}

device_option = click.option(
    '--device',
    '-d',
    type=click.IntRange(min=0),
    default=None,
    help='Device index (default: all devices)'
)


def _run(state: CliState, action) -> None:
    try:
        with state.open_bargraph() as bargraph:
            action(bargraph)
    except BargraphError as e:
        state.fail(e)


@click.command()
@device_option
@click.pass_obj
def on(state: CliState, device: Optional[int]):
    """Switch display(s) on."""
    _run(state, lambda bargraph: bargraph.on(device=device))


@click.command()
@device_option
@click.pass_obj
def off(state: CliState, device: Optional[int]):
    """Put display(s) in standby."""
    _run(state, lambda bargraph: bargraph.off(device=device))


@click.command()
@click.argument('percent', type=click.IntRange(0, 100))
@device_option
@click.pass_obj
def brightness(state: CliState, percent: int, device: Optional[int]):
    """Set brightness in percent (0-100)."""
    _run(state, lambda bargraph: bargraph.brightness(percent, device=device))


@click.command()
@click.argument('column', type=int)
@click.argument(
    'color',
    type=click.Choice([c.name.lower() for c in LedColor], case_sensitive=False)
)
@device_option
@click.pass_obj
def led(state: CliState, column: int, color: str, device: Optional[int]):
    """Set COLUMN to COLOR (off, green, red, yellow)."""
    value = LedColor[color.upper()]
    _run(state, lambda bargraph: bargraph.led(column, value, device=device))


@click.command()
@device_option
@click.pass_obj
def clear(state: CliState, device: Optional[int]):
    """Turn off every LED."""
    _run(state, lambda bargraph: bargraph.clear(device=device))


@click.command()
@click.argument('rate', type=click.Choice(list(BLINK_CHOICES), case_sensitive=False))
@device_option
@click.pass_obj
def blink(state: CliState, rate: str, device: Optional[int]):
    """Set blink RATE (off, 2hz, 1hz, 0.5hz)."""
    frequency = BLINK_CHOICES[rate.lower()]
    _run(state, lambda bargraph: bargraph.blink(frequency, device=device))
