"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from bargraph import __version__

from .commands import blink, brightness, clear, config, led, off, on
from .context import CliState, I2CAddress

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "bargraph-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = Path.home() / ".bargraph" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "bargraph.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="bargraph")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.bargraph/config.json)'
)
@click.option(
    '--address',
    '-a',
    'addresses',
    type=I2CAddress(),
    multiple=True,
    help='Device I2C address, repeat once per device (e.g. -a 0x70 -a 0x71)'
)
@click.option('--bus', type=int, default=None, help='I2C bus number (/dev/i2c-N)')
@click.option('--columns', type=int, default=None, help='Columns per bargraph (max 24)')
@click.option(
    '--dry-run',
    is_flag=True,
    help='Print bus writes instead of sending them'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./bargraph-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    addresses: tuple,
    bus: Optional[int],
    columns: Optional[int],
    dry_run: bool,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Bicolor bargraph control - drive HT16K33 red/green LED bargraphs over I2C.

    Every command first initializes the selected devices (oscillator on,
    blink off, configured brightness, display cleared) and then applies
    the requested change. Without --device a command applies to all
    devices.

    \b
    Examples:
      # Light column 12 green on the default device (0x70)
      bargraph led 12 green

    \b
      # Two bargraphs, set both to 50% brightness
      bargraph -a 0x70 -a 0x71 brightness 50

    \b
      # Blink the second bargraph at 1 Hz
      bargraph -a 0x70 -a 0x71 blink 1hz --device 1

    \b
      # See what would be written without hardware
      bargraph --dry-run led 0 yellow
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)

    ctx.obj = CliState(
        config_path=config_path,
        addresses=list(addresses),
        bus=bus,
        columns=columns,
        dry_run=dry_run,
        log_path=log_path,
    )


cli.add_command(on)
cli.add_command(off)
cli.add_command(brightness)
cli.add_command(led)
cli.add_command(clear)
cli.add_command(blink)
cli.add_command(config)

if __name__ == "__main__":
    cli()
