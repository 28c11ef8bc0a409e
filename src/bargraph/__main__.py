"""Main entry point for bargraph."""

from bargraph.cli.main import cli

if __name__ == "__main__":
    cli()
