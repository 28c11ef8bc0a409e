"""Command line interface for bargraph."""
