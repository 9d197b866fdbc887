"""Command line interface for scss-powertools."""

from scss_powertools.cli.root import cli, create_app, main

__all__ = ["cli", "create_app", "main"]
