"""Command-line interface."""

from mimeconf.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
