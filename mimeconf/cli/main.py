"""mimeconf CLI - main application entry point.

Usage:
    mimeconf [-v] > mime.conf

Reads the media-type database (/etc/mime.types unless MIMECONF_SOURCE
says otherwise) and writes a lighttpd mimetype.assign block to stdout.
Diagnostics go to stderr.
"""

from __future__ import annotations

import typer

from mimeconf.core.config import load_config
from mimeconf.core.exceptions import ConfigValidationError, SourceUnavailableError
from mimeconf.core.logging import configure_logging, get_logger
from mimeconf.pipeline import run

logger = get_logger(__name__)

app = typer.Typer(
    name="mimeconf",
    help="Create a lighttpd mime.conf from /etc/mime.types",
    add_completion=False,
    pretty_exceptions_enable=False,
)


@app.command()
def generate_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report media-type conflicts merged to application/octet-stream",
    ),
) -> None:
    """Write mimetype.assign for the system media-type database to stdout."""
    try:
        config = load_config(verbose=True if verbose else None)
    except ConfigValidationError as e:
        typer.echo(f"✗ {e.error_code}: {e}", err=True)
        for fix in e.how_to_fix:
            typer.echo(f"  Fix: {fix}", err=True)
        raise typer.Exit(code=2)

    configure_logging(level=config.log_level)

    try:
        registry = run(config)
    except SourceUnavailableError as e:
        # lighttpd 1.4.71 and later provide a default mimetype.assign with
        # common web media types, so a missing database is only a warning
        typer.echo(f"warning: {e}", err=True)
        logger.debug("Database unavailable", error_code=e.error_code, path=e.path)
        raise typer.Exit(code=0)

    if config.verbose:
        for conflict in registry.reportable_conflicts():
            typer.echo(conflict.describe(), err=True)


def cli_main() -> None:
    """Entry point for console_scripts.

    This function is called when running 'mimeconf' command.
    """
    app()


if __name__ == "__main__":
    cli_main()
