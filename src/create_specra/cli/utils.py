"""
create-specra CLI utilities.

Shared helpers for version reporting, logging setup and error output.
"""

import logging
import os
import platform

import typer

from create_specra import __version__
from create_specra.core.errors import SpecraError

# Default log level when neither --verbose nor LOG_LEVEL is given
DEFAULT_LOG_LEVEL = "WARNING"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"create-specra version {__version__}")
        typer.echo(f"  Python:    {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:  {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure logging from --verbose or the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        level = getattr(logging, log_level, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def print_error(error: SpecraError) -> None:
    """Print a pipeline error and its recovery hint to stderr."""
    typer.echo("", err=True)
    typer.echo(f"Error: {error.message}", err=True)
    if error.hint:
        typer.echo("", err=True)
        typer.echo(error.hint, err=True)
