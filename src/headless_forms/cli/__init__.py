"""
headless-forms CLI.

Commands:
- decorate: Decorate a form definition file and print the JSON result
- tables: Show the effective type and validation lookup tables
"""

from __future__ import annotations

import logging
import os

import typer

from headless_forms.cli.commands import decorate_command, tables_command
from headless_forms.cli.utils import version_callback

app = typer.Typer(
    help="Decorate form framework definitions for headless front-ends",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """headless-forms CLI main callback for global options."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.command(name="decorate")(decorate_command)
app.command(name="tables")(tables_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
