"""
Shared CLI helpers.
"""

import platform

import typer


def get_version() -> str:
    """Get headless-forms version from package metadata."""
    from headless_forms import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"headless-forms {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()
