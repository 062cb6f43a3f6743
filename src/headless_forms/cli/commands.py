"""
Decoration commands for the headless-forms CLI.

- decorate: Decorate a form definition and emit the client JSON
- tables: Print the effective lookup tables
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from headless_forms.core.config import resolve_config
from headless_forms.core.errors import ConfigError, HeadlessFormsError
from headless_forms.core.loader import load_definition_file, load_status_file, to_json


def decorate_command(
    definition: Path = typer.Argument(  # noqa: B008
        ...,
        help="Form definition file (.form.yaml, .yaml or .json)",
    ),
    status: Path | None = typer.Option(  # noqa: B008
        None,
        "--status",
        "-s",
        help="JSON/YAML file with the status payload echoed under 'api'",
    ),
    page: int = typer.Option(
        0,
        "--page",
        help="Current page index",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Decorator config (default: $HEADLESS_FORMS_CONFIG or ./headless.toml)",
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
    indent: int = typer.Option(
        2,
        "--indent",
        help="JSON indentation (0 for compact output)",
    ),
) -> None:
    """
    Decorate a form definition for a headless front-end.

    Examples:
        headless-forms decorate contact.form.yaml
        headless-forms decorate contact.form.yaml --status status.json --page 1
        headless-forms decorate contact.form.yaml -o contact.json
    """
    try:
        decorator = resolve_config(config).build_decorator(form_status=load_status_file(status))
        raw = load_definition_file(definition)
        decorated = decorator.decorate(raw, current_page=page)
    except HeadlessFormsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    content = to_json(decorated, indent=indent or None)

    if output:
        output.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Decorated form written to {output}")
    else:
        typer.echo(content)


def tables_command(
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Decorator config (default: $HEADLESS_FORMS_CONFIG or ./headless.toml)",
    ),
) -> None:
    """Show the type and validation tables the decorator would use."""
    try:
        settings = resolve_config(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    tables = settings.tables()
    typer.echo(
        json.dumps(
            {
                "name_prefix": settings.name_prefix,
                "fallback_type": tables.fallback_type,
                "types": dict(tables.types),
                "validations": dict(tables.validations),
            },
            indent=2,
        )
    )
