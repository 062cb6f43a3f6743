"""
headless-forms - form framework definitions for headless front-ends.

Decorates the nested page/fieldset/field definitions produced by the form
framework into a JSON tree a decoupled renderer can consume directly.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.decorator import DefinitionDecorator, FormDefinitionDecorator
from .core.definition import FormDefinition, parse_definition
from .core.errors import (
    DefinitionError,
    HeadlessFormsError,
    MalformedDefinitionError,
    MissingFieldError,
)
from .core.tables import DecoratorTables


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("headless-forms")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "FormDefinitionDecorator",
    "DefinitionDecorator",
    "DecoratorTables",
    "FormDefinition",
    "parse_definition",
    "HeadlessFormsError",
    "DefinitionError",
    "MissingFieldError",
    "MalformedDefinitionError",
]
