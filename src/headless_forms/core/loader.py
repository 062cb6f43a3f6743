"""
Reading form definitions and status payloads from disk.

Form framework definitions are usually stored as ``*.form.yaml``; JSON is
accepted as well so exported definitions can be replayed.
"""

from __future__ import annotations

import json
import logging
from datetime import date, time
from pathlib import Path
from typing import Any

import yaml

from .errors import ErrorContext, MalformedDefinitionError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _read_document(path: Path) -> Any:
    context = ErrorContext(source=str(path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedDefinitionError(f"Cannot read file: {e}", context) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(content)
        return json.loads(content)
    except yaml.YAMLError as e:
        raise MalformedDefinitionError(f"Invalid YAML: {e}", context) from e
    except json.JSONDecodeError as e:
        raise MalformedDefinitionError(f"Invalid JSON: {e}", context) from e


def load_definition_file(path: Path) -> dict[str, Any]:
    """
    Load a raw form definition mapping.

    Raises:
        MalformedDefinitionError: Unreadable file, bad syntax, or the
            document is not a mapping
    """
    data = _read_document(path)
    if not isinstance(data, dict):
        raise MalformedDefinitionError(
            "form definition must be a mapping", ErrorContext(source=str(path))
        )
    logger.debug("Loaded form definition '%s' from %s", data.get("identifier"), path)
    return data


def load_status_file(path: Path | None) -> Any:
    """Load a status payload; ``None`` (no file) yields an empty mapping."""
    if path is None:
        return {}
    data = _read_document(path)
    return {} if data is None else data


def _json_default(value: Any) -> str:
    # YAML loads unquoted dates and times as datetime objects
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def to_json(decorated: dict[str, Any], indent: int | None = 2) -> str:
    """Serialize a decorated definition for the HTTP layer; dates become ISO strings."""
    return json.dumps(decorated, indent=indent, ensure_ascii=False, default=_json_default)
