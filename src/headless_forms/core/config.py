"""
Decorator configuration loaded from ``headless.toml``.

Example file:

    [decorator]
    name_prefix = "tx_form_formframework"
    fallback_type = "hidden"

    [decorator.types]
    ImageUpload = "file"

    [decorator.validations]
    StringLength = "length"

Entries under ``types`` and ``validations`` are merged over the built-in
tables; they never remove a built-in mapping.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .decorator import DEFAULT_NAME_PREFIX, FormDefinitionDecorator
from .errors import ConfigError
from .tables import DEFAULT_TABLES, FALLBACK_TYPE, DecoratorTables

CONFIG_ENV_VAR = "HEADLESS_FORMS_CONFIG"
DEFAULT_CONFIG_NAME = "headless.toml"


@dataclass
class DecoratorConfig:
    """Settings for building a ``FormDefinitionDecorator``."""

    name_prefix: str = DEFAULT_NAME_PREFIX
    fallback_type: str = FALLBACK_TYPE
    types: dict[str, str] = field(default_factory=dict)
    validations: dict[str, str] = field(default_factory=dict)

    def tables(self) -> DecoratorTables:
        """Built-in tables extended with this configuration's entries."""
        return DEFAULT_TABLES.extend(
            types=self.types,
            validations=self.validations,
            fallback_type=self.fallback_type,
        )

    def build_decorator(self, form_status: Any = None, **hooks: Any) -> FormDefinitionDecorator:
        """Create a decorator using these settings; ``hooks`` go to the constructor."""
        return FormDefinitionDecorator(
            form_status=form_status,
            tables=self.tables(),
            name_prefix=self.name_prefix,
            **hooks,
        )


def _string_table(data: Any, section: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise ConfigError(f"[{section}] must be a table")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"[{section}] {key} must be a string, got {type(value).__name__}")
    return dict(data)


def load_config(path: Path) -> DecoratorConfig:
    """
    Load decorator configuration from a TOML file.

    Raises:
        ConfigError: The file is missing, unparsable, or has invalid values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    decorator = data.get("decorator", {})
    if not isinstance(decorator, dict):
        raise ConfigError("[decorator] must be a table")

    name_prefix = decorator.get("name_prefix", DEFAULT_NAME_PREFIX)
    fallback_type = decorator.get("fallback_type", FALLBACK_TYPE)
    for key, value in (("name_prefix", name_prefix), ("fallback_type", fallback_type)):
        if not isinstance(value, str) or not value:
            raise ConfigError(f"decorator.{key} must be a non-empty string")

    return DecoratorConfig(
        name_prefix=name_prefix,
        fallback_type=fallback_type,
        types=_string_table(decorator.get("types", {}), "decorator.types"),
        validations=_string_table(decorator.get("validations", {}), "decorator.validations"),
    )


def resolve_config(path: Path | None = None) -> DecoratorConfig:
    """
    Find and load the effective configuration.

    Order: explicit ``path``, then ``$HEADLESS_FORMS_CONFIG``, then
    ``headless.toml`` in the working directory. Defaults apply when none
    exists.
    """
    if path is not None:
        return load_config(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return load_config(Path(env_path))

    local = Path.cwd() / DEFAULT_CONFIG_NAME
    if local.exists():
        return load_config(local)

    return DecoratorConfig()
