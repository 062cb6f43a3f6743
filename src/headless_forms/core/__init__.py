"""Core headless-forms functionality: definition parsing, decoration, lookup tables, config."""

from .config import DecoratorConfig, load_config, resolve_config
from .decorator import DefinitionDecorator, FormDefinitionDecorator, element_name
from .definition import (
    ContainerNode,
    DefinitionNode,
    FieldNode,
    FormDefinition,
    ValidatorSpec,
    parse_definition,
    parse_node,
)
from .errors import (
    ConfigError,
    DefinitionError,
    ErrorContext,
    HeadlessFormsError,
    MalformedDefinitionError,
    MissingFieldError,
)
from .loader import load_definition_file, load_status_file, to_json
from .tables import DEFAULT_TABLES, TYPE_MAP, VALIDATION_MAP, DecoratorTables

__all__ = [
    "FormDefinitionDecorator",
    "DefinitionDecorator",
    "element_name",
    "FormDefinition",
    "ContainerNode",
    "FieldNode",
    "ValidatorSpec",
    "DefinitionNode",
    "parse_definition",
    "parse_node",
    "DecoratorTables",
    "DEFAULT_TABLES",
    "TYPE_MAP",
    "VALIDATION_MAP",
    "DecoratorConfig",
    "load_config",
    "resolve_config",
    "load_definition_file",
    "load_status_file",
    "to_json",
    "HeadlessFormsError",
    "DefinitionError",
    "MissingFieldError",
    "MalformedDefinitionError",
    "ConfigError",
    "ErrorContext",
]
