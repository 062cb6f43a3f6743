"""
Form definition tree types.

A form definition arrives as nested mappings built by the form framework.
``parse_definition`` turns it into a tree of ``ContainerNode`` and
``FieldNode`` values so missing keys and wrong shapes fail up front instead
of deep inside decoration.

Container-typed nodes (``Page``, ``Fieldset``, ``GridRow``) only become
``ContainerNode`` when they have at least one child; an empty or absent
``renderables`` list makes them a ``FieldNode`` like any other leaf.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ErrorContext, MalformedDefinitionError, MissingFieldError
from .tables import CONTAINER_TYPES

# =============================================================================
# Nodes
# =============================================================================


class ValidatorSpec(BaseModel):
    """A single validator entry attached to a field."""

    identifier: str

    model_config = ConfigDict(frozen=True, extra="allow")


class FieldNode(BaseModel):
    """
    Leaf element of a form definition.

    Keys not modelled here (``renderingOptions``, custom attributes, ...) are
    kept as extras and carried through decoration untouched.
    """

    identifier: str
    type: str
    label: str | None = None
    default_value: Any = Field(default=None, alias="defaultValue")
    properties: dict[str, Any] | None = None
    validators: list[ValidatorSpec] | None = None

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def to_element(self) -> dict[str, Any]:
        """Return the node as a fresh mapping keyed the way the framework keys it."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ContainerNode(BaseModel):
    """Page, fieldset or grid row holding at least one child node."""

    identifier: str
    type: Literal["Page", "Fieldset", "GridRow"]
    renderables: list[DefinitionNode] = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")

    def attributes(self) -> dict[str, Any]:
        """Return the container's own keys, without children or discarded metadata."""
        data = self.model_dump(by_alias=True, exclude_unset=True, exclude={"renderables"})
        data.pop("defaultValue", None)
        data.pop("properties", None)
        return data


DefinitionNode = Union[ContainerNode, FieldNode]

ContainerNode.model_rebuild()


class FormDefinition(BaseModel):
    """Root of a form definition tree."""

    identifier: str
    renderables: list[DefinitionNode] = Field(default_factory=list)
    i18n: dict[str, Any] | None = None
    rendering_options: dict[str, Any] = Field(default_factory=dict, alias="renderingOptions")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @property
    def translations(self) -> dict[str, Any]:
        """Translation keys from ``i18n.properties``, empty when absent."""
        if not self.i18n:
            return {}
        return dict(self.i18n.get("properties") or {})


# =============================================================================
# Parsing
# =============================================================================


def parse_definition(data: Mapping[str, Any], source: str | None = None) -> FormDefinition:
    """
    Parse a raw form definition mapping into a ``FormDefinition``.

    Args:
        data: Definition as produced by the form framework
        source: Optional file name, used only in error messages

    Returns:
        Parsed definition tree

    Raises:
        MissingFieldError: A required key is absent
        MalformedDefinitionError: A value has the wrong shape
    """
    context = ErrorContext(source=source)
    if not isinstance(data, Mapping):
        raise MalformedDefinitionError("form definition must be a mapping", context)
    if data.get("identifier") is None:
        raise MissingFieldError("identifier", context)

    context = ErrorContext(form_id=str(data["identifier"]), source=source)
    _check_i18n(data.get("i18n"), context.child("i18n"))
    renderables = _parse_renderables(data.get("renderables"), context.child("renderables"))
    return _validate(FormDefinition, {**data, "renderables": renderables}, context)


def _check_i18n(i18n: Any, context: ErrorContext) -> None:
    if i18n is None:
        return
    if not isinstance(i18n, Mapping):
        raise MalformedDefinitionError(
            f"'i18n' must be a mapping, got {type(i18n).__name__}", context
        )
    properties = i18n.get("properties")
    if properties is not None and not isinstance(properties, Mapping):
        raise MalformedDefinitionError(
            f"'properties' must be a mapping, got {type(properties).__name__}",
            context.child("properties"),
        )


def parse_node(data: Any, context: ErrorContext | None = None) -> DefinitionNode:
    """Parse one node (and its subtree) of a form definition."""
    context = context or ErrorContext()
    if not isinstance(data, Mapping):
        raise MalformedDefinitionError(
            f"definition node must be a mapping, got {type(data).__name__}", context
        )
    for key in ("identifier", "type"):
        if data.get(key) is None:
            raise MissingFieldError(key, context)

    if data["type"] in CONTAINER_TYPES:
        children = data.get("renderables")
        if children is not None and not isinstance(children, list):
            raise MalformedDefinitionError(
                f"'renderables' must be a list, got {type(children).__name__}", context
            )
        if children:
            parsed = _parse_renderables(children, context.child("renderables"))
            return _validate(ContainerNode, {**data, "renderables": parsed}, context)

    return _validate(FieldNode, data, context)


def _parse_renderables(value: Any, context: ErrorContext) -> list[DefinitionNode]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedDefinitionError(
            f"'renderables' must be a list, got {type(value).__name__}", context
        )
    return [parse_node(item, context.child(f"[{index}]")) for index, item in enumerate(value)]


def _validate(model: type[BaseModel], payload: Mapping[str, Any], context: ErrorContext) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            raise MissingFieldError(location, context) from e
        raise MalformedDefinitionError(f"{location}: {error['msg']}", context) from e
