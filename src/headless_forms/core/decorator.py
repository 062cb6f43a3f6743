"""
Form definition decorator.

Turns a form framework definition tree into the JSON structure consumed by a
headless front-end: containers keep their shape under ``elements``, leaf
fields get a submit ``name``, a client ``type`` tag, a consolidated
``validation`` string and promoted presentation properties.

Example:
    >>> decorator = FormDefinitionDecorator(form_status={"status": None})
    >>> decorated = decorator.decorate(definition, current_page=0)
    >>> decorated["elements"][0]["elements"][0]["name"]
    'tx_form_formframework[contact][name]'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from .definition import (
    ContainerNode,
    DefinitionNode,
    FieldNode,
    FormDefinition,
    parse_definition,
)
from .errors import ErrorContext, MalformedDefinitionError, MissingFieldError
from .tables import DEFAULT_TABLES, UPLOAD_TYPES, DecoratorTables

logger = logging.getLogger(__name__)

DEFAULT_NAME_PREFIX = "tx_form_formframework"

ElementHook = Callable[[dict[str, Any]], dict[str, Any]]
DefinitionHook = Callable[[dict[str, Any], Any, int], dict[str, Any]]


def _identity_element(element: dict[str, Any]) -> dict[str, Any]:
    return element


def _identity_definition(
    decorated: dict[str, Any], definition: Any, current_page: int
) -> dict[str, Any]:
    return decorated


@runtime_checkable
class DefinitionDecorator(Protocol):
    """Anything that turns a form definition into its decorated form."""

    def __call__(
        self, definition: Mapping[str, Any] | FormDefinition, current_page: int
    ) -> dict[str, Any]:
        """Decorate ``definition`` for the given page."""
        ...


def element_name(form_id: str, identifier: str, prefix: str = DEFAULT_NAME_PREFIX) -> str:
    """Build the submit name of a field, e.g. ``tx_form_formframework[contact][email]``."""
    return f"{prefix}[{form_id}][{identifier}]"


class FormDefinitionDecorator:
    """
    Decorates form definitions for a headless front-end.

    Specialisation happens through constructor arguments rather than
    subclassing:

    - ``tables``: type and validation lookup tables (defaults to the
      framework's built-in element types)
    - ``override_element``: called once per leaf field right after its
      ``name`` is assigned, before any other normalization
    - ``override_definition``: called once with the finished tree, the
      definition exactly as passed in, and the current page

    The status payload is echoed verbatim under ``api`` in every result.
    """

    def __init__(
        self,
        form_status: Any = None,
        tables: DecoratorTables = DEFAULT_TABLES,
        override_element: ElementHook | None = None,
        override_definition: DefinitionHook | None = None,
        name_prefix: str = DEFAULT_NAME_PREFIX,
    ):
        self.form_status = form_status if form_status is not None else {}
        self.tables = tables
        self.override_element = override_element or _identity_element
        self.override_definition = override_definition or _identity_definition
        self.name_prefix = name_prefix

    def __call__(
        self, definition: Mapping[str, Any] | FormDefinition, current_page: int
    ) -> dict[str, Any]:
        return self.decorate(definition, current_page)

    def decorate(
        self, definition: Mapping[str, Any] | FormDefinition, current_page: int
    ) -> dict[str, Any]:
        """
        Decorate a complete form definition.

        Args:
            definition: Raw definition mapping or an already parsed tree
            current_page: Page index, handed to ``override_definition`` only

        Returns:
            Mapping with ``id``, ``api``, ``i18n``, ``renderingOptions`` and
            ``elements``

        Raises:
            MissingFieldError: A required key is absent
            MalformedDefinitionError: A value has the wrong shape
        """
        if isinstance(definition, FormDefinition):
            form = definition
        else:
            form = parse_definition(definition)

        form_id = form.identifier
        context = ErrorContext(path="renderables", form_id=form_id)

        decorated: dict[str, Any] = {
            "id": form_id,
            "api": self.form_status,
            "i18n": form.translations,
            "renderingOptions": dict(form.rendering_options),
            "elements": self._decorate_renderables(form.renderables, form_id, context),
        }

        logger.debug(
            "Decorated form '%s' with %d top-level elements (page %s)",
            form_id,
            len(decorated["elements"]),
            current_page,
        )

        return self.override_definition(decorated, definition, current_page)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def _decorate_renderables(
        self, nodes: list[DefinitionNode], form_id: str, context: ErrorContext
    ) -> list[dict[str, Any]]:
        decorated = []
        for index, node in enumerate(nodes):
            node_context = context.child(f"[{index}]")
            if isinstance(node, ContainerNode):
                decorated.append(self._decorate_container(node, form_id, node_context))
            else:
                decorated.append(self.prepare_element(node, form_id, node_context))
        return decorated

    def _decorate_container(
        self, node: ContainerNode, form_id: str, context: ErrorContext
    ) -> dict[str, Any]:
        container = node.attributes()
        container["elements"] = self._decorate_renderables(
            node.renderables, form_id, context.child("renderables")
        )
        return container

    # -------------------------------------------------------------------------
    # Leaf fields
    # -------------------------------------------------------------------------

    def prepare_element(
        self,
        node: FieldNode | Mapping[str, Any],
        form_id: str,
        context: ErrorContext | None = None,
    ) -> dict[str, Any]:
        """
        Decorate a single leaf field.

        Steps run in a fixed order; later steps read keys the earlier ones
        (or ``override_element``) produced.
        """
        context = context or ErrorContext(form_id=form_id)
        source = node.to_element() if isinstance(node, FieldNode) else dict(node)
        if source.get("identifier") is None:
            raise MissingFieldError("identifier", context)

        source["name"] = element_name(form_id, source["identifier"], self.name_prefix)
        element = self.override_element(source)

        for key in ("identifier", "type"):
            if element.get(key) is None:
                raise MissingFieldError(key, context)

        identifier = element.pop("identifier")
        default_value = element.pop("defaultValue", None)
        properties = element.pop("properties", None)
        validators = element.pop("validators", None)

        if element.get("label") in ("", None):
            element.pop("label", None)

        element["id"] = identifier
        element["validationName"] = element.get("label", identifier)

        if default_value is not None and default_value != "":
            element["value"] = default_value

        if properties is not None and not isinstance(properties, Mapping):
            raise MalformedDefinitionError("'properties' must be a mapping", context)

        if properties is not None and element["type"] in UPLOAD_TYPES:
            properties = {k: v for k, v in properties.items() if k != "saveToFileMount"}

        element_type = element["type"]
        element["type"] = self.tables.client_type(element_type)
        if element_type not in self.tables.types:
            logger.debug(
                "Unknown element type '%s' for '%s', using '%s'",
                element_type,
                identifier,
                element["type"],
            )

        validator_ids = self._validator_identifiers(validators, context)

        if properties is not None:
            validator_ids += self._promote_properties(element, properties)

        if validators is not None or validator_ids:
            element["validation"] = "|".join(
                str(self.tables.validation_keyword(validator_id)) for validator_id in validator_ids
            )

        return element

    def _promote_properties(
        self, element: dict[str, Any], properties: Mapping[str, Any]
    ) -> list[str]:
        """Copy client-relevant properties onto the element; return extra validator ids."""
        if properties.get("options") is not None:
            element["options"] = properties["options"]

        description = properties.get("elementDescription")
        if description is not None and description != "":
            element["help"] = description

        attributes = properties.get("fluidAdditionalAttributes") or {}
        if isinstance(attributes, Mapping) and attributes.get("placeholder") is not None:
            element["placeholder"] = attributes["placeholder"]
        elif properties.get("prependOptionLabel") is not None:
            element["placeholder"] = properties["prependOptionLabel"]

        mime_types = properties.get("allowedMimeTypes")
        if mime_types is not None:
            if isinstance(mime_types, str):
                mime_types = [mime_types]
            elif isinstance(mime_types, Mapping):
                mime_types = list(mime_types.values())
            return ["mime:" + ",".join(str(mime_type) for mime_type in mime_types)]
        return []

    def _validator_identifiers(self, validators: Any, context: ErrorContext) -> list[str]:
        if validators is None:
            return []
        if not isinstance(validators, list):
            raise MalformedDefinitionError("'validators' must be a list", context)

        identifiers = []
        for index, validator in enumerate(validators):
            if not isinstance(validator, Mapping):
                raise MalformedDefinitionError(
                    "validator entries must be mappings", context.child(f"validators[{index}]")
                )
            if validator.get("identifier") is None:
                raise MissingFieldError("identifier", context.child(f"validators[{index}]"))
            identifiers.append(validator["identifier"])
        return identifiers
