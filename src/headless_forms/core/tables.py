"""
Lookup tables translating form framework names into client keywords.

The decorator owns two tables: element type names to the type tag a
front-end renderer understands, and validator identifiers to the keyword
used in the client's validation string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Form framework element type → client type tag
TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "StaticText": "staticText",
        "Text": "text",
        "Textarea": "textarea",
        "Password": "password",
        "Email": "email",
        "Telephone": "tel",
        "Url": "url",
        "Number": "number",
        "Date": "date",
        "SingleSelect": "select",
        "FileUpload": "file",
        "Checkbox": "checkbox",
        "MultiCheckbox": "checkbox",
        "RadioButton": "radio",
    }
)

# Validator identifier → client validation keyword
VALIDATION_MAP: Mapping[str, str] = MappingProxyType(
    {
        "EmailAddress": "email",
        "NotEmpty": "required",
        "Number": "number",
    }
)

FALLBACK_TYPE = "hidden"

CONTAINER_TYPES = frozenset({"Page", "Fieldset", "GridRow"})
UPLOAD_TYPES = frozenset({"ImageUpload", "FileUpload"})


@dataclass(frozen=True)
class DecoratorTables:
    """
    Immutable pair of lookup tables used by a decorator instance.

    Example:
        tables = DEFAULT_TABLES.extend(types={"ImageUpload": "file"})
        tables.client_type("ImageUpload")  # "file"
        tables.client_type("Honeypot")     # "hidden"
    """

    types: Mapping[str, str] = field(default_factory=lambda: TYPE_MAP)
    validations: Mapping[str, str] = field(default_factory=lambda: VALIDATION_MAP)
    fallback_type: str = FALLBACK_TYPE

    def __post_init__(self) -> None:
        # Caller dicts are copied into read-only views
        if not isinstance(self.types, MappingProxyType):
            object.__setattr__(self, "types", MappingProxyType(dict(self.types)))
        if not isinstance(self.validations, MappingProxyType):
            object.__setattr__(self, "validations", MappingProxyType(dict(self.validations)))

    def client_type(self, element_type: str) -> str:
        """Map a framework element type, degrading unknown types to the fallback."""
        return self.types.get(element_type, self.fallback_type)

    def validation_keyword(self, identifier: str) -> str:
        """Map a validator identifier; unknown identifiers pass through unchanged."""
        return self.validations.get(identifier, identifier)

    def extend(
        self,
        types: Mapping[str, str] | None = None,
        validations: Mapping[str, str] | None = None,
        fallback_type: str | None = None,
    ) -> DecoratorTables:
        """Return new tables with entries merged over this instance's."""
        return DecoratorTables(
            types={**self.types, **(types or {})},
            validations={**self.validations, **(validations or {})},
            fallback_type=fallback_type if fallback_type is not None else self.fallback_type,
        )


DEFAULT_TABLES = DecoratorTables()
