"""
Error types for form definition parsing, decoration, and configuration.
"""

from dataclasses import dataclass
from typing import Optional


class HeadlessFormsError(Exception):
    """Base exception for all headless-forms errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class DefinitionError(HeadlessFormsError):
    """
    Raised when the upstream form definition breaks its contract.

    These are never retried: the definition tree is an in-memory value and
    decorating it again yields the same failure.
    """

    pass


class MissingFieldError(DefinitionError):
    """
    Raised when a required key is absent from a definition node.

    Examples:
    - Root definition without ``identifier``
    - Container without ``identifier``
    - Leaf element without ``type`` or ``identifier``
    """

    def __init__(
        self,
        field_name: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.field_name = field_name
        super().__init__(f"missing required key '{field_name}'", context)


class MalformedDefinitionError(DefinitionError):
    """
    Raised when a definition value has the wrong shape.

    Examples:
    - ``renderables`` is not a list
    - A node is not a mapping
    - A validator entry has no ``identifier``
    - ``properties`` is not a mapping
    """

    pass


class ConfigError(HeadlessFormsError):
    """Raised when a decorator configuration file cannot be loaded."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a definition tree.

    Attributes:
        path: Dotted path from the root, e.g. ``renderables[0].renderables[2]``
        form_id: Identifier of the form being processed, when known
        source: Optional file the definition was loaded from
    """

    path: str = ""
    form_id: str | None = None
    source: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "contact.form.yaml: form 'contact' at renderables[0]"
        """
        parts = []
        if self.source:
            parts.append(self.source)
        location = f"form '{self.form_id}'" if self.form_id else "definition"
        if self.path:
            location += f" at {self.path}"
        parts.append(location)
        return ": ".join(parts)

    def child(self, segment: str) -> "ErrorContext":
        """Return a context pointing one level deeper into the tree."""
        if self.path and not segment.startswith("["):
            path = f"{self.path}.{segment}"
        else:
            path = f"{self.path}{segment}"
        return ErrorContext(path=path, form_id=self.form_id, source=self.source)
