"""Error types for formfields.

Two kinds of errors exist:

- Configuration errors are raised: an unknown option passed to
  ``configure()``, an option of the wrong type, a malformed formats mapping,
  or a SelectObjectField value without its ``returned_key``.
- Validation errors are never raised. They are kept on each field as a
  tri-state ``is_valid`` flag and an ``ErrorMessage``.

``ErrorMessage`` holds two independent slots: the message produced by the
field's own validation and the message supplied from outside (for example a
server response). Rendering joins the present parts with ``" | "``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Union


class ConfigurationError(Exception):
    """Raised when a field or the library settings are configured incorrectly."""


class FieldNotFoundError(ConfigurationError):
    """Raised when a name does not correspond to a known field attribute or key.

    Attributes:
        field_name: The name that could not be found
    """

    def __init__(self, field_name: str = ""):
        self.field_name = field_name
        super().__init__(f'Not found field with name "{field_name}"')


MessageInput = Union[str, Iterable[str], None]


@dataclass
class ErrorMessage:
    """Two-slot error text of a single field.

    Attributes:
        validation_message: Message written by the field's validation
        external_message: Message assigned from outside the field

    Examples:
        >>> msg = ErrorMessage()
        >>> msg.external_message = "Already taken"
        >>> msg.validation_message = "Minimum 5 characters"
        >>> msg.render()
        'Minimum 5 characters | Already taken'
        >>> msg.validation_message = None
        >>> str(msg)
        'Already taken'
    """
    validation_message: Optional[str] = None
    external_message: Optional[str] = None

    SEPARATOR = " | "

    def render(self) -> str:
        """Join the present parts; an empty string when both are absent."""
        parts = [p for p in (self.validation_message, self.external_message) if p]
        return self.SEPARATOR.join(parts)

    def set_external(self, message: MessageInput) -> None:
        """Set the external slot; a list of messages is joined with ", "."""
        if message is not None and not isinstance(message, str):
            message = ", ".join(str(m) for m in message)
        self.external_message = message or None

    def clear(self) -> None:
        self.validation_message = None
        self.external_message = None

    def __bool__(self) -> bool:
        return bool(self.validation_message or self.external_message)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        result: Dict[str, Any] = {}
        if self.validation_message:
            result["validation"] = self.validation_message
        if self.external_message:
            result["external"] = self.external_message
        return result


__all__ = [
    "ConfigurationError",
    "FieldNotFoundError",
    "ErrorMessage",
]
