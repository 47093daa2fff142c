"""The FormField base contract.

A field owns a raw, display-oriented ``value``, validates it every time it
is assigned, and exposes a cleared ``value_clear`` that is ready to be
submitted. Validity is tri-state:

- ``True``: the value passed every check
- ``False``: a check failed; ``error`` usually says which
- ``None``: nothing was evaluated yet (an empty default value)

Usage:
    >>> field = FormField(is_required=True)
    >>> field.is_valid is None
    True
    >>> field.value = "anything"
    >>> field.is_valid
    True
    >>> field.value = None
    >>> field.is_valid
    False
"""

from decimal import Decimal
from typing import Any, ClassVar, Dict, Mapping, Optional

from typing_extensions import Unpack

from formfields import options as opt
from formfields.errors import ErrorMessage, MessageInput
from formfields.settings import FormSettings, get_settings
from formfields.types import FieldOptions, Validity

_NUMBER_TYPES = (int, float, Decimal)


def is_empty_value(value: Any) -> bool:
    """True for None, an empty string, or an empty mapping/list/tuple/set."""
    if value is None or (isinstance(value, str) and value == ""):
        return True
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def is_zero_value(value: Any) -> bool:
    """True for a numeric zero or the string ``"0"``."""
    if isinstance(value, bool):
        return False
    if isinstance(value, _NUMBER_TYPES):
        return value == 0
    return value == "0"


class FormField:
    """Base class of every validated form field.

    Attributes:
        default_value: Value set on construction and restored by ``clear()``
        is_required: Whether an empty value is invalid
        is_changed: Whether the value differs from ``default_value``
        have_empty_value: Whether an empty value may be submitted as ``""``
        is_valid: Tri-state validity of the current value
        settings: Settings the field was constructed with
    """

    options: ClassVar[Dict[str, Dict[str, Any]]] = {
        "is_required": opt.BOOLEAN,
        "default_value": opt.ANY,
        "have_empty_value": opt.BOOLEAN,
    }

    def __init__(
        self,
        default_value: Any = None,
        is_required: bool = True,
        settings: Optional[FormSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self._value = default_value
        self.default_value = default_value
        self.is_required = is_required
        self.is_changed = False
        self.have_empty_value = False
        self.is_valid: Validity = None if self._is_unset() else True
        self._error = ErrorMessage()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, is_valid={self.is_valid!r})"

    def _is_unset(self) -> bool:
        """Whether the current value counts as "nothing entered yet"."""
        return self.value_is_empty and not self.value_is_zero

    @property
    def css_valid(self) -> Dict[str, bool]:
        """CSS class name mapped to whether it should be applied."""
        return {self.settings.error_class: self.is_valid is False}

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._assign(value)

    def _assign(self, value: Any) -> None:
        """Store ``value`` and re-validate; subclasses normalize before calling this."""
        self._value = value
        self.is_changed = value != self.default_value
        self.validate()

    @property
    def value_clear(self) -> Any:
        """The value ready to be submitted."""
        return self._value

    @property
    def value_is_empty(self) -> bool:
        return is_empty_value(self._value)

    @property
    def value_is_zero(self) -> bool:
        return is_zero_value(self._value)

    @property
    def error(self) -> str:
        """Rendered error text, ``"<validation> | <external>"``."""
        return self._error.render()

    @error.setter
    def error(self, message: MessageInput) -> None:
        self._error.set_external(message)

    def _set_validation_error(self, message: Optional[str]) -> None:
        self._error.validation_message = message or None

    def clear(self) -> None:
        """Restore ``default_value``."""
        self.value = self.default_value

    def configure(
        self, options: Optional[FieldOptions] = None, **kwargs: Unpack[FieldOptions]
    ) -> "FormField":
        """Apply named option overrides and return the field.

        Options can be passed as a mapping, as keyword arguments, or both.

        Raises:
            FieldNotFoundError: If an option name does not exist on this field
            ConfigurationError: If an option value has the wrong type

        Examples:
            >>> field = FormField().configure(is_required=False)
            >>> field.is_required
            False
        """
        merged = {**(options or {}), **kwargs}
        opt.check_options(type(self), merged)
        for name, value in merged.items():
            setattr(self, name, value)
        return self

    def validate(self) -> Validity:
        """Re-run validation of the current value and return ``is_valid``."""
        self._check_valid()
        if self.is_valid is not False:
            self._set_validation_error(None)
        return self.is_valid

    def _check_valid(self) -> None:
        if self.value_is_empty and not self.value_is_zero:
            self.is_valid = not self.is_required
        else:
            self.is_valid = True


__all__ = [
    "FormField",
    "is_empty_value",
    "is_zero_value",
]
