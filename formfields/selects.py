"""Selection fields.

``SelectField`` holds the id of a chosen option. Ids start at ``min``
(1 by default); ``0`` or an empty value means nothing is selected yet.

``SelectObjectField`` holds the chosen option itself, a mapping, and
submits only the entry named by ``returned_key``.
"""

import logging
from typing import Any, Mapping, Optional

from formfields import options as opt
from formfields.base import FormField, is_empty_value
from formfields.errors import FieldNotFoundError
from formfields.numeric import to_decimal
from formfields.settings import FormSettings
from formfields.types import ValidationMessage

logger = logging.getLogger(__name__)


class SelectField(FormField):
    """Id of an option chosen from a list.

    Examples:
        >>> field = SelectField()
        >>> field.is_valid is None
        True
        >>> field.value = 3
        >>> field.is_valid
        True
    """

    options = {
        "min": opt.OPTIONAL_NUMBER,
    }

    def __init__(
        self,
        default_value: Any = 0,
        is_required: bool = True,
        min: Any = 1,
        settings: Optional[FormSettings] = None,
    ) -> None:
        self.min = min
        super().__init__(default_value, is_required, settings=settings)

    def _below_min(self) -> bool:
        if self.min is None:
            return False
        number = to_decimal(self._value)
        return number is not None and number.is_finite() and number < to_decimal(self.min)

    def _is_unset(self) -> bool:
        return super()._is_unset() or self.value_is_zero or self._below_min()

    def _check_valid(self) -> None:
        super()._check_valid()

        if (self.value_is_empty and not self.value_is_zero) or self._below_min():
            self.is_valid = not self.is_required

        if self.is_valid is False:
            self._set_validation_error(ValidationMessage.CHOOSE_VALUE.value)

    @property
    def value_clear(self) -> Any:
        if not self.is_required and (self.value_is_zero or self.value_is_empty):
            return None
        return self._value


class SelectObjectField(FormField):
    """Chosen option kept as a mapping; ``returned_key`` selects what is submitted.

    Assigning an empty value does not re-validate, so the field keeps the
    validity it had until the next ``validate()``.

    Raises:
        FieldNotFoundError: When a non-empty value has no ``returned_key`` entry

    Examples:
        >>> field = SelectObjectField(returned_key="id")
        >>> field.value = {"id": 7, "title": "Seven"}
        >>> field.value_clear
        7
    """

    options = {
        "returned_key": opt.STRING,
    }

    def __init__(
        self,
        default_value: Any = None,
        is_required: bool = True,
        returned_key: str = "",
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__({} if default_value is None else default_value, is_required, settings=settings)
        self.returned_key = returned_key

    def check_returned_key(self) -> None:
        if not isinstance(self._value, Mapping) or self.returned_key not in self._value:
            raise FieldNotFoundError(self.returned_key)

    @property
    def returned_value(self) -> Any:
        if not isinstance(self._value, Mapping):
            return None
        return self._value.get(self.returned_key)

    def _assign(self, value: Any) -> None:
        self._value = value
        self.is_changed = value != self.default_value
        if not self.value_is_empty:
            self.validate()

    def _check_valid(self) -> None:
        super()._check_valid()
        if self.is_required and self.value_is_empty:
            self._set_validation_error(ValidationMessage.CHOOSE_VALUE.value)
            return
        if not self.is_valid or self.value_is_empty:
            return

        self.check_returned_key()
        self.is_valid = True

        if is_empty_value(self.returned_value):
            logger.warning("Returned key %r of the selected value is empty", self.returned_key)

    @property
    def value_clear(self) -> Any:
        if self.value_is_empty:
            return None
        self.check_returned_key()
        return self.returned_value


__all__ = [
    "SelectField",
    "SelectObjectField",
]
