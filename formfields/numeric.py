"""Integer and decimal fields.

Values may be numbers or strings typed by the user. Strings must look like a
non-negative number; both bounds are inclusive.

    >>> field = NumberField(min=1, max=10)
    >>> field.value = "11"
    >>> field.is_valid, field.error
    (False, 'Maximum: 10')

``DecimalField`` also limits how many digits the number may have:

    >>> price = DecimalField(decimal_places=2, max_digits=5)
    >>> price.value = "1234.5"
    >>> price.is_valid, price.error
    (False, 'Maximum number of digits before the decimal point: 3')
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Pattern

from formfields import options as opt
from formfields.base import FormField
from formfields.settings import FormSettings
from formfields.types import ValidationMessage

_INTEGER_RE = re.compile(r"^\d+$")


def to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a number or numeric string to Decimal; None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


class NumberField(FormField):
    """Non-negative integer, given as a number or a string of digits.

    Attributes:
        min: Inclusive lower bound, None for none
        max: Inclusive upper bound, None for none
        example: Example of a correct value used in the error message
    """

    options = {
        "min": opt.OPTIONAL_NUMBER,
        "max": opt.OPTIONAL_NUMBER,
        "example": opt.STRING,
    }

    number_re: Pattern[str] = _INTEGER_RE

    def __init__(
        self,
        default_value: Any = None,
        is_required: bool = True,
        min: Any = None,
        max: Any = None,
        example: str = "integer",
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__(default_value, is_required, settings=settings)
        self.min = min
        self.max = max
        self.example = example

    def _matches_number(self, text: str) -> bool:
        return self.number_re.match(text) is not None

    def _fail(self, message: str) -> None:
        self.is_valid = False
        self._set_validation_error(message)

    def _check_valid(self) -> None:
        super()._check_valid()
        if not self.is_valid:
            return

        if self.value_is_empty and not self.is_required:
            return

        value = self._value
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
            self._fail(ValidationMessage.EXAMPLE.format(self.example))
            return

        if isinstance(value, str) and not self._matches_number(value):
            self._fail(ValidationMessage.EXAMPLE.format(self.example))
            return

        number = to_decimal(value)
        if number is None:
            return
        if not number.is_finite():
            self._fail(ValidationMessage.EXAMPLE.format(self.example))
            return

        if self.min is not None and number < to_decimal(self.min):
            self._fail(ValidationMessage.MIN_VALUE.format(self.min))
            return

        if self.max is not None and number > to_decimal(self.max):
            self._fail(ValidationMessage.MAX_VALUE.format(self.max))
            return


class DecimalField(NumberField):
    """Non-negative decimal number with digit budgets.

    Attributes:
        decimal_places: Maximum digits after the decimal point
        max_digits: Maximum digits in total, integer and fraction parts together
    """

    options = {
        "decimal_places": opt.COUNT,
        "max_digits": opt.COUNT,
    }

    number_re = re.compile(r"^[\d.]+$")

    def __init__(
        self,
        default_value: Any = None,
        is_required: bool = True,
        min: Any = None,
        max: Any = None,
        decimal_places: int = 2,
        max_digits: int = 8,
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__(default_value, is_required, min, max, example="1.00 or 1", settings=settings)
        self.decimal_places = decimal_places
        self.max_digits = max_digits

    @property
    def value(self) -> Any:
        """The raw value, with a string of digits shown as an int."""
        if isinstance(self._value, str) and _INTEGER_RE.match(self._value):
            return int(self._value)
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._assign(value)

    def _matches_number(self, text: str) -> bool:
        return super()._matches_number(text) and text.count(".") <= 1

    def _check_valid(self) -> None:
        super()._check_valid()
        if not self.is_valid or self.value_is_empty:
            return

        if isinstance(self._value, str):
            text = self._value
        else:
            text = format(Decimal(str(self._value)), "f")
        integer, dot, fraction = text.lstrip("-").partition(".")

        integer_budget = self.max_digits - self.decimal_places
        if len(integer) > integer_budget:
            self._fail(ValidationMessage.MAX_INTEGER_DIGITS.format(integer_budget))
            return

        if not dot:
            return

        if len(integer) + len(fraction) > self.max_digits:
            self._fail(ValidationMessage.MAX_DIGITS.format(self.max_digits))
        elif not fraction:
            self._fail(ValidationMessage.FRACTION_REQUIRED.value)
        elif len(fraction) > self.decimal_places:
            self._fail(ValidationMessage.MAX_DECIMAL_PLACES.format(self.decimal_places))


__all__ = [
    "NumberField",
    "DecimalField",
    "to_decimal",
]
