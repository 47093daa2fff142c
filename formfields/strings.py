"""String fields with length, pattern and input-mask rules.

``StringField`` covers every text input. Kinds of text that differ only in
their bounds, pattern, example and mask (email, phone, MAC address...) are
``StringPreset`` values, see ``formfields.presets``. ``TimeField`` has its own
class because it changes the assigned value before masking.

Masking happens on assignment:

    >>> field = StringField(mask="__.__.____")
    >>> field.value = "2612"
    >>> field.value
    '26.12.'
    >>> field.value = "26.12"
    >>> field.value
    '26.12'
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Optional

from formfields import options as opt
from formfields.base import FormField, is_empty_value
from formfields.masking import apply_mask, strip_mask
from formfields.settings import FormSettings
from formfields.types import ValidationMessage


@dataclass(frozen=True)
class StringPreset:
    """Named configuration of a StringField.

    Attributes:
        name: Preset name
        min_length: Minimum length of the raw value
        max_length: Maximum length of the raw value
        regex: Pattern searched in the raw value
        example: Example of a correct value, shown when the pattern fails
        mask: Input mask, empty for none
        return_with_mask: Submit the value with its mask literals
    """
    name: str
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    regex: str = ""
    example: str = ""
    mask: str = ""
    return_with_mask: bool = False

    def with_bounds(self, min_length: Optional[int], max_length: Optional[int]) -> "StringPreset":
        return replace(self, min_length=min_length, max_length=max_length)


class StringField(FormField):
    """Text field validated by length and a regular expression.

    Attributes:
        min_length: Minimum length, None for no limit
        max_length: Maximum length, None for no limit
        regex: Pattern searched in the value; empty matches everything
        example: Example of a correct value used in the error message
        mask: Input mask where ``_`` is a fill slot
        return_with_mask: Whether ``value_clear`` keeps the mask literals
    """

    options = {
        "min_length": opt.OPTIONAL_INTEGER,
        "max_length": opt.OPTIONAL_INTEGER,
        "regex": opt.STRING,
        "example": opt.STRING,
        "mask": opt.STRING,
        "return_with_mask": opt.BOOLEAN,
    }

    def __init__(
        self,
        default_value: Any = "",
        is_required: bool = True,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        regex: str = "",
        example: str = "",
        mask: str = "",
        return_with_mask: bool = False,
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__(default_value, is_required, settings=settings)
        self.min_length = min_length
        self.max_length = max_length
        self.regex = regex
        self.example = example
        self.mask = mask
        self.return_with_mask = return_with_mask

    @classmethod
    def from_preset(
        cls,
        preset: StringPreset,
        default_value: Any = "",
        is_required: bool = True,
        settings: Optional[FormSettings] = None,
    ) -> "StringField":
        """Build a field from a named preset.

        Examples:
            >>> from formfields.presets import EMAIL
            >>> field = StringField.from_preset(EMAIL, "user@example.com")
            >>> field.max_length
            100
        """
        return cls(
            default_value,
            is_required,
            min_length=preset.min_length,
            max_length=preset.max_length,
            regex=preset.regex,
            example=preset.example,
            mask=preset.mask,
            return_with_mask=preset.return_with_mask,
            settings=settings,
        )

    @property
    def value_clear(self) -> Any:
        if self.return_with_mask:
            return None if is_empty_value(self._value) else self._value

        raw = "" if self._value is None else str(self._value)
        result = strip_mask(raw, self.mask)
        if self.have_empty_value:
            return result
        return result or None

    def _assign(self, value: Any) -> None:
        if not self.mask or not value:
            super()._assign(value)
            return

        value = str(value)
        # Shorter than what is stored: the user is deleting, keep it as typed.
        if self._value and len(str(self._value)) > len(value):
            super()._assign(value)
            return

        super()._assign(apply_mask(value, self.mask))

    def _check_valid(self) -> None:
        super()._check_valid()
        if not self.is_valid:
            return

        if self.value_is_empty and not self.is_required:
            self.is_valid = True
            self._value = ""
            return

        text = str(self._value)

        if self.min_length is not None and len(text) < self.min_length:
            self.is_valid = False
            self._set_validation_error(ValidationMessage.MIN_LENGTH.format(self.min_length))
            return

        if self.max_length is not None and len(text) > self.max_length:
            self.is_valid = False
            self._set_validation_error(ValidationMessage.MAX_LENGTH.format(self.max_length))
            return

        self.is_valid = re.search(self.regex, text) is not None
        if not self.is_valid:
            self._set_validation_error(ValidationMessage.EXAMPLE.format(self.example))


class TimeField(StringField):
    """``HH:mm`` time of day.

    Out-of-range hours and minutes are clamped instead of rejected:

        >>> field = TimeField()
        >>> field.value = "27:75"
        >>> field.value
        '23:59'
    """

    def __init__(
        self,
        default_value: Any = "",
        is_required: bool = True,
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__(
            default_value,
            is_required,
            min_length=5,
            max_length=5,
            regex=r"^\d{2}:\d{2}$",
            example="HH:mm",
            mask="__:__",
            return_with_mask=True,
            settings=settings,
        )

    def _assign(self, value: Any) -> None:
        if not value:
            super()._assign(value)
            return

        value = str(value)
        hour = value[0:2]
        minute = value[3:5]
        if hour.isdigit() and int(hour) > 23:
            hour = "23"
        if minute.isdigit() and int(minute) > 59:
            minute = "59"

        super()._assign(hour + value[2:3] + minute)


__all__ = [
    "StringPreset",
    "StringField",
    "TimeField",
]
