"""Core type definitions for formfields.

This module defines the small shared vocabulary used across the field classes:
- Validity: the tri-state validation result (True, False or None)
- ValidationMessage: templates for the human-readable validation messages
- Formats: the display patterns and masks used by date/time fields
- FieldOptions: every option name accepted by ``FormField.configure()``

Messages are plain English; a localization layer is out of scope.
"""

from enum import Enum
from typing import Any, Optional

from typing_extensions import TypedDict

Validity = Optional[bool]
"""Tri-state validity: True (valid), False (invalid), None (not evaluated yet)."""


class ValidationMessage(str, Enum):
    """Templates for validation messages written into a field's error text.

    Use ``format()`` to fill the placeholders:

        >>> ValidationMessage.MIN_LENGTH.format(5)
        'Minimum 5 characters'
    """
    MIN_LENGTH = "Minimum {} characters"
    MAX_LENGTH = "Maximum {} characters"
    EXAMPLE = "Example: {}"
    MIN_VALUE = "Minimum: {}"
    MAX_VALUE = "Maximum: {}"
    MAX_INTEGER_DIGITS = "Maximum number of digits before the decimal point: {}"
    MAX_DIGITS = "Maximum number of digits: {}"
    FRACTION_REQUIRED = "At least one digit is required after the decimal point"
    MAX_DECIMAL_PLACES = "Maximum number of digits after the decimal point: {}"
    CHOOSE_VALUE = "You must choose a value"

    def format(self, *args: Any) -> str:  # type: ignore[override]
        return self.value.format(*args)


class Formats(TypedDict):
    """Display patterns (LDML-style tokens) and input masks for date/time fields."""
    format_datetime: str
    format_date: str
    mask_datetime: str
    mask_date: str


class FieldOptions(TypedDict, total=False):
    """Options accepted by ``FormField.configure()``.

    A field only accepts the subset that applies to its own class; anything
    else raises ``FieldNotFoundError``.

    Attributes:
        is_required: Whether the field must be filled in
        default_value: Value restored by ``clear()``
        have_empty_value: Submit an empty string instead of None when empty
        min_length: Minimum string length
        max_length: Maximum string length
        regex: Regular expression the string must match
        example: Example of a correct value, shown when the regex fails
        mask: Input mask, ``_`` marks a fill slot
        return_with_mask: Submit the masked value instead of the stripped one
        min: Minimum number (or selection id)
        max: Maximum number
        decimal_places: Maximum digits right of the decimal point
        max_digits: Maximum digits in the whole number
        returned_key: Key of the submitted value for SelectObjectField
        dt_format: Date/time display pattern
        d_format: Date display pattern
    """
    is_required: bool
    default_value: Any
    have_empty_value: bool
    min_length: Optional[int]
    max_length: Optional[int]
    regex: str
    example: str
    mask: str
    return_with_mask: bool
    min: Any
    max: Any
    decimal_places: int
    max_digits: int
    returned_key: str
    dt_format: str
    d_format: str


__all__ = [
    "Validity",
    "ValidationMessage",
    "Formats",
    "FieldOptions",
]
