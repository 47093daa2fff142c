"""Date and date/time fields.

Values are stored as display strings (``26.12.2000 10:30`` with the default
formats) and submitted as ISO-8601. Assignment accepts ``date``/``datetime``
objects, ISO strings, or display strings; anything that does not parse yet is
kept as typed (after masking) so partial input is never thrown away.

    >>> field = DateField()
    >>> field.value = "2000-12-26"
    >>> field.value
    '26.12.2000'
    >>> field.value_clear
    '2000-12-26'
"""

import re
from datetime import date, datetime
from typing import Any, Optional, Union

from typing_extensions import Unpack

from formfields import options as opt
from formfields.dates import (
    ISO_DATE_PATTERN,
    TIME_PATTERN,
    DateLike,
    DateTimeAdapter,
    check_pattern,
    shape_regex,
)
from formfields.settings import FormSettings
from formfields.strings import StringField
from formfields.types import FieldOptions

ISO_DATETIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2})(:\d{2}(\.\d{3})?([+-]\d{2}:\d{2}|Z)?)?$"
)
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DateTimeField(StringField):
    """Date and time of day, displayed with ``format_datetime``.

    Attributes:
        dt_format: Display pattern of the stored value
        d_format: Pattern of the date part, used by the ``day``/``month``/``year`` accessors
    """

    options = {
        "dt_format": opt.STRING,
        "d_format": opt.STRING,
    }

    def __init__(
        self,
        default_value: Any = "",
        is_required: bool = True,
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__(default_value, is_required, settings=settings)
        self.set_format()

    def configure(
        self, options: Optional[FieldOptions] = None, **kwargs: Unpack[FieldOptions]
    ) -> "DateTimeField":
        """Apply option overrides, rejecting unusable date patterns first.

        Raises:
            ConfigurationError: If ``dt_format`` or ``d_format`` has an unsupported token
        """
        merged: FieldOptions = {**(options or {}), **kwargs}
        for pattern in (merged.get("dt_format"), merged.get("d_format")):
            if isinstance(pattern, str):
                check_pattern(pattern)
        super().configure(merged)
        return self

    def set_format(self) -> None:
        """Copy the display patterns and mask from the field's settings."""
        formats = self.settings.formats
        self.dt_format = formats["format_datetime"]
        self.d_format = formats["format_date"]
        self.mask = formats["mask_datetime"]
        self.example = formats["format_datetime"]

    @property
    def display_format(self) -> str:
        return self.dt_format

    def _parse(self, value: Any) -> Optional[DateLike]:
        if isinstance(value, (date, datetime)):
            return value
        if not isinstance(value, str):
            return None
        if ISO_DATETIME_RE.match(value):
            return DateTimeAdapter.from_iso(value)
        return DateTimeAdapter.from_format(value, self.dt_format)

    def _assign(self, value: Any) -> None:
        if not value:
            super()._assign(value)
            return

        parsed = self._parse(value)
        if parsed is not None:
            value = DateTimeAdapter.to_format(parsed, self.display_format)
        super()._assign(value)

    def _check_valid(self) -> None:
        if self.value_is_empty:
            self.is_valid = not self.is_required
            return

        text = str(self._value)
        if ISO_DATETIME_RE.match(text):
            self.is_valid = DateTimeAdapter.from_iso(text) is not None
        else:
            self.is_valid = DateTimeAdapter.is_valid(text, self.dt_format)

    @property
    def value_clear(self) -> Optional[str]:
        parsed = DateTimeAdapter.from_format(self._value or "", self.dt_format)
        if parsed is None:
            return None
        return DateTimeAdapter.to_iso(parsed)

    def _date_part(self) -> Optional[datetime]:
        match = re.search(shape_regex(self.d_format), str(self._value or ""))
        if match is None:
            return None
        return DateTimeAdapter.from_format(match.group(0), self.d_format)

    @property
    def day(self) -> Union[int, str]:
        parsed = self._date_part()
        return parsed.day if parsed is not None else ""

    @property
    def month(self) -> Union[int, str]:
        parsed = self._date_part()
        return parsed.month if parsed is not None else ""

    @property
    def year(self) -> Union[int, str]:
        parsed = self._date_part()
        return parsed.year if parsed is not None else ""

    @property
    def date(self) -> str:
        """The date-shaped part of the value, as displayed."""
        match = re.search(shape_regex(self.d_format), str(self._value or ""))
        return match.group(0) if match is not None else ""

    @property
    def time(self) -> str:
        parsed = DateTimeAdapter.from_format(self._value or "", self.dt_format)
        return DateTimeAdapter.to_format(parsed, TIME_PATTERN) if parsed is not None else ""


class DateField(DateTimeField):
    """Calendar date, displayed with ``format_date`` and submitted as ``yyyy-MM-dd``."""

    def set_format(self) -> None:
        formats = self.settings.formats
        self.dt_format = formats["format_datetime"]
        self.d_format = formats["format_date"]
        self.mask = formats["mask_date"]
        self.example = formats["format_date"]

    @property
    def display_format(self) -> str:
        return self.d_format

    def _parse(self, value: Any) -> Optional[DateLike]:
        if isinstance(value, (date, datetime)):
            return value
        if not isinstance(value, str):
            return None
        if ISO_DATE_RE.match(value):
            return DateTimeAdapter.from_format(value, ISO_DATE_PATTERN)
        return DateTimeAdapter.from_format(value, self.d_format)

    def _check_valid(self) -> None:
        if self.value_is_empty:
            self.is_valid = not self.is_required
            return
        self.is_valid = DateTimeAdapter.is_valid(str(self._value), self.d_format)

    @property
    def value_clear(self) -> Optional[str]:
        parsed = DateTimeAdapter.from_format(self._value or "", self.d_format)
        if parsed is None:
            return None
        return DateTimeAdapter.to_format(parsed, ISO_DATE_PATTERN)

    def _date_part(self) -> Optional[datetime]:
        return DateTimeAdapter.from_format(self._value or "", self.d_format)


__all__ = [
    "DateTimeField",
    "DateField",
]
