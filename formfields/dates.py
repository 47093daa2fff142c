"""Date/time parsing and formatting behind a fixed contract.

Date fields only ever need four things from a date library: parse an ISO-8601
string, parse a string with a display pattern, format a value with a display
pattern, and tell whether a parse succeeded. ``DateTimeAdapter`` provides
exactly that on top of ``python-dateutil`` and the standard ``datetime``
types.

Display patterns use LDML-style tokens (``dd.MM.yyyy HH:mm``). They are
translated once into ``strftime``/``strptime`` directives:

    ========  =========  =======================
    Token     Directive  Meaning
    ========  =========  =======================
    yyyy      %Y         four digit year
    yy        %y         two digit year
    MMMM      %B         full month name
    MMM       %b         abbreviated month name
    MM, M     %m         month
    dd, d     %d         day of month
    HH, H     %H         hour (00-23)
    hh, h     %I         hour (01-12)
    mm, m     %M         minute
    ss, s     %S         second
    a         %p         AM/PM
    ========  =========  =======================

Two-letter numeric tokens take exactly two digits when parsing, one-letter
tokens take one or two. Text inside single quotes is copied literally
(``yyyy-MM-dd'T'HH:mm``).
"""

import re
from datetime import date, datetime
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple, Union

from dateutil import tz
from dateutil.parser import isoparse

from formfields.errors import ConfigurationError

DateLike = Union[date, datetime]

ISO_DATE_PATTERN = "yyyy-MM-dd"
TIME_PATTERN = "HH:mm"

_ONE_OR_TWO = r"\d{1,2}"
_TWO = r"\d{2}"
_NAME = r"[^\W\d_]+"

# token: (directive, shape when parsing)
_TOKENS = {
    "yyyy": ("%Y", r"\d{4}"),
    "yy": ("%y", _TWO),
    "MMMM": ("%B", _NAME),
    "MMM": ("%b", _NAME),
    "MM": ("%m", _TWO),
    "M": ("%m", _ONE_OR_TWO),
    "dd": ("%d", _TWO),
    "d": ("%d", _ONE_OR_TWO),
    "HH": ("%H", _TWO),
    "H": ("%H", _ONE_OR_TWO),
    "hh": ("%I", _TWO),
    "h": ("%I", _ONE_OR_TWO),
    "mm": ("%M", _TWO),
    "m": ("%M", _ONE_OR_TWO),
    "ss": ("%S", _TWO),
    "s": ("%S", _ONE_OR_TWO),
    "a": ("%p", "[AaPp][Mm]"),
}


@lru_cache(maxsize=32)
def _tokenize(pattern: str) -> Tuple[Tuple[bool, str], ...]:
    """Split a pattern into ``(is_token, text)`` pairs.

    Raises:
        ConfigurationError: If the pattern contains an unsupported token or
            an unterminated quoted literal
    """
    parts: List[Tuple[bool, str]] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "'":
            end = pattern.find("'", i + 1)
            if end == -1:
                raise ConfigurationError(f"Unterminated literal in date pattern {pattern!r}")
            parts.append((False, pattern[i + 1:end]))
            i = end + 1
            continue
        if c.isalpha():
            j = i
            while j < len(pattern) and pattern[j] == c:
                j += 1
            token = pattern[i:j]
            if token not in _TOKENS:
                raise ConfigurationError(
                    f"Unsupported token {token!r} in date pattern {pattern!r}"
                )
            parts.append((True, token))
            i = j
            continue
        parts.append((False, c))
        i += 1
    return tuple(parts)


def to_strftime(pattern: str) -> str:
    """Translate a LDML-style pattern into a ``strftime`` format string.

    Raises:
        ConfigurationError: If the pattern contains an unsupported token

    Examples:
        >>> to_strftime("dd.MM.yyyy HH:mm")
        '%d.%m.%Y %H:%M'
        >>> to_strftime("d MMM yyyy")
        '%d %b %Y'
    """
    return "".join(
        _TOKENS[text][0] if is_token else text.replace("%", "%%")
        for is_token, text in _tokenize(pattern)
    )


def shape_regex(pattern: str) -> str:
    """Unanchored regex source matching text of the shape ``pattern`` parses.

    Examples:
        >>> re.fullmatch(shape_regex("HH:mm"), "10:3") is None
        True
        >>> re.fullmatch(shape_regex("d.M"), "1.12") is not None
        True
    """
    return "".join(
        _TOKENS[text][1] if is_token else re.escape(text)
        for is_token, text in _tokenize(pattern)
    )


@lru_cache(maxsize=32)
def _shape(pattern: str) -> Pattern[str]:
    return re.compile(shape_regex(pattern))


def check_pattern(pattern: str) -> None:
    """Raise ``ConfigurationError`` unless ``pattern`` is a usable date pattern."""
    _tokenize(pattern)


class DateTimeAdapter:
    """Stateless facade over the date library used by date/time fields.

    Every parse method returns ``None`` instead of raising when the input
    does not parse, which is the validity flag the fields rely on.

    Examples:
        >>> DateTimeAdapter.from_format("26.12.2000", "dd.MM.yyyy")
        datetime.datetime(2000, 12, 26, 0, 0)
        >>> DateTimeAdapter.from_format("26.12.20", "dd.MM.yyyy") is None
        True
        >>> DateTimeAdapter.to_format(datetime(2000, 12, 26), "yyyy-MM-dd")
        '2000-12-26'
    """

    @staticmethod
    def from_iso(text: str) -> Optional[datetime]:
        """Parse an ISO-8601 string; aware values are converted to local time."""
        try:
            value = isoparse(text)
        except (ValueError, OverflowError):
            return None
        if value.tzinfo is not None:
            value = value.astimezone(tz.tzlocal())
        return value

    @staticmethod
    def from_format(text: str, pattern: str) -> Optional[datetime]:
        """Parse ``text`` strictly with a display pattern."""
        if not isinstance(text, str) or not text:
            return None
        if _shape(pattern).fullmatch(text) is None:
            return None
        try:
            return datetime.strptime(text, to_strftime(pattern))
        except ValueError:
            return None

    @staticmethod
    def to_format(value: DateLike, pattern: str) -> str:
        return value.strftime(to_strftime(pattern))

    @staticmethod
    def to_iso(value: DateLike) -> str:
        """Format as ISO-8601 with milliseconds and the local UTC offset."""
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        if value.tzinfo is None:
            value = value.replace(tzinfo=tz.tzlocal())
        return value.isoformat(timespec="milliseconds")

    @classmethod
    def is_valid(cls, text: str, pattern: str) -> bool:
        return cls.from_format(text, pattern) is not None


__all__ = [
    "DateLike",
    "DateTimeAdapter",
    "ISO_DATE_PATTERN",
    "TIME_PATTERN",
    "check_pattern",
    "shape_regex",
    "to_strftime",
]
