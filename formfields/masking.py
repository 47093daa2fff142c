"""Input masks.

A mask is a template in which ``_`` marks a fill slot and every other
character is a literal separator, e.g. ``__.__.____`` for a date or
``+_______________`` for a phone number.

    >>> apply_mask("2612", "__.__.____")
    '26.12.'
    >>> apply_mask("26122000", "__.__.____")
    '26.12.2000'
    >>> strip_mask("26.12.2000", "__.__.____")
    '26122000'
"""

import re
from functools import lru_cache
from typing import Optional, Pattern

FILL_CHAR = "_"


def mask_literals(mask: str) -> str:
    """Return the literal (non-slot) characters of a mask, in order."""
    return mask.replace(FILL_CHAR, "")


@lru_cache(maxsize=64)
def _literal_pattern(mask: str) -> Optional[Pattern[str]]:
    literals = "".join(sorted(set(mask_literals(mask))))
    if not literals:
        return None
    return re.compile("[" + "".join(re.escape(c) for c in literals) + "]")


def strip_mask(value: str, mask: str) -> str:
    """Remove every character of ``value`` that is a literal of ``mask``."""
    pattern = _literal_pattern(mask)
    if pattern is None:
        return value
    return pattern.sub("", value)


def apply_mask(value: str, mask: str) -> str:
    """Fill the slots of ``mask`` with the non-literal characters of ``value``.

    Characters beyond the number of slots are dropped. When the input runs
    out before the slots do, the result is cut at the first unfilled slot so
    that a partially typed value stays partial.
    """
    clean = strip_mask(value, mask)
    if not clean:
        return ""

    chars = iter(clean)
    filled = []
    for c in mask:
        if c == FILL_CHAR:
            c = next(chars, FILL_CHAR)
        filled.append(c)
    result = "".join(filled)

    index = result.find(FILL_CHAR)
    if index != -1:
        return result[:index]
    return result


__all__ = [
    "FILL_CHAR",
    "mask_literals",
    "strip_mask",
    "apply_mask",
]
