"""Library-wide settings.

``FormSettings`` carries the date/time display patterns and masks and the CSS
class name used to flag invalid fields. Every field takes a ``settings``
argument; when it is omitted the process-wide default instance is used, so
reconfiguring the default once affects every field built afterwards.

Date/time fields copy their patterns at construction time, so changing the
formats never reformats values that are already stored. ``css_valid`` reads
``error_class`` on every access.

Usage:
    >>> from formfields import settings
    >>> settings.set_formats({"format_date": "yyyy/MM/dd", "mask_date": "____/__/__"})
    >>> settings.get_settings().formats["format_date"]
    'yyyy/MM/dd'
    >>> settings.reset_settings()
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from formfields.dates import check_pattern
from formfields.errors import ConfigurationError
from formfields.types import Formats

logger = logging.getLogger(__name__)

DEFAULT_FORMATS: Formats = {
    "format_datetime": "dd.MM.yyyy HH:mm",
    "format_date": "dd.MM.yyyy",
    "mask_datetime": "__.__.____ __:__",
    "mask_date": "__.__.____",
}

DEFAULT_ERROR_CLASS = "b-danger"

FORMATS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {name: {"type": "string", "minLength": 1} for name in DEFAULT_FORMATS},
    "additionalProperties": False,
}

_formats_validator = Draft7Validator(FORMATS_SCHEMA)


def _default_formats() -> Formats:
    return Formats(**DEFAULT_FORMATS)


@dataclass
class FormSettings:
    """Display patterns, masks and the error CSS class shared by fields.

    Attributes:
        formats: Date/time display patterns and masks
        error_class: CSS class name set on invalid fields by ``css_valid``
    """
    formats: Formats = field(default_factory=_default_formats)
    error_class: str = DEFAULT_ERROR_CLASS

    def set_formats(self, formats: Mapping[str, str]) -> None:
        """Merge ``formats`` over the current formats.

        Raises:
            ConfigurationError: If a key is unknown, a value is not a non-empty
                string, or a date pattern has an unsupported token
        """
        error = best_match(_formats_validator.iter_errors(dict(formats)))
        if error is not None:
            if error.validator == "additionalProperties":
                unknown = sorted(set(error.instance) - set(DEFAULT_FORMATS))
                raise ConfigurationError(f"Unknown format name(s): {', '.join(unknown)}")
            name = ".".join(str(p) for p in error.path)
            raise ConfigurationError(f"Invalid format {name!r}: {error.message}")

        for name in ("format_datetime", "format_date"):
            if name in formats:
                check_pattern(formats[name])

        self.formats = Formats(**{**self.formats, **formats})  # type: ignore[typeddict-item]
        logger.debug("Formats updated: %s", self.formats)

    def set_error_class(self, error_class: str) -> None:
        self.error_class = error_class
        logger.debug("Error class set to %r", error_class)

    def reset(self) -> None:
        """Restore the default formats and error class."""
        self.formats = _default_formats()
        self.error_class = DEFAULT_ERROR_CLASS


_settings = FormSettings()


def get_settings() -> FormSettings:
    """Return the process-wide default settings instance."""
    return _settings


def set_formats(formats: Mapping[str, str]) -> None:
    _settings.set_formats(formats)


def set_error_class(error_class: str) -> None:
    _settings.set_error_class(error_class)


def reset_settings() -> None:
    _settings.reset()


__all__ = [
    "DEFAULT_FORMATS",
    "DEFAULT_ERROR_CLASS",
    "FormSettings",
    "get_settings",
    "set_formats",
    "set_error_class",
    "reset_settings",
]
