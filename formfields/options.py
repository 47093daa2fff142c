"""Option validation for ``FormField.configure()``.

Each field class declares the options it accepts in an ``options`` class
attribute, a mapping from option name to a JSON Schema fragment. The options
of a class and all of its bases are merged into one Draft 7 object schema
with ``additionalProperties: false``, so an unknown name and a value of the
wrong type are both reported by jsonschema and translated here into the
library's configuration errors.
"""

from functools import lru_cache
from typing import Any, Dict, Mapping

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from formfields.errors import ConfigurationError, FieldNotFoundError

ANY: Dict[str, Any] = {}
BOOLEAN: Dict[str, Any] = {"type": "boolean"}
STRING: Dict[str, Any] = {"type": "string"}
OPTIONAL_INTEGER: Dict[str, Any] = {"type": ["integer", "null"], "minimum": 0}
OPTIONAL_NUMBER: Dict[str, Any] = {"type": ["number", "null"]}
COUNT: Dict[str, Any] = {"type": "integer", "minimum": 0}


def options_schema(cls: type) -> Dict[str, Any]:
    """Build the JSON Schema of every option accepted by a field class."""
    properties: Dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        properties.update(klass.__dict__.get("options", {}))
    return {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }


@lru_cache(maxsize=None)
def _validator(cls: type) -> Draft7Validator:
    schema = options_schema(cls)
    Draft7Validator.check_schema(schema)
    return Draft7Validator(schema)


def check_options(cls: type, options: Mapping[str, Any]) -> None:
    """Check ``options`` against the schema of ``cls``.

    Raises:
        FieldNotFoundError: If an option name is not accepted by ``cls``
        ConfigurationError: If an option value has the wrong type or range
    """
    error = best_match(_validator(cls).iter_errors(dict(options)))
    if error is None:
        return

    if error.validator == "additionalProperties":
        known = error.schema.get("properties", {})
        unknown = sorted(k for k in error.instance if k not in known)
        raise FieldNotFoundError(unknown[0] if unknown else "")

    name = ".".join(str(p) for p in error.path)
    raise ConfigurationError(
        f"Invalid value for option {name!r} of {cls.__name__}: {error.message}"
    )


__all__ = [
    "options_schema",
    "check_options",
]
