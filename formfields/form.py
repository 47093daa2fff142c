"""Form: named fields validated and submitted as a unit.

A form is built from a mapping of names to either validated fields
(``FormField`` or ``ListField`` instances) or plain values. Plain values are
passed through untouched; they are never validated.

Usage:
    >>> from formfields.presets import email_field
    >>> from formfields.selects import SelectField
    >>> form = Form({"email": email_field(), "city": SelectField(), "source": "landing"})
    >>> form.check_valid()
    False
    >>> form.fields = {"email": "user@example.com", "city": 2}
    >>> form.check_valid()
    True
    >>> form.value_fields
    {'email': 'user@example.com', 'city': 2, 'source': 'landing'}
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Union

from formfields.base import FormField
from formfields.errors import MessageInput
from formfields.lists import ListField

logger = logging.getLogger(__name__)

TypedField = Union[FormField, ListField]


class Form:
    """Named collection of typed fields and plain values.

    A name is classified once, when it is first added: typed when its value
    is a FormField or ListField, plain otherwise.

    Attributes:
        errors: External errors that did not match a typed field
    """

    def __init__(self, fields: Mapping[str, Any]) -> None:
        self._form_fields: Dict[str, TypedField] = {}
        self._value_fields: Dict[str, Any] = {}
        self._errors: Dict[str, Any] = {}

        for name, value in fields.items():
            self._add(name, value)

    def _add(self, name: str, value: Any) -> None:
        if isinstance(value, (FormField, ListField)):
            self._form_fields[name] = value
        else:
            self._value_fields[name] = value

    def __repr__(self) -> str:
        return f"Form(fields={self.keys()!r})"

    def __getitem__(self, name: str) -> Any:
        if name in self._form_fields:
            return self._form_fields[name]
        return self._value_fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._form_fields or name in self._value_fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> List[str]:
        """Typed field names first, then plain value names, each in insertion order."""
        return [*self._form_fields, *self._value_fields]

    @property
    def form_field_names(self) -> List[str]:
        return list(self._form_fields)

    @property
    def value_field_names(self) -> List[str]:
        return list(self._value_fields)

    @property
    def value_fields(self) -> Dict[str, Any]:
        """Cleared values of typed fields plus plain values, ready to submit."""
        result = {name: field.value_clear for name, field in self._form_fields.items()}
        result.update(self._value_fields)
        return result

    @property
    def value_list(self) -> List[Any]:
        """Cleared values of typed fields only, in registration order."""
        return [field.value_clear for field in self._form_fields.values()]

    @property
    def fields(self) -> Dict[str, Any]:
        """Every member: typed fields as field objects, plain values as they are."""
        return {**self._form_fields, **self._value_fields}

    @fields.setter
    def fields(self, values: Mapping[str, Any]) -> None:
        """Bulk-assign values; unknown names become plain values.

        Typed fields are marked valid after assignment: bulk values are
        trusted, for example when they come back from the server.
        """
        for name, value in values.items():
            self._set_member(name, value)

    @property
    def existing_fields(self) -> Dict[str, Any]:
        return self.fields

    @existing_fields.setter
    def existing_fields(self, values: Mapping[str, Any]) -> None:
        """Like ``fields`` but names not on the form are ignored."""
        for name, value in values.items():
            if name in self:
                self._set_member(name, value)

    def _set_member(self, name: str, value: Any) -> None:
        field = self._form_fields.get(name)
        if field is None:
            self._value_fields[name] = value
            return
        field.value = value
        field.is_valid = True

    @property
    def errors(self) -> Dict[str, Any]:
        """External errors that matched no typed field."""
        return self._errors

    @errors.setter
    def errors(self, errors: Mapping[str, MessageInput]) -> None:
        """Distribute external errors to fields.

        A dotted key such as ``"form.email"`` is matched by its second
        segment. Only fields with an error slot take a message: a key naming
        a ``ListField`` is kept in ``errors`` like an unmatched key, since its
        errors belong to the sub-forms. Such keys are kept as given.
        """
        for key, message in errors.items():
            parts = key.split(".")
            name = parts[1] if len(parts) > 1 else key

            field = self._form_fields.get(name)
            if isinstance(field, FormField):
                field.error = message
            else:
                logger.debug("No field with an error slot for key %r", key)
                self._errors[key] = message

    def check_valid(self) -> bool:
        """Re-validate every typed field and return whether all of them pass.

        Every field is validated even after an invalid one is found, so each
        field's own ``is_valid`` is up to date. A required field still at
        ``None`` makes the form invalid and is set to ``False``.
        """
        is_valid = True

        for field in self._form_fields.values():
            field.validate()
            if field.is_valid is False:
                is_valid = False
            elif field.is_valid is None and field.is_required:
                is_valid = False
                field.is_valid = False

        return is_valid


__all__ = [
    "Form",
    "TypedField",
]
