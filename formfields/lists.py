"""ListField: an ordered list of sub-forms validated together.

Each element is anything with a ``check_valid()`` method and a
``value_fields`` property, usually a ``Form``.

Usage:
    >>> from formfields.form import Form
    >>> from formfields.presets import email_field
    >>> contacts = ListField(is_required=True)
    >>> contacts.is_valid is None
    True
    >>> _ = contacts.push(Form({"email": email_field("user@example.com")}))
    >>> contacts.is_valid
    True
    >>> contacts.value_clear
    [{'email': 'user@example.com'}]
"""

from typing import Any, Dict, Iterator, List, Optional

from typing_extensions import Protocol

from formfields.settings import FormSettings, get_settings
from formfields.types import Validity


class SubForm(Protocol):
    """What a ListField needs from each of its elements."""

    def check_valid(self) -> bool:
        ...

    @property
    def value_fields(self) -> Dict[str, Any]:
        ...


class ListField:
    """Ordered collection of sub-forms.

    ``is_valid`` is recomputed on every read. An empty list is ``None`` when
    required (nothing entered yet) and ``True`` otherwise; once a form has
    resolved it to ``False`` it stays ``False`` until elements are added.

    Attributes:
        is_required: Whether at least one element is expected
        settings: Settings used by ``css_valid``
    """

    def __init__(
        self,
        default_value: Optional[List[SubForm]] = None,
        is_required: bool = True,
        settings: Optional[FormSettings] = None,
    ) -> None:
        self._value: List[SubForm] = list(default_value) if default_value is not None else []
        self.is_required = is_required
        self.settings = settings if settings is not None else get_settings()
        if self._value:
            self._is_valid: Validity = True
        else:
            self._is_valid = None if is_required else True

    def __repr__(self) -> str:
        return f"ListField(length={len(self._value)}, is_required={self.is_required!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[SubForm]:
        return iter(self._value)

    def __getitem__(self, index: int) -> SubForm:
        return self._value[index]

    @property
    def length(self) -> int:
        return len(self._value)

    @property
    def is_valid(self) -> Validity:
        self.validate()
        return self._is_valid

    @is_valid.setter
    def is_valid(self, value: Validity) -> None:
        self._is_valid = value

    @property
    def css_valid(self) -> Dict[str, bool]:
        return {self.settings.error_class: self._is_valid is False}

    @property
    def value(self) -> List[SubForm]:
        return self._value

    @value.setter
    def value(self, value: Optional[List[SubForm]]) -> None:
        self._value = list(value) if value is not None else []
        self.validate()

    @property
    def form_value(self) -> List[SubForm]:
        return self._value

    @property
    def value_clear(self) -> List[Dict[str, Any]]:
        """Each element's ``value_fields``, in order."""
        return [form.value_fields for form in self._value]

    def push(self, form: SubForm) -> List[SubForm]:
        self._value.append(form)
        return self._value

    def delete(self, index: int) -> List[SubForm]:
        """Remove the element at ``index``."""
        del self._value[index]
        return self._value

    def validate(self) -> Validity:
        """Check every element, without stopping at the first invalid one."""
        if not self._value:
            if not self.is_required:
                self._is_valid = True
            elif self._is_valid is not False:
                self._is_valid = None
            return self._is_valid

        results = [form.check_valid() for form in self._value]
        self._is_valid = all(results)
        return self._is_valid


__all__ = [
    "ListField",
    "SubForm",
]
