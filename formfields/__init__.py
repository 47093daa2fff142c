"""formfields: client-side form field validation.

formfields models the fields of a data entry form and validates them as the
user types:
- Typed fields with value normalization (input masks, date parsing)
- Tri-state validity and two-part error messages (own validation + external)
- Forms that bulk-update, validate and export their fields as a unit

Basic usage:
    >>> from formfields import Form, DateField, phone_field
    >>> form = Form({"phone": phone_field(), "birthday": DateField(), "ref": "ad"})
    >>> form.fields = {"phone": "+79999999999", "birthday": "2000-12-26"}
    >>> form.check_valid()
    True
    >>> form.value_fields
    {'phone': '+79999999999', 'birthday': '2000-12-26', 'ref': 'ad'}
"""

__version__ = "0.1.0"

# Version info
VERSION = (0, 1, 0)

from formfields.base import FormField
from formfields.datetimes import DateField, DateTimeField
from formfields.errors import ConfigurationError, ErrorMessage, FieldNotFoundError
from formfields.form import Form
from formfields.lists import ListField
from formfields.numeric import DecimalField, NumberField
from formfields.presets import (
    PRESETS,
    color_hex_field,
    email_field,
    hash_md5_field,
    ip_field,
    login_field,
    mac_field,
    name_field,
    password_field,
    password_small_field,
    password_tiny_field,
    phone_field,
    text_field,
)
from formfields.selects import SelectField, SelectObjectField
from formfields.settings import FormSettings, get_settings, reset_settings, set_error_class, set_formats
from formfields.strings import StringField, StringPreset, TimeField

__all__ = [
    "__version__",
    "VERSION",
    "FormField",
    "StringField",
    "StringPreset",
    "TimeField",
    "DateTimeField",
    "DateField",
    "NumberField",
    "DecimalField",
    "SelectField",
    "SelectObjectField",
    "ListField",
    "Form",
    "PRESETS",
    "email_field",
    "phone_field",
    "text_field",
    "name_field",
    "login_field",
    "password_field",
    "password_small_field",
    "password_tiny_field",
    "ip_field",
    "color_hex_field",
    "hash_md5_field",
    "mac_field",
    "FormSettings",
    "get_settings",
    "set_formats",
    "set_error_class",
    "reset_settings",
    "ConfigurationError",
    "FieldNotFoundError",
    "ErrorMessage",
]
