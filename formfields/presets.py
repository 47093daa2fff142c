"""Named StringField configurations.

Every common kind of text input is a ``StringPreset``: a fixed set of length
bounds, pattern, example text and mask. Build a field from a preset with
``StringField.from_preset()`` or with the matching factory function:

    >>> field = phone_field()
    >>> field.value = "+79999999999"
    >>> field.is_valid, field.value_clear
    (True, '+79999999999')
"""

from typing import Any, Dict, Optional

from formfields.settings import FormSettings
from formfields.strings import StringField, StringPreset

EMAIL = StringPreset(
    name="email",
    min_length=5,
    max_length=100,
    regex=r"^[^@]+@[^@.]+[.]{1}[^@.]+$",
    example="example@domain.net",
)

PHONE = StringPreset(
    name="phone",
    min_length=10,
    max_length=16,
    regex=r"^[+][\d]\d+$",
    example="+79999999999",
    mask="+_______________",
    return_with_mask=True,
)

TEXT = StringPreset(
    name="text",
    max_length=50,
    regex=r"^[\w а-яА-ЯёЁ \W]+$",
    example="letters, digits and special characters",
)

NAME = StringPreset(
    name="name",
    max_length=50,
    regex=r"^[a-zA-Zа-яА-ЯёЁ]+$",
    example="letters only",
)

LOGIN = StringPreset(
    name="login",
    min_length=1,
    max_length=50,
    regex=r"^[^+]\w{0,99}$",
    example="letters, digits and _",
)

PASSWORD = StringPreset(name="password", min_length=8, max_length=50)
PASSWORD_SMALL = StringPreset(name="password_small", min_length=4, max_length=50)
PASSWORD_TINY = StringPreset(name="password_tiny", min_length=1, max_length=50)

IP = StringPreset(
    name="ip",
    min_length=7,
    max_length=15,
    regex=r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$",
    example="4.5.6.7",
)

COLOR_HEX = StringPreset(
    name="color_hex",
    min_length=7,
    max_length=7,
    regex=r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$",
    example="#FACE8D",
)

HASH_MD5 = StringPreset(
    name="hash_md5",
    min_length=32,
    max_length=32,
    regex=r"^[A-Fa-f0-9]+$",
    example="HashMD5",
)

MAC = StringPreset(
    name="mac",
    min_length=17,
    max_length=17,
    regex=r"^([A-Fa-f0-9]{2}:){5}[A-Fa-f0-9]{2}$",
    example="00:00:00:00:00:00",
    mask="__:__:__:__:__:__",
    return_with_mask=True,
)

PRESETS: Dict[str, StringPreset] = {
    p.name: p
    for p in (
        EMAIL, PHONE, TEXT, NAME, LOGIN, PASSWORD, PASSWORD_SMALL,
        PASSWORD_TINY, IP, COLOR_HEX, HASH_MD5, MAC,
    )
}


def email_field(default_value: Any = "", is_required: bool = True,
                settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(EMAIL, default_value, is_required, settings)


def phone_field(default_value: Any = "", is_required: bool = True,
                settings: Optional[FormSettings] = None) -> StringField:
    """Phone number starting with ``+``; submitted with the ``+``."""
    return StringField.from_preset(PHONE, default_value, is_required, settings)


def text_field(default_value: Any = "", is_required: bool = True,
               min_length: Optional[int] = None, max_length: Optional[int] = 50,
               settings: Optional[FormSettings] = None) -> StringField:
    preset = TEXT.with_bounds(min_length, max_length)
    return StringField.from_preset(preset, default_value, is_required, settings)


def name_field(default_value: Any = "", is_required: bool = True,
               min_length: Optional[int] = None, max_length: Optional[int] = 50,
               settings: Optional[FormSettings] = None) -> StringField:
    """Latin or Cyrillic letters only."""
    preset = NAME.with_bounds(min_length, max_length)
    return StringField.from_preset(preset, default_value, is_required, settings)


def login_field(default_value: Any = "", is_required: bool = True,
                settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(LOGIN, default_value, is_required, settings)


def password_field(default_value: Any = "", is_required: bool = True,
                   settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(PASSWORD, default_value, is_required, settings)


def password_small_field(default_value: Any = "", is_required: bool = True,
                         settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(PASSWORD_SMALL, default_value, is_required, settings)


def password_tiny_field(default_value: Any = "", is_required: bool = True,
                        settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(PASSWORD_TINY, default_value, is_required, settings)


def ip_field(default_value: Any = "", is_required: bool = True,
             settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(IP, default_value, is_required, settings)


def color_hex_field(default_value: Any = "", is_required: bool = True,
                    settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(COLOR_HEX, default_value, is_required, settings)


def hash_md5_field(default_value: Any = "", is_required: bool = True,
                   settings: Optional[FormSettings] = None) -> StringField:
    return StringField.from_preset(HASH_MD5, default_value, is_required, settings)


def mac_field(default_value: Any = "", is_required: bool = True,
              settings: Optional[FormSettings] = None) -> StringField:
    """Colon-separated MAC address; the colons are inserted while typing."""
    return StringField.from_preset(MAC, default_value, is_required, settings)


__all__ = [
    "PRESETS",
    "EMAIL",
    "PHONE",
    "TEXT",
    "NAME",
    "LOGIN",
    "PASSWORD",
    "PASSWORD_SMALL",
    "PASSWORD_TINY",
    "IP",
    "COLOR_HEX",
    "HASH_MD5",
    "MAC",
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
]
