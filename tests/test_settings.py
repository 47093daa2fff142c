"""Unit tests for library-wide settings.

Tests cover:
- Defaults
- Merging and validating formats
- Error class changes seen by existing fields
- Injected settings instances
"""

import pytest

from formfields.datetimes import DateField
from formfields.errors import ConfigurationError
from formfields.presets import email_field
from formfields.settings import (
    DEFAULT_FORMATS,
    FormSettings,
    get_settings,
    reset_settings,
    set_error_class,
    set_formats,
)


class TestDefaults:
    """Test default settings."""

    def test_default_formats(self):
        """Should use the documented default patterns and masks."""
        assert get_settings().formats == {
            "format_datetime": "dd.MM.yyyy HH:mm",
            "format_date": "dd.MM.yyyy",
            "mask_datetime": "__.__.____ __:__",
            "mask_date": "__.__.____",
        }

    def test_default_error_class(self):
        """Should default to b-danger."""
        assert get_settings().error_class == "b-danger"


class TestSetFormats:
    """Test changing formats."""

    def test_partial_update_is_merged(self):
        """Should keep formats that were not given."""
        set_formats({"format_date": "yyyy/MM/dd"})
        formats = get_settings().formats
        assert formats["format_date"] == "yyyy/MM/dd"
        assert formats["format_datetime"] == DEFAULT_FORMATS["format_datetime"]

    def test_unknown_name_raises(self):
        """Should reject unknown format names."""
        with pytest.raises(ConfigurationError, match="format_time"):
            set_formats({"format_time": "HH:mm"})

    def test_non_string_raises(self):
        """Should reject values that are not strings."""
        with pytest.raises(ConfigurationError):
            set_formats({"format_date": 5})

    def test_empty_string_raises(self):
        """Should reject empty patterns."""
        with pytest.raises(ConfigurationError):
            set_formats({"mask_date": ""})

    def test_unsupported_date_token_raises_on_set(self):
        """Should reject a pattern with an unknown token and keep the formats."""
        with pytest.raises(ConfigurationError, match="EEE"):
            set_formats({"format_date": "EEE dd.MM.yyyy"})
        assert get_settings().formats == DEFAULT_FORMATS

    def test_month_name_pattern(self):
        """Should accept month names and let fields use them without raising."""
        set_formats({"format_date": "dd MMM yyyy"})
        field = DateField()
        field.value = "26"
        assert field.is_valid is False
        field.configure(mask="")
        field.value = "2000-12-26"
        assert field.value == "26 Dec 2000"
        assert field.value_clear == "2000-12-26"

    def test_reset(self):
        """Should restore the defaults."""
        set_formats({"format_date": "yyyy/MM/dd"})
        set_error_class("is-invalid")
        reset_settings()
        assert get_settings().formats == DEFAULT_FORMATS
        assert get_settings().error_class == "b-danger"


class TestSettingsReach:
    """Test which fields see a settings change."""

    def test_formats_apply_to_fields_built_afterwards(self):
        """Should not change the patterns of an existing date field."""
        before = DateField()
        set_formats({"format_date": "yyyy/MM/dd", "mask_date": "____/__/__"})
        after = DateField()

        assert before.d_format == "dd.MM.yyyy"
        assert after.d_format == "yyyy/MM/dd"
        assert after.mask == "____/__/__"

    def test_error_class_applies_immediately(self):
        """Should be read by css_valid on every access."""
        field = email_field()
        field.value = "bad"
        set_error_class("is-invalid")
        assert field.css_valid == {"is-invalid": True}

    def test_injected_settings(self):
        """Should use the given settings instead of the global ones."""
        custom = FormSettings()
        custom.set_formats({"format_date": "MM/dd/yyyy", "mask_date": "__/__/____"})
        field = DateField(settings=custom)
        field.value = "12/26/2000"

        assert field.is_valid is True
        assert field.value_clear == "2000-12-26"
        assert get_settings().formats["format_date"] == "dd.MM.yyyy"
