"""Unit tests for DateTimeField and DateField.

Tests cover:
- Assignment from display strings, ISO strings and date objects
- Keeping and masking partial input
- Validation and ISO cleared values
- Date part accessors
- Configuring display patterns
"""

from datetime import date, datetime

import pytest

from formfields.datetimes import DateField, DateTimeField
from formfields.errors import ConfigurationError


class TestConfigurePatterns:
    """Test configuring display patterns on a field."""

    def test_unsupported_token_rejected(self):
        """Should reject an unusable pattern and leave the field unchanged."""
        field = DateTimeField()
        with pytest.raises(ConfigurationError, match="EEE"):
            field.configure(dt_format="EEE dd.MM.yyyy HH:mm")
        assert field.dt_format == "dd.MM.yyyy HH:mm"
        field.value = "26.12.2000 10:30"
        assert field.is_valid is True

    def test_supported_pattern_applied(self):
        """Should accept and apply a usable pattern."""
        field = DateField().configure(d_format="yyyy/MM/dd", mask="____/__/__")
        field.value = "20001226"
        assert field.value == "2000/12/26"
        assert field.value_clear == "2000-12-26"


class TestDateField:
    """Test calendar dates."""

    def test_uses_date_format_and_mask(self):
        """Should take its pattern and mask from the settings."""
        field = DateField()
        assert field.d_format == "dd.MM.yyyy"
        assert field.mask == "__.__.____"
        assert field.example == "dd.MM.yyyy"

    def test_display_to_iso(self):
        """Should submit a display date as yyyy-MM-dd."""
        field = DateField()
        field.value = "26.12.2000"
        assert field.is_valid is True
        assert field.value_clear == "2000-12-26"

    def test_iso_to_display(self):
        """Should store an ISO date in the display pattern."""
        field = DateField()
        field.value = "2000-12-26"
        assert field.value == "26.12.2000"

    def test_date_object(self):
        """Should format a date object with the display pattern."""
        field = DateField()
        field.value = date(2000, 1, 2)
        assert field.value == "02.01.2000"
        assert field.is_valid is True

    def test_partial_input_is_masked_and_kept(self):
        """Should keep partially typed dates and mark them invalid."""
        field = DateField()
        field.value = "2612"
        assert field.value == "26.12."
        assert field.is_valid is False
        assert field.value_clear is None

    def test_impossible_date_is_invalid(self):
        """Should reject a date that does not exist."""
        field = DateField()
        field.value = "31.02.2000"
        assert field.value == "31.02.2000"
        assert field.is_valid is False

    def test_optional_empty(self):
        """Should accept an empty optional date."""
        field = DateField(is_required=False)
        field.value = ""
        assert field.is_valid is True
        assert field.value_clear is None

    def test_required_empty(self):
        """Should reject an empty required date."""
        field = DateField()
        assert field.validate() is False

    def test_parts(self):
        """Should expose day, month and year."""
        field = DateField()
        field.value = "26.12.2000"
        assert (field.day, field.month, field.year) == (26, 12, 2000)
        assert field.date == "26.12.2000"

    def test_parts_of_invalid_value(self):
        """Should return empty strings when the value does not parse."""
        field = DateField()
        field.value = "26.1"
        assert (field.day, field.month, field.year, field.date, field.time) == ("", "", "", "", "")


class TestDateTimeField:
    """Test date and time values."""

    def test_uses_datetime_format_and_mask(self):
        """Should take its pattern and mask from the settings."""
        field = DateTimeField()
        assert field.dt_format == "dd.MM.yyyy HH:mm"
        assert field.mask == "__.__.____ __:__"

    def test_display_value(self):
        """Should accept a value in the display pattern."""
        field = DateTimeField()
        field.value = "26.12.2000 10:30"
        assert field.is_valid is True
        assert field.value == "26.12.2000 10:30"

    def test_iso_value(self):
        """Should store a naive ISO value in the display pattern."""
        field = DateTimeField()
        field.value = "2000-12-26T10:30"
        assert field.value == "26.12.2000 10:30"

    def test_datetime_object(self):
        """Should format a datetime object."""
        field = DateTimeField()
        field.value = datetime(2000, 12, 26, 10, 30)
        assert field.value == "26.12.2000 10:30"

    def test_value_clear_is_iso(self):
        """Should submit ISO-8601 with milliseconds and offset."""
        field = DateTimeField()
        field.value = "26.12.2000 10:30"
        assert field.value_clear.startswith("2000-12-26T10:30:00.000")

    def test_partial_input(self):
        """Should keep a partially typed value."""
        field = DateTimeField()
        field.value = "261220001"
        assert field.value == "26.12.2000 1"
        assert field.is_valid is False
        assert field.value_clear is None

    def test_typing_one_key_at_a_time(self):
        """Should keep a one-digit minute as typed so the next key completes it."""
        field = DateTimeField()
        for key in "261220001035":
            field.value = field.value + key
        assert field.value == "26.12.2000 10:35"
        assert field.is_valid is True

    def test_one_digit_minute_is_kept(self):
        """Should not pad a partially typed minute."""
        field = DateTimeField()
        field.value = "26.12.2000 10:3"
        assert field.value == "26.12.2000 10:3"
        assert field.is_valid is False

    def test_parts(self):
        """Should expose the date parts and the time."""
        field = DateTimeField()
        field.value = "26.12.2000 10:30"
        assert (field.day, field.month, field.year) == (26, 12, 2000)
        assert field.date == "26.12.2000"
        assert field.time == "10:30"

    def test_date_part_of_partial_value(self):
        """Should read the date part even before the time is typed."""
        field = DateTimeField()
        field.value = "26.12.2000 1"
        assert field.day == 26
        assert field.time == ""
