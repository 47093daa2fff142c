"""Integration tests for complete form workflows.

Tests cover:
- Filling a registration form field by field, as a user types
- Loading values returned by a server and merging its errors
- Nested forms in a ListField
- Reconfiguring fields and settings between forms
"""

import pytest

from formfields import (
    DateField,
    DecimalField,
    FieldNotFoundError,
    Form,
    ListField,
    SelectField,
    SelectObjectField,
    TimeField,
    email_field,
    name_field,
    phone_field,
    set_formats,
)


def registration_form():
    return Form({
        "first_name": name_field(),
        "email": email_field(),
        "phone": phone_field(is_required=False),
        "birthday": DateField(),
        "city": SelectField(),
        "referrer": "newsletter",
    })


class TestTypingFlow:
    """Test a user filling a form character by character."""

    def test_happy_path(self):
        """Should end valid with submission-ready values."""
        form = registration_form()
        assert form.check_valid() is False

        form["first_name"].value = "Anna"
        form["email"].value = "anna@example.com"

        birthday = form["birthday"]
        for typed in ("1", "15", "150", "1503", "15031", "150319", "1503199", "15031990"):
            birthday.value = typed
        assert birthday.value == "15.03.1990"

        phone = form["phone"]
        phone.value = "7"
        phone.value = "+79"
        phone.value = "+79991234567"

        form["city"].value = 12

        assert form.check_valid() is True
        assert form.value_fields == {
            "first_name": "Anna",
            "email": "anna@example.com",
            "phone": "+79991234567",
            "birthday": "1990-03-15",
            "city": 12,
            "referrer": "newsletter",
        }
        assert form.value_list == ["Anna", "anna@example.com", "+79991234567", "1990-03-15", 12]

    def test_backspace_through_mask(self):
        """Should let the user delete a masked date back to nothing."""
        birthday = DateField()
        birthday.value = "15.03.1990"
        for typed in ("15.03.199", "15.03.", "15.0", "1", ""):
            birthday.value = typed
            assert birthday.value == typed
        assert birthday.is_valid is False


class TestServerRoundTrip:
    """Test loading server data and merging server errors."""

    def test_load_and_merge_errors(self):
        """Should trust loaded values until validated and show server errors."""
        form = registration_form()
        form.existing_fields = {
            "first_name": "Anna",
            "email": "anna@example.com",
            "birthday": "1990-03-15",
            "city": 3,
            "server_only": "ignored",
        }
        assert "server_only" not in form
        assert form["birthday"].value == "15.03.1990"

        form.errors = {
            "user.email": "Email already registered",
            "captcha": "Captcha expired",
        }
        assert form["email"].error == "Email already registered"
        assert form.errors == {"captcha": "Captcha expired"}
        assert form["email"].css_valid == {"b-danger": False}

        form["email"].value = "anna@"
        assert form["email"].error == "Example: example@domain.net | Email already registered"
        assert form["email"].css_valid == {"b-danger": True}


class TestNestedForms:
    """Test forms containing lists of forms."""

    def make_order(self):
        return Form({
            "customer": SelectObjectField(returned_key="id"),
            "items": ListField(is_required=True),
            "delivery_time": TimeField(is_required=False),
        })

    def make_item(self, qty, price):
        return Form({"qty": DecimalField(qty, max_digits=5, decimal_places=0), "price": DecimalField(price)})

    def test_order(self):
        """Should validate and export nested item forms."""
        order = self.make_order()
        assert order.check_valid() is False

        order["customer"].value = {"id": 17, "name": "ACME"}
        order["items"].push(self.make_item("2", "10.50"))
        order["items"].push(self.make_item("1", "3"))
        order["delivery_time"].value = "1830"

        assert order.check_valid() is True
        assert order.value_fields == {
            "customer": 17,
            "items": [{"qty": "2", "price": "10.50"}, {"qty": "1", "price": "3"}],
            "delivery_time": "18:30",
        }

        order["items"][1]["price"].value = "3.999"
        assert order.check_valid() is False
        order["items"].delete(1)
        assert order.check_valid() is True

    def test_customer_without_returned_key(self):
        """Should raise a configuration error for a customer without an id."""
        order = self.make_order()
        with pytest.raises(FieldNotFoundError):
            order["customer"].value = {"name": "ACME"}


class TestReconfiguration:
    """Test configure() and settings across forms."""

    def test_configure_required_flag(self):
        """Should apply a configured flag on the next validation."""
        form = Form({"email": email_field().configure(is_required=False)})
        assert form.check_valid() is True

    def test_new_date_format_for_new_forms(self):
        """Should use new formats only for fields built afterwards."""
        old_form = Form({"day": DateField()})
        set_formats({"format_date": "yyyy-MM-dd", "mask_date": "____-__-__"})
        new_form = Form({"day": DateField()})

        old_form["day"].value = "26.12.2000"
        new_form["day"].value = "20001226"

        assert old_form.value_fields == {"day": "2000-12-26"}
        assert new_form["day"].value == "2000-12-26"
        assert new_form.value_fields == {"day": "2000-12-26"}
