"""Tests for the order form rules."""

from unittest.mock import patch

import phonenumbers
import pytest

from shop.intake import OrderFields
from shop.validators import (
    digits_only,
    full_phone_number,
    validate_address,
    validate_name,
    validate_order,
    validate_phone,
)


class TestValidateName:
    @pytest.mark.parametrize("name", ["Ali Ben Omar", "  Ali   Ben  Omar ", "محمد بن سلمان", "Ab Cd Ef Gh"])
    def test_accepts_three_or_more_parts(self, name):
        assert validate_name(name)

    @pytest.mark.parametrize("name", ["Ali", "Ali Omar", "Ali B Omar", "Ali Ben O", "", "   "])
    def test_rejects_short_names_or_parts(self, name):
        assert not validate_name(name)


class TestValidateAddress:
    def test_detailed_address(self):
        assert validate_address("Riyadh, King Fahd Rd, Bldg 4")

    def test_short_address(self):
        assert not validate_address("Riyadh")

    def test_length_counts_after_strip(self):
        assert not validate_address("   Riyadh 1   ")
        assert validate_address("  Riyadh 123  ")


class TestValidatePhone:
    def test_saudi_mobile(self, saudi):
        assert full_phone_number(saudi, "50 123 4567") == "+966501234567"
        assert validate_phone("501234567", saudi)

    def test_invalid_number_for_country(self, saudi):
        assert not validate_phone("5012345", saudi)

    def test_requires_country(self):
        assert not validate_phone("501234567", None)

    def test_requires_six_characters(self, saudi):
        assert not validate_phone("50123", saudi)
        assert not validate_phone("", saudi)

    def test_falls_back_to_digit_count_when_library_errors(self, saudi):
        error = phonenumbers.NumberParseException(phonenumbers.NumberParseException.NOT_A_NUMBER, "boom")
        with patch("shop.validators.phonenumbers.is_valid_number", side_effect=error):
            assert validate_phone("1234567", saudi)
            assert validate_phone("123-4567", saudi)
            assert not validate_phone("12-3456", saudi)

    def test_fallback_on_unexpected_error(self, saudi):
        with patch("shop.validators.phonenumbers.parse", side_effect=RuntimeError("metadata missing")):
            assert validate_phone("99999999", saudi)

    def test_digits_only(self):
        assert digits_only("+966 (50) 123-4567") == "966501234567"
        assert digits_only(None) == ""


class TestValidateOrder:
    def test_valid_form_has_no_errors(self, saudi):
        fields = OrderFields("Ali Ben Omar", "Riyadh, King Fahd Rd, Bldg 4", "501234567", "551234567")
        assert validate_order(fields, saudi) == {}

    def test_reports_every_invalid_field_at_once(self):
        errors = validate_order(OrderFields("Ali", "Riyadh", "1", "2"), None)
        assert set(errors) == {"country", "customer_name", "address", "phone", "whatsapp"}

    def test_messages_follow_locale(self, english):
        errors = validate_order(OrderFields(), None, locale=english)
        assert errors["country"] == "Please select a country"
        assert errors["customer_name"] == "Name must contain at least 3 parts"

    def test_default_locale_is_arabic(self):
        errors = validate_order(OrderFields(), None)
        assert errors["country"] == "يرجى اختيار الدولة"

    def test_same_as_phone_checks_phone_value(self, saudi):
        fields = OrderFields("Ali Ben Omar", "Riyadh, King Fahd Rd, Bldg 4", "501234567", "")
        assert "whatsapp" in validate_order(fields, saudi)
        assert validate_order(fields, saudi, same_as_phone=True) == {}
