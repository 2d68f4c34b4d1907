"""Tests for the order intake flow."""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from shop.exceptions import IntakeError
from shop.intake import SUCCESS_DISPLAY_SECONDS, IntakeState, OrderIntake
from shop.models import Order, OrderStatus


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def _fill_valid(intake, data):
    intake.choose_country(data["country"])
    for name in ("customer_name", "address", "phone", "whatsapp"):
        intake.set_field(name, data[name])


class TestMirroring:
    def test_phone_edits_follow_while_enabled(self):
        intake = OrderIntake()
        intake.set_field("phone", "50")
        intake.set_same_as_phone(True)
        assert intake.fields.whatsapp == "50"
        intake.set_field("phone", "501234567")
        assert intake.fields.whatsapp == "501234567"

    def test_disabling_freezes_last_value(self):
        intake = OrderIntake()
        intake.set_same_as_phone(True)
        intake.set_field("phone", "501234567")
        intake.set_same_as_phone(False)
        intake.set_field("phone", "559999999")
        assert intake.fields.whatsapp == "501234567"
        intake.set_field("whatsapp", "551234567")
        assert intake.fields.whatsapp == "551234567"

    def test_unknown_field(self):
        with pytest.raises(IntakeError):
            OrderIntake().set_field("email", "x@example.com")


class TestOpen:
    def test_open_resets_form(self, saudi):
        intake = OrderIntake()
        intake.choose_country(saudi)
        intake.set_field("customer_name", "Ali Ben Omar")
        intake.set_same_as_phone(True)
        intake.errors = {"address": "x"}
        intake.open(object())
        assert intake.state is IntakeState.FILLING
        assert intake.country is None
        assert intake.fields.customer_name == ""
        assert not intake.same_as_phone
        assert intake.errors == {}

    def test_submit_without_product(self):
        with pytest.raises(IntakeError):
            OrderIntake().submit()


@pytest.mark.django_db
class TestSubmit:
    def test_valid_form_creates_one_pending_order(self, motion_sensor, valid_order_data, english):
        intake = OrderIntake(english)
        intake.open(motion_sensor)
        _fill_valid(intake, valid_order_data)

        assert intake.submit() is IntakeState.SUCCESS
        assert Order.objects.count() == 1
        order = Order.objects.get()
        assert order == intake.order
        assert order.status == OrderStatus.PENDING
        assert order.phone == "+966501234567"
        assert order.whatsapp == "+966551234567"
        assert order.product_name == "Motion sensor"
        assert order.product_id == motion_sensor.pk
        assert order.country == "SA"
        assert order.customer_name == "Ali Ben Omar"

    def test_product_name_snapshot_uses_current_language(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        _fill_valid(intake, valid_order_data)
        intake.submit()
        assert intake.order.product_name == "حساس حركة"

    def test_same_as_phone_at_submission(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        _fill_valid(intake, dict(valid_order_data, whatsapp=""))
        intake.set_same_as_phone(True)
        intake.set_field("phone", "50 123 4567")
        assert intake.submit() is IntakeState.SUCCESS
        assert intake.order.whatsapp == intake.order.phone == "+966501234567"

    def test_invalid_form_stays_filling(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        _fill_valid(intake, dict(valid_order_data, customer_name="Ali", address="Riyadh"))
        assert intake.submit() is IntakeState.FILLING
        assert set(intake.errors) == {"customer_name", "address"}
        assert not Order.objects.exists()

    def test_missing_country_is_reported(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        _fill_valid(intake, dict(valid_order_data, country=""))
        assert intake.submit() is IntakeState.FILLING
        assert "country" in intake.errors

    def test_write_failure_is_an_explicit_state(self, motion_sensor, valid_order_data, english):
        intake = OrderIntake(english)
        intake.open(motion_sensor)
        _fill_valid(intake, valid_order_data)

        with patch.object(Order.objects, "create", side_effect=DatabaseError("write refused")):
            assert intake.submit() is IntakeState.FAILED
        assert intake.failure == "Your order could not be sent, please try again"
        assert intake.order is None
        assert not Order.objects.exists()

        # The user may simply submit again
        assert intake.submit() is IntakeState.SUCCESS
        assert Order.objects.count() == 1

    def test_success_resets_after_display_window(self, motion_sensor, valid_order_data):
        clock = FakeClock()
        intake = OrderIntake(clock=clock)
        intake.open(motion_sensor)
        _fill_valid(intake, valid_order_data)
        intake.submit()

        clock.now += SUCCESS_DISPLAY_SECONDS - 0.5
        assert intake.poll() is IntakeState.SUCCESS
        clock.now += 0.5
        assert intake.poll() is IntakeState.SELECTING
        assert intake.product is None
        assert intake.fields.phone == ""
        assert intake.country is None

    def test_cannot_submit_twice(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        _fill_valid(intake, valid_order_data)
        intake.submit()
        with pytest.raises(IntakeError):
            intake.submit()
        assert Order.objects.count() == 1

    def test_fill_from_posted_form(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        intake.fill(dict(valid_order_data, whatsapp="", same_as_phone="on"))
        assert intake.same_as_phone
        assert intake.country.code == "SA"
        assert intake.submit() is IntakeState.SUCCESS
        assert intake.order.whatsapp == "+966501234567"

    def test_fill_coerces_non_string_values(self, motion_sensor, valid_order_data):
        intake = OrderIntake()
        intake.open(motion_sensor)
        intake.fill(dict(valid_order_data, phone=501234567, whatsapp=None))
        assert intake.fields.phone == "501234567"
        assert intake.fields.whatsapp == ""
        intake.choose_country(966)
        assert intake.country is None
