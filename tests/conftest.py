"""Shared fixtures for the shop tests."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from shop.countries import get_country
from shop.locale import LocaleContext
from shop.models import Category, Product


@pytest.fixture
def saudi():
    return get_country("SA")


@pytest.fixture
def english():
    return LocaleContext("en")


@pytest.fixture
def sensors(db):
    return Category.objects.create(name_ar="حساسات", name_en="Sensors", order=1)


@pytest.fixture
def switches(db):
    return Category.objects.create(name_ar="مفاتيح", name_en="Switches", order=0)


@pytest.fixture
def hidden_category(db):
    return Category.objects.create(name_ar="مخفية", name_en="Hidden", order=2, is_active=False)


@pytest.fixture
def motion_sensor(sensors):
    return Product.objects.create(
        category=sensors,
        name_ar="حساس حركة",
        name_en="Motion sensor",
        price=Decimal("120.00"),
        show_price=True,
        created_at=timezone.now() - timedelta(days=2),
    )


@pytest.fixture
def smart_switch(switches):
    return Product.objects.create(
        category=switches,
        name_ar="مفتاح ذكي",
        name_en="Smart switch",
        created_at=timezone.now() - timedelta(days=1),
    )


@pytest.fixture
def retired_sensor(sensors):
    return Product.objects.create(category=sensors, name_ar="حساس قديم", name_en="Old sensor", is_active=False)


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin",
        email="admin@nirvanaiot.com",
        password="s3cret-pass",
        is_staff=True,
    )


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.fixture
def valid_order_data(saudi):
    return {
        "country": saudi.code,
        "customer_name": "Ali Ben Omar",
        "address": "Riyadh, King Fahd Rd, Bldg 4",
        "phone": "501234567",
        "whatsapp": "551234567",
    }
