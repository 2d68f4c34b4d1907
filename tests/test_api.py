"""Tests for the JSON endpoints."""

import json

import pytest
from django.urls import reverse

from shop.models import Order

pytestmark = pytest.mark.django_db


def _post(client, payload):
    return client.post(reverse("shop:api_order_create"), json.dumps(payload), content_type="application/json")


class TestCatalogApi:
    def test_lists_active_catalog(self, client, sensors, switches, motion_sensor, smart_switch, retired_sensor):
        body = client.get(reverse("shop:api_catalog")).json()
        assert [c["name"] for c in body["categories"]] == ["مفاتيح", "حساسات"]
        assert [c["product_count"] for c in body["categories"]] == [1, 1]
        assert [p["name_en"] for p in body["products"]] == ["Smart switch", "Motion sensor"]
        assert body["products"][1]["price"] == 120.0
        assert body["products"][0]["price"] is None

    def test_filter(self, client, sensors, motion_sensor, smart_switch):
        body = client.get(reverse("shop:api_catalog"), {"category": str(sensors.pk)}).json()
        assert [p["id"] for p in body["products"]] == [str(motion_sensor.pk)]


class TestOrderApi:
    def test_created(self, client, motion_sensor, valid_order_data):
        response = _post(client, dict(valid_order_data, product_id=str(motion_sensor.pk), language="en"))
        assert response.status_code == 201
        body = response.json()
        order = Order.objects.get()
        assert body["order_id"] == str(order.pk)
        assert body["state"] == "success"
        assert order.product_name == "Motion sensor"

    def test_validation_errors(self, client, motion_sensor):
        response = _post(client, {"product_id": str(motion_sensor.pk), "language": "en"})
        assert response.status_code == 400
        body = response.json()
        assert body["state"] == "filling"
        assert set(body["errors"]) == {"country", "customer_name", "address", "phone", "whatsapp"}

    def test_numeric_phones_are_accepted(self, client, motion_sensor, valid_order_data):
        payload = dict(valid_order_data, product_id=str(motion_sensor.pk), phone=501234567, whatsapp=551234567)
        response = _post(client, payload)
        assert response.status_code == 201
        order = Order.objects.get()
        assert order.phone.endswith("501234567")
        assert order.whatsapp.endswith("551234567")

    def test_non_string_values_are_field_errors(self, client, motion_sensor, valid_order_data):
        payload = dict(valid_order_data, product_id=str(motion_sensor.pk), country=966, customer_name=["Ali"])
        response = _post(client, payload)
        assert response.status_code == 400
        assert set(response.json()["errors"]) >= {"country", "customer_name"}
        assert not Order.objects.exists()

    def test_unknown_product(self, client, valid_order_data):
        response = _post(client, dict(valid_order_data, product_id="not-a-uuid"))
        assert response.status_code == 404

    def test_invalid_json(self, client):
        response = client.post(reverse("shop:api_order_create"), "{oops", content_type="application/json")
        assert response.status_code == 400


class TestCountriesApi:
    def test_search(self, client):
        body = client.get(reverse("shop:api_countries"), {"q": "+966"}).json()
        assert "SA" in [c["code"] for c in body["countries"]]

    def test_empty_query(self, client):
        assert client.get(reverse("shop:api_countries")).json() == {"countries": []}
