"""Integration tests for the local development API."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from tiered_discounts.app.main import app
from tiered_discounts.settings import CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def make_payload(classes: list[str], delivery_group_ids: list[str] | None = None, metafield_value: str | None = None) -> dict:
    return {
        "cart": {
            "lines": [{"id": "l1", "quantity": 1}, {"id": "l2", "quantity": 3}],
            "cost": {"subtotalAmount": {"amount": "250.0"}},
            "deliveryGroups": [{"id": group_id} for group_id in delivery_group_ids or []],
        },
        "discount": {
            "discountClasses": classes,
            "metafield": {"value": metafield_value} if metafield_value is not None else None,
        },
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_targets(client):
    response = client.get("/targets")
    assert response.status_code == 200
    assert set(response.json()["targets"]) == {CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET}


def test_run_cart_lines_target(client):
    response = client.post(f"/targets/{CART_LINES_TARGET}/run", json=make_payload(["PRODUCT", "ORDER"]))
    assert response.status_code == 200, response.text
    ops = response.json()["operations"]
    assert [next(iter(op)) for op in ops] == ["productDiscountsAdd", "orderDiscountsAdd"]


def test_run_delivery_target(client):
    response = client.post(
        f"/targets/{DELIVERY_OPTIONS_TARGET}/run",
        json=make_payload(["SHIPPING"], delivery_group_ids=["dg1"]),
        headers={"X-Correlation-Id": "corr-1"},
    )
    assert response.status_code == 200, response.text
    candidate = response.json()["operations"][0]["deliveryDiscountsAdd"]["candidates"][0]
    assert candidate["targets"] == [{"deliveryGroup": {"id": "dg1"}}]


def test_run_delivery_target_without_groups_returns_conflict(client):
    response = client.post(f"/targets/{DELIVERY_OPTIONS_TARGET}/run", json=make_payload(["SHIPPING"]))
    assert response.status_code == 409
    assert response.json()["detail"] == "No delivery groups found"


def test_run_unknown_target_returns_not_found(client):
    response = client.post("/targets/unknown.target/run", json=make_payload([]))
    assert response.status_code == 404


def test_run_invalid_document_returns_unprocessable(client):
    response = client.post(f"/targets/{CART_LINES_TARGET}/run", json={"cart": {"lines": []}})
    assert response.status_code == 422
    assert response.json()["detail"]


def test_resolve_config_defaults_when_value_missing(client):
    response = client.post("/config/resolve", json={"value": None})
    assert response.status_code == 200
    body = response.json()
    assert body["used_defaults"] is True
    assert body["reason"] is None
    assert body["config"]["quantity_threshold"] == 2


def test_resolve_config_reports_rejection_reason(client):
    response = client.post("/config/resolve", json={"value": json.dumps({"quantity_threshold": 3})})
    assert response.status_code == 200
    body = response.json()
    assert body["used_defaults"] is True
    assert "required" in body["reason"]


def test_resolve_config_returns_decoded_values(client):
    value = json.dumps(
        {
            "quantity_threshold": 4,
            "quantity_discount_percentage": 7.5,
            "order_threshold_1": 120,
            "order_discount_percentage_1": 12,
            "free_shipping_threshold": 90,
        }
    )
    response = client.post("/config/resolve", json={"value": value})
    body = response.json()
    assert body["used_defaults"] is False
    assert body["config"]["quantity_threshold"] == 4
    assert float(body["config"]["quantity_discount_percentage"]) == 7.5
