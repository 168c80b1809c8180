import logging

import pytest

from tiered_discounts.application.errors import (
    InvalidInputError,
    NoDeliveryGroupsError,
    UnknownTargetError,
)
from tiered_discounts.application.registry import Registry
from tiered_discounts.application.run_context import RunContext
from tiered_discounts.application.runner import Runner
from tiered_discounts.settings import CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET


def make_payload(classes: list[str], subtotal: str = "250.0", delivery_group_ids: list[str] | None = None) -> dict:
    return {
        "cart": {
            "lines": [{"id": "l1", "quantity": 1}, {"id": "l2", "quantity": 3}],
            "cost": {"subtotalAmount": {"amount": subtotal}},
            "deliveryGroups": [{"id": group_id} for group_id in delivery_group_ids or []],
        },
        "discount": {"discountClasses": classes, "metafield": None},
    }


def test_registry_lists_both_targets():
    assert Registry().targets() == sorted([CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET])


def test_registry_rejects_unknown_target():
    with pytest.raises(UnknownTargetError):
        Registry().get("purchase.payment-customization.run")


def test_run_context_generates_correlation_id():
    ctx = RunContext.from_args(target=CART_LINES_TARGET)
    assert ctx.correlation_id.value.startswith("auto-")
    assert RunContext.from_args(target=CART_LINES_TARGET, correlation_id="c1").correlation_id.value == "c1"


def test_runner_evaluates_cart_lines_target(caplog):
    runner = Runner(registry=Registry())
    with caplog.at_level(logging.INFO):
        output = runner.run(RunContext.from_args(target=CART_LINES_TARGET), make_payload(["PRODUCT", "ORDER"]))
    ops = output["operations"]
    assert [next(iter(op)) for op in ops] == ["productDiscountsAdd", "orderDiscountsAdd"]
    assert ops[0]["productDiscountsAdd"]["candidates"][0]["targets"][0]["cartLine"]["id"] == "l2"
    assert "operation_count=2" in caplog.text


def test_runner_evaluates_delivery_target():
    runner = Runner(registry=Registry())
    output = runner.run(
        RunContext.from_args(target=DELIVERY_OPTIONS_TARGET),
        make_payload(["SHIPPING"], delivery_group_ids=["dg1"]),
    )
    candidate = output["operations"][0]["deliveryDiscountsAdd"]["candidates"][0]
    assert candidate["message"] == "FREE SHIPPING - Spend $200+"
    assert candidate["value"] == {"percentage": {"value": "100"}}


def test_runner_propagates_missing_delivery_groups(caplog):
    runner = Runner(registry=Registry())
    with caplog.at_level(logging.ERROR), pytest.raises(NoDeliveryGroupsError):
        runner.run(RunContext.from_args(target=DELIVERY_OPTIONS_TARGET), make_payload(["SHIPPING"]))
    assert "no delivery groups" in caplog.text


def test_runner_propagates_invalid_input():
    runner = Runner(registry=Registry())
    with pytest.raises(InvalidInputError):
        runner.run(RunContext.from_args(target=CART_LINES_TARGET), {"cart": {}})
