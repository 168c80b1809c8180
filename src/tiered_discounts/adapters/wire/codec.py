from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from tiered_discounts.adapters.wire.models import FunctionInput
from tiered_discounts.application.errors import InvalidInputError
from tiered_discounts.domain.common.amounts import format_amount
from tiered_discounts.domain.common.ids import CartLineId, DeliveryGroupId
from tiered_discounts.domain.common.operations import (
    DeliveryDiscountsAddOperation,
    DiscountOperation,
    OrderDiscountsAddOperation,
    Percentage,
    ProductDiscountsAddOperation,
)
from tiered_discounts.domain.tiered_discount.model import (
    CartLine,
    CartLinesDiscountsInput,
    CartLinesDiscountsResult,
    CartSnapshot,
    DeliveryGroup,
    DeliveryOptionsDiscountsInput,
    DeliveryOptionsDiscountsResult,
    DiscountContext,
)


def _parse_function_input(payload: Any) -> FunctionInput:
    try:
        return FunctionInput.model_validate(payload)
    except ValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        raise InvalidInputError(f"Invalid function input: {e.error_count()} validation error(s)", errors) from e


def _to_domain(parsed: FunctionInput) -> tuple[CartSnapshot, DiscountContext]:
    cart = CartSnapshot(
        subtotal_amount=parsed.cart.cost.subtotal_amount.amount,
        lines=tuple(CartLine(id=CartLineId(line.id), quantity=line.quantity) for line in parsed.cart.lines),
        delivery_groups=tuple(
            DeliveryGroup(id=DeliveryGroupId(group.id)) for group in parsed.cart.delivery_groups
        ),
    )
    discount = DiscountContext(
        discount_classes=frozenset(parsed.discount.discount_classes),
        metafield_value=parsed.discount.metafield.value if parsed.discount.metafield else None,
    )
    return cart, discount


def decode_cart_lines_input(payload: Any) -> CartLinesDiscountsInput:
    cart, discount = _to_domain(_parse_function_input(payload))
    return CartLinesDiscountsInput(cart=cart, discount=discount)


def decode_delivery_options_input(payload: Any) -> DeliveryOptionsDiscountsInput:
    cart, discount = _to_domain(_parse_function_input(payload))
    return DeliveryOptionsDiscountsInput(cart=cart, discount=discount)


def _encode_value(value: Percentage) -> dict[str, Any]:
    return {"percentage": {"value": format_amount(value.value)}}


def encode_operation(operation: DiscountOperation) -> dict[str, Any]:
    """Encode one operation as the host's single-key tagged object."""
    if isinstance(operation, ProductDiscountsAddOperation):
        return {
            "productDiscountsAdd": {
                "selectionStrategy": operation.selection_strategy.value,
                "candidates": [
                    {
                        "targets": [
                            {"cartLine": {"id": target.id, "quantity": target.quantity}}
                            for target in candidate.targets
                        ],
                        "message": candidate.message,
                        "value": _encode_value(candidate.value),
                        "associatedDiscountCode": candidate.associated_discount_code,
                    }
                    for candidate in operation.candidates
                ],
            }
        }
    if isinstance(operation, OrderDiscountsAddOperation):
        return {
            "orderDiscountsAdd": {
                "selectionStrategy": operation.selection_strategy.value,
                "candidates": [
                    {
                        "targets": [
                            {"orderSubtotal": {"excludedCartLineIds": list(target.excluded_cart_line_ids)}}
                            for target in candidate.targets
                        ],
                        "message": candidate.message,
                        "value": _encode_value(candidate.value),
                        "conditions": list(candidate.conditions) if candidate.conditions is not None else None,
                        "associatedDiscountCode": candidate.associated_discount_code,
                    }
                    for candidate in operation.candidates
                ],
            }
        }
    if isinstance(operation, DeliveryDiscountsAddOperation):
        return {
            "deliveryDiscountsAdd": {
                "selectionStrategy": operation.selection_strategy.value,
                "candidates": [
                    {
                        "targets": [{"deliveryGroup": {"id": target.id}} for target in candidate.targets],
                        "message": candidate.message,
                        "value": _encode_value(candidate.value),
                        "associatedDiscountCode": candidate.associated_discount_code,
                    }
                    for candidate in operation.candidates
                ],
            }
        }
    raise TypeError(f"Unsupported discount operation: {type(operation).__name__}")


def encode_result(result: CartLinesDiscountsResult | DeliveryOptionsDiscountsResult) -> dict[str, Any]:
    return {"operations": [encode_operation(op) for op in result.operations]}
