from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

from tiered_discounts.domain.common.amounts import format_amount
from tiered_discounts.domain.common.errors import NoDeliveryGroupsError
from tiered_discounts.domain.common.operations import (
    CartLineTarget,
    DeliveryDiscountCandidate,
    DeliveryDiscountsAddOperation,
    DeliveryGroupTarget,
    OrderDiscountCandidate,
    OrderDiscountsAddOperation,
    OrderSubtotalTarget,
    Percentage,
    ProductDiscountCandidate,
    ProductDiscountsAddOperation,
    SelectionStrategy,
)
from tiered_discounts.domain.tiered_discount.model import CartLine, DeliveryGroup

FREE_SHIPPING_PERCENTAGE = Decimal("100")

# Message templates
MESSAGE_QUANTITY_DISCOUNT = "{percentage}% OFF - Buy {threshold} or more"
MESSAGE_ORDER_DISCOUNT = "{percentage}% OFF ORDER - Spend ${threshold}+"
MESSAGE_FREE_SHIPPING = "FREE SHIPPING - Spend ${threshold}+"


def evaluate_lines(
    lines: Sequence[CartLine], threshold: int, percentage: Decimal
) -> list[ProductDiscountsAddOperation]:
    """
    Emit one product discount per line whose quantity reaches the threshold.

    Operations follow the order of the cart lines. Each targets the whole line.
    """
    message = MESSAGE_QUANTITY_DISCOUNT.format(
        percentage=format_amount(percentage), threshold=threshold
    )
    operations: list[ProductDiscountsAddOperation] = []
    for line in lines:
        if line.quantity < threshold:
            continue
        candidate = ProductDiscountCandidate(
            targets=(CartLineTarget(id=line.id, quantity=None),),
            value=Percentage(value=percentage),
            message=message,
        )
        operations.append(
            ProductDiscountsAddOperation(
                selection_strategy=SelectionStrategy.FIRST,
                candidates=(candidate,),
            )
        )
    return operations


def evaluate_order(
    subtotal: Decimal, threshold: Decimal, percentage: Decimal
) -> Optional[OrderDiscountsAddOperation]:
    """Emit an order subtotal discount when the subtotal reaches the threshold."""
    if subtotal < threshold:
        return None

    candidate = OrderDiscountCandidate(
        targets=(OrderSubtotalTarget(excluded_cart_line_ids=()),),
        value=Percentage(value=percentage),
        message=MESSAGE_ORDER_DISCOUNT.format(
            percentage=format_amount(percentage), threshold=format_amount(threshold)
        ),
    )
    return OrderDiscountsAddOperation(
        selection_strategy=SelectionStrategy.FIRST,
        candidates=(candidate,),
    )


def evaluate_shipping(
    subtotal: Decimal,
    threshold: Decimal,
    has_shipping_class: bool,
    delivery_groups: Sequence[DeliveryGroup],
) -> Optional[DeliveryDiscountsAddOperation]:
    """
    Emit a free-shipping discount on the first delivery group.

    Returns None when the shipping class is inactive or the subtotal is below
    the threshold. Raises NoDeliveryGroupsError when the discount qualifies
    but there is no delivery group to target.
    """
    if not has_shipping_class or subtotal < threshold:
        return None

    if not delivery_groups:
        raise NoDeliveryGroupsError()
    first_delivery_group = delivery_groups[0]

    candidate = DeliveryDiscountCandidate(
        targets=(DeliveryGroupTarget(id=first_delivery_group.id),),
        value=Percentage(value=FREE_SHIPPING_PERCENTAGE),
        message=MESSAGE_FREE_SHIPPING.format(threshold=format_amount(threshold)),
    )
    return DeliveryDiscountsAddOperation(
        selection_strategy=SelectionStrategy.ALL,
        candidates=(candidate,),
    )
