from __future__ import annotations

from tiered_discounts.domain.common.discount_class import DiscountClass, is_class_active
from tiered_discounts.domain.common.operations import CartOperation, DeliveryOperation
from tiered_discounts.domain.tiered_discount.config import resolve_config
from tiered_discounts.domain.tiered_discount.model import (
    CartLinesDiscountsInput,
    CartLinesDiscountsResult,
    DeliveryOptionsDiscountsInput,
    DeliveryOptionsDiscountsResult,
)
from tiered_discounts.domain.tiered_discount import rules


def generate_cart_lines_discounts(input_row: CartLinesDiscountsInput) -> CartLinesDiscountsResult:
    """
    Evaluate product and order discounts for a cart.

    Rule order:
    1. Neither PRODUCT nor ORDER active => no operations
    2. PRODUCT active => one product discount per line with quantity >= quantity_threshold
    3. ORDER active and subtotal >= order_threshold_1 => one order subtotal discount

    Product discounts come first, in cart line order, followed by the order discount.
    """
    classes = input_row.discount.discount_classes
    has_product_class = is_class_active(classes, DiscountClass.PRODUCT)
    has_order_class = is_class_active(classes, DiscountClass.ORDER)

    if not has_product_class and not has_order_class:
        return CartLinesDiscountsResult(operations=[])

    config = resolve_config(input_row.discount.metafield_value)
    cart = input_row.cart

    operations: list[CartOperation] = []
    if has_product_class:
        operations.extend(
            rules.evaluate_lines(cart.lines, config.quantity_threshold, config.quantity_discount_percentage)
        )

    if has_order_class:
        order_operation = rules.evaluate_order(
            cart.subtotal_amount, config.order_threshold_1, config.order_discount_percentage_1
        )
        if order_operation is not None:
            operations.append(order_operation)

    return CartLinesDiscountsResult(operations=operations)


def generate_delivery_options_discounts(
    input_row: DeliveryOptionsDiscountsInput,
) -> DeliveryOptionsDiscountsResult:
    """
    Evaluate the free-shipping discount for a cart.

    Raises NoDeliveryGroupsError when SHIPPING is active and the subtotal
    qualifies but the cart carries no delivery group.
    """
    config = resolve_config(input_row.discount.metafield_value)
    cart = input_row.cart

    operations: list[DeliveryOperation] = []
    shipping_operation = rules.evaluate_shipping(
        cart.subtotal_amount,
        config.free_shipping_threshold,
        is_class_active(input_row.discount.discount_classes, DiscountClass.SHIPPING),
        cart.delivery_groups,
    )
    if shipping_operation is not None:
        operations.append(shipping_operation)

    return DeliveryOptionsDiscountsResult(operations=operations)
