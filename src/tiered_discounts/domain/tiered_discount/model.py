from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from tiered_discounts.domain.common.amounts import to_decimal
from tiered_discounts.domain.common.discount_class import DiscountClass
from tiered_discounts.domain.common.ids import CartLineId, DeliveryGroupId
from tiered_discounts.domain.common.operations import CartOperation, DeliveryOperation


@dataclass(frozen=True)
class CartLine:
    id: CartLineId
    quantity: int


@dataclass(frozen=True)
class DeliveryGroup:
    id: DeliveryGroupId


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of the cart at checkout time."""

    subtotal_amount: Decimal
    lines: tuple[CartLine, ...]
    delivery_groups: tuple[DeliveryGroup, ...]

    @staticmethod
    def new(
        subtotal_amount: int | float | str | Decimal,
        lines: Optional[Iterable[tuple[str, int]]] = None,
        delivery_group_ids: Optional[Iterable[str]] = None,
    ) -> "CartSnapshot":
        return CartSnapshot(
            subtotal_amount=to_decimal(subtotal_amount),
            lines=tuple(CartLine(id=CartLineId(line_id), quantity=qty) for line_id, qty in lines or ()),
            delivery_groups=tuple(
                DeliveryGroup(id=DeliveryGroupId(group_id)) for group_id in delivery_group_ids or ()
            ),
        )


@dataclass(frozen=True)
class DiscountContext:
    """The discount instance being evaluated: its active classes and raw metafield value."""

    discount_classes: frozenset[DiscountClass]
    metafield_value: Optional[str] = None

    @staticmethod
    def new(
        discount_classes: Optional[Iterable[DiscountClass | str]] = None,
        metafield_value: Optional[str] = None,
    ) -> "DiscountContext":
        return DiscountContext(
            discount_classes=frozenset(DiscountClass(c) for c in discount_classes or ()),
            metafield_value=metafield_value,
        )


@dataclass(frozen=True)
class CartLinesDiscountsInput:
    cart: CartSnapshot
    discount: DiscountContext


@dataclass(frozen=True)
class DeliveryOptionsDiscountsInput:
    cart: CartSnapshot
    discount: DiscountContext


@dataclass(frozen=True)
class CartLinesDiscountsResult:
    operations: list[CartOperation]


@dataclass(frozen=True)
class DeliveryOptionsDiscountsResult:
    operations: list[DeliveryOperation]
