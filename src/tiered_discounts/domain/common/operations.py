from __future__ import annotations

"""
Discount operations emitted by the tiered discount engine.

The variant set is closed: line discounts produce ProductDiscountsAdd and
OrderDiscountsAdd operations, delivery discounts produce DeliveryDiscountsAdd
operations. Each operation wraps candidates that carry their targets, a
percentage value and an optional message.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from tiered_discounts.domain.common.ids import CartLineId, DeliveryGroupId


class SelectionStrategy(str, Enum):
    """How the host resolves multiple candidates inside one operation."""

    FIRST = "FIRST"
    ALL = "ALL"
    MAXIMUM = "MAXIMUM"


@dataclass(frozen=True)
class Percentage:
    value: Decimal


# Targets


@dataclass(frozen=True)
class CartLineTarget:
    id: CartLineId
    quantity: Optional[int] = None  # None targets the whole line


@dataclass(frozen=True)
class OrderSubtotalTarget:
    excluded_cart_line_ids: tuple[CartLineId, ...] = ()


@dataclass(frozen=True)
class DeliveryGroupTarget:
    id: DeliveryGroupId


# Candidates


@dataclass(frozen=True)
class ProductDiscountCandidate:
    targets: tuple[CartLineTarget, ...]
    value: Percentage
    message: Optional[str] = None
    associated_discount_code: Optional[str] = None


@dataclass(frozen=True)
class OrderDiscountCandidate:
    targets: tuple[OrderSubtotalTarget, ...]
    value: Percentage
    message: Optional[str] = None
    conditions: Optional[tuple[object, ...]] = None
    associated_discount_code: Optional[str] = None


@dataclass(frozen=True)
class DeliveryDiscountCandidate:
    targets: tuple[DeliveryGroupTarget, ...]
    value: Percentage
    message: Optional[str] = None
    associated_discount_code: Optional[str] = None


# Operations


@dataclass(frozen=True)
class ProductDiscountsAddOperation:
    selection_strategy: SelectionStrategy
    candidates: tuple[ProductDiscountCandidate, ...]


@dataclass(frozen=True)
class OrderDiscountsAddOperation:
    selection_strategy: SelectionStrategy
    candidates: tuple[OrderDiscountCandidate, ...]


@dataclass(frozen=True)
class DeliveryDiscountsAddOperation:
    selection_strategy: SelectionStrategy
    candidates: tuple[DeliveryDiscountCandidate, ...]


CartOperation = Union[ProductDiscountsAddOperation, OrderDiscountsAddOperation]
DeliveryOperation = DeliveryDiscountsAddOperation
DiscountOperation = Union[
    ProductDiscountsAddOperation, OrderDiscountsAddOperation, DeliveryDiscountsAddOperation
]
