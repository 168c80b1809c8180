from __future__ import annotations

from collections.abc import Collection
from enum import Enum


class DiscountClass(str, Enum):
    PRODUCT = "PRODUCT"
    ORDER = "ORDER"
    SHIPPING = "SHIPPING"


def is_class_active(active_classes: Collection[DiscountClass], discount_class: DiscountClass) -> bool:
    return discount_class in active_classes
