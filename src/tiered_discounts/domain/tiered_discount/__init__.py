from __future__ import annotations

from tiered_discounts.domain.tiered_discount.config import (
    DEFAULT_CONFIG,
    ConfigDecoded,
    ConfigRejected,
    TieredDiscountConfig,
    decode_config,
    resolve_config,
)
from tiered_discounts.domain.tiered_discount.evaluator import (
    generate_cart_lines_discounts,
    generate_delivery_options_discounts,
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

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigDecoded",
    "ConfigRejected",
    "TieredDiscountConfig",
    "decode_config",
    "resolve_config",
    "generate_cart_lines_discounts",
    "generate_delivery_options_discounts",
    "CartLine",
    "CartLinesDiscountsInput",
    "CartLinesDiscountsResult",
    "CartSnapshot",
    "DeliveryGroup",
    "DeliveryOptionsDiscountsInput",
    "DeliveryOptionsDiscountsResult",
    "DiscountContext",
]
