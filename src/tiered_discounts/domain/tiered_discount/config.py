from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

import jsonschema

logger = logging.getLogger(__name__)

# Upper bounds of the host's numeric types (i32 and f64)
MAX_QUANTITY_THRESHOLD = 2147483647
MAX_AMOUNT = sys.float_info.max

# JSON schema for the merchant-authored tier configuration stored on the discount metafield.
TIERED_DISCOUNT_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "TieredDiscountConfig",
    "type": "object",
    "required": [
        "quantity_threshold",
        "quantity_discount_percentage",
        "order_threshold_1",
        "order_discount_percentage_1",
        "free_shipping_threshold",
    ],
    "properties": {
        "quantity_threshold": {"type": "integer", "minimum": 0, "maximum": MAX_QUANTITY_THRESHOLD},
        "quantity_discount_percentage": {"type": "number", "minimum": 0, "maximum": MAX_AMOUNT},
        "order_threshold_1": {"type": "number", "minimum": 0, "maximum": MAX_AMOUNT},
        "order_discount_percentage_1": {"type": "number", "minimum": 0, "maximum": MAX_AMOUNT},
        "free_shipping_threshold": {"type": "number", "minimum": 0, "maximum": MAX_AMOUNT},
    },
}


@dataclass(frozen=True)
class TieredDiscountConfig:
    quantity_threshold: int = 2
    quantity_discount_percentage: Decimal = Decimal("5.0")
    order_threshold_1: Decimal = Decimal("100.0")
    order_discount_percentage_1: Decimal = Decimal("10.0")
    free_shipping_threshold: Decimal = Decimal("200.0")


DEFAULT_CONFIG = TieredDiscountConfig()


@dataclass(frozen=True)
class ConfigDecoded:
    config: TieredDiscountConfig


@dataclass(frozen=True)
class ConfigRejected:
    reason: str


ConfigDecodeResult = Union[ConfigDecoded, ConfigRejected]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number not allowed: {name}")


def decode_config(raw_value: str) -> ConfigDecodeResult:
    """
    Strictly decode a raw metafield value into a TieredDiscountConfig.

    All five fields are required. Integers are accepted for decimal fields,
    but quantity_threshold must be a JSON integer. Unknown keys are ignored.
    """
    try:
        # parse_float keeps decimal fields exact (0.1 stays 0.1)
        data = json.loads(raw_value, parse_float=Decimal, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        return ConfigRejected(reason=f"Invalid JSON: {e}")

    try:
        jsonschema.validate(instance=data, schema=TIERED_DISCOUNT_CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        return ConfigRejected(reason=f"Validation error: {e.message}")

    return ConfigDecoded(
        config=TieredDiscountConfig(
            quantity_threshold=int(data["quantity_threshold"]),
            quantity_discount_percentage=Decimal(data["quantity_discount_percentage"]),
            order_threshold_1=Decimal(data["order_threshold_1"]),
            order_discount_percentage_1=Decimal(data["order_discount_percentage_1"]),
            free_shipping_threshold=Decimal(data["free_shipping_threshold"]),
        )
    )


def resolve_config(raw_value: Optional[str]) -> TieredDiscountConfig:
    """Return the effective config, falling back to defaults when absent or undecodable."""
    if raw_value is None:
        return DEFAULT_CONFIG

    result = decode_config(raw_value)
    if isinstance(result, ConfigRejected):
        logger.warning(f"Discount configuration rejected, using defaults: {result.reason}")
        return DEFAULT_CONFIG
    return result.config
