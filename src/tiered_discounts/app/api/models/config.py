"""Pydantic models for tier configuration endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from tiered_discounts.domain.tiered_discount.config import TieredDiscountConfig


class ConfigResolveRequest(BaseModel):
    """Raw metafield value to resolve."""

    value: str | None = Field(None, description="Raw JSON text of the discount metafield, or null")


class EffectiveConfig(BaseModel):
    """Tier configuration in effect for an evaluation."""

    quantity_threshold: int
    quantity_discount_percentage: Decimal
    order_threshold_1: Decimal
    order_discount_percentage_1: Decimal
    free_shipping_threshold: Decimal

    @classmethod
    def from_domain(cls, config: TieredDiscountConfig) -> "EffectiveConfig":
        return cls(
            quantity_threshold=config.quantity_threshold,
            quantity_discount_percentage=config.quantity_discount_percentage,
            order_threshold_1=config.order_threshold_1,
            order_discount_percentage_1=config.order_discount_percentage_1,
            free_shipping_threshold=config.free_shipping_threshold,
        )


class ConfigResolveResponse(BaseModel):
    config: EffectiveConfig
    used_defaults: bool = Field(..., description="True when the value was absent or rejected")
    reason: str | None = Field(None, description="Why the value was rejected, if it was")
