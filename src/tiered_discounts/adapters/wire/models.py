"""Pydantic models for the function input document sent by the checkout host."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tiered_discounts.domain.common.discount_class import DiscountClass


class WireModel(BaseModel):
    """Base model accepting the host's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MoneyV2(WireModel):
    amount: Decimal


class CartCost(WireModel):
    subtotal_amount: MoneyV2


class CartLineInput(WireModel):
    id: str
    quantity: int = Field(..., ge=0)


class DeliveryGroupInput(WireModel):
    id: str


class CartInput(WireModel):
    lines: list[CartLineInput] = Field(default_factory=list)
    cost: CartCost
    delivery_groups: list[DeliveryGroupInput] = Field(default_factory=list, description="Only read by the delivery target")


class Metafield(WireModel):
    value: str


class DiscountInput(WireModel):
    discount_classes: list[DiscountClass] = Field(default_factory=list)
    metafield: Metafield | None = None


class FunctionInput(WireModel):
    cart: CartInput
    discount: DiscountInput
