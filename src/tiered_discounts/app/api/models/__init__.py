"""Pydantic models for API requests and responses."""

from tiered_discounts.app.api.models.config import (
    ConfigResolveRequest,
    ConfigResolveResponse,
    EffectiveConfig,
)

__all__ = [
    "ConfigResolveRequest",
    "ConfigResolveResponse",
    "EffectiveConfig",
]
