"""Router for tier configuration endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from tiered_discounts.app.api.models.config import (
    ConfigResolveRequest,
    ConfigResolveResponse,
    EffectiveConfig,
)
from tiered_discounts.domain.tiered_discount.config import DEFAULT_CONFIG, ConfigRejected, decode_config

router = APIRouter()


@router.post("/config/resolve", response_model=ConfigResolveResponse)
def resolve_config_value(req: ConfigResolveRequest) -> ConfigResolveResponse:
    """
    Resolve a raw metafield value to the configuration the engine would use.

    Unlike evaluation, the rejection reason is reported so merchants can fix their settings.
    """
    if req.value is None:
        return ConfigResolveResponse(config=EffectiveConfig.from_domain(DEFAULT_CONFIG), used_defaults=True)

    result = decode_config(req.value)
    if isinstance(result, ConfigRejected):
        return ConfigResolveResponse(
            config=EffectiveConfig.from_domain(DEFAULT_CONFIG),
            used_defaults=True,
            reason=result.reason,
        )
    return ConfigResolveResponse(config=EffectiveConfig.from_domain(result.config), used_defaults=False)
