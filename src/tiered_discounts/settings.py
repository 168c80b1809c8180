from __future__ import annotations

import os
from dataclasses import dataclass

CART_LINES_TARGET = "cart.lines.discounts.generate.run"
DELIVERY_OPTIONS_TARGET = "cart.delivery-options.discounts.generate.run"


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    default_target: str = CART_LINES_TARGET

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            default_target=os.getenv("DEFAULT_TARGET", cls.default_target),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
