"""API routers for the local development server."""

from tiered_discounts.app.api.routers.config import router as config_router
from tiered_discounts.app.api.routers.targets import router as targets_router

__all__ = ["config_router", "targets_router"]
