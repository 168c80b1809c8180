from __future__ import annotations

from fastapi import FastAPI

from tiered_discounts.app.api.routers import config_router, targets_router
from tiered_discounts.observability.logging import configure_logging

configure_logging()

app = FastAPI(title="Tiered Discounts")
app.include_router(targets_router, tags=["targets"])
app.include_router(config_router, tags=["config"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
