"""Router for function target endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Header, HTTPException

from tiered_discounts.application.errors import (
    InvalidInputError,
    NoDeliveryGroupsError,
    UnknownTargetError,
)
from tiered_discounts.application.registry import Registry
from tiered_discounts.application.run_context import RunContext
from tiered_discounts.application.runner import Runner

router = APIRouter()

_registry = Registry()


def get_registry() -> Registry:
    """Dependency to provide the target Registry."""
    return _registry


@router.get("/targets")
def list_targets(registry: Registry = Depends(get_registry)) -> dict:
    return {"targets": registry.targets()}


@router.post("/targets/{target}/run")
def run_target(
    target: str,
    payload: dict[str, Any] = Body(...),
    x_correlation_id: str | None = Header(None),
    registry: Registry = Depends(get_registry),
) -> dict:
    """
    Evaluate a function target against an input document and return the output document.
    """
    ctx = RunContext.from_args(target=target, correlation_id=x_correlation_id)
    try:
        return Runner(registry=registry).run(ctx, payload)
    except UnknownTargetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    except NoDeliveryGroupsError as e:
        raise HTTPException(status_code=409, detail=str(e))
