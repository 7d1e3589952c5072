"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from typeahead.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return index statistics."""
    return StatsResponse(**request.app.state.engine.stats())
