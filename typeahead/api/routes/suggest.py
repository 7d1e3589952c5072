"""Suggestion and correction routes."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from typeahead.api.schemas import RATE_LIMITED_RESPONSES, CorrectionsResponse, SuggestResponse

router = APIRouter(tags=["suggest"])


@router.get("/suggest", response_model=SuggestResponse, responses=RATE_LIMITED_RESPONSES)
def suggest(
    request: Request,
    q: str = Query(..., min_length=1, max_length=100, description="Prefix to complete"),
    context: str | None = Query(None, max_length=100, description="Previous word"),
) -> SuggestResponse:
    """Return ranked completions for a prefix."""
    request.app.state.query_rate_limiter.enforce(request)

    engine = request.app.state.engine
    return SuggestResponse(
        prefix=q,
        context=context,
        suggestions=engine.query(q, context),
    )


@router.get("/corrections", response_model=CorrectionsResponse, responses=RATE_LIMITED_RESPONSES)
def corrections(
    request: Request,
    q: str = Query(..., min_length=1, max_length=100, description="Misspelled prefix"),
) -> CorrectionsResponse:
    """Return did-you-mean candidates for a prefix."""
    request.app.state.query_rate_limiter.enforce(request)

    engine = request.app.state.engine
    return CorrectionsResponse(prefix=q, corrections=engine.corrections(q))
