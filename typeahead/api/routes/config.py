"""Runtime configuration routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from typeahead.api.schemas import RATE_LIMITED_RESPONSES, ConfigResponse, ConfigUpdateRequest
from typeahead.config.runtime import QueryOptions
from typeahead.errors import InvalidConfigError

router = APIRouter(prefix="/config", tags=["config"])


def _to_response(options: QueryOptions) -> ConfigResponse:
    return ConfigResponse(
        max_suggestions=options.max_suggestions,
        fuzzy_distance=options.fuzzy_distance,
        corrections_limit=options.corrections_limit,
    )


@router.get("", response_model=ConfigResponse)
def get_config(request: Request) -> ConfigResponse:
    """Current query parameters."""
    return _to_response(request.app.state.engine.config.snapshot())


@router.put("", response_model=ConfigResponse, responses=RATE_LIMITED_RESPONSES)
def update_config(request: Request, body: ConfigUpdateRequest) -> ConfigResponse:
    """Change max suggestions and/or fuzzy distance without rebuilding the index."""
    request.app.state.write_rate_limiter.enforce(request)

    engine = request.app.state.engine
    try:
        options = engine.configure(
            max_suggestions=body.max_suggestions,
            fuzzy_distance=body.fuzzy_distance,
        )
    except InvalidConfigError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _to_response(options)
