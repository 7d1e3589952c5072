"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from typeahead.api.rate_limiter import RateLimiter
from typeahead.api.routes.config import router as config_router
from typeahead.api.routes.health import router as health_router
from typeahead.api.routes.suggest import router as suggest_router
from typeahead.api.routes.words import router as words_router
from typeahead.config.settings import Settings, get_settings
from typeahead.engine.engine import AutocompleteEngine


def create_app(
    settings: Settings | None = None,
    engine: Optional[AutocompleteEngine] = None,
) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Loads the index (unless an engine is supplied) and attaches rate
    limiters before mounting routes.
    """
    settings = settings or get_settings()
    engine = engine or AutocompleteEngine.from_settings(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        engine.shutdown()

    app = FastAPI(
        title="Typeahead API",
        version="0.1.0",
        description="Prefix autocompletion with fuzzy, phonetic and bigram ranking",
        lifespan=lifespan,
    )

    # Shared state, accessible via request.app.state in routes
    app.state.settings = settings
    app.state.engine = engine

    rl = settings.rate_limit
    app.state.query_rate_limiter = RateLimiter(
        capacity=rl.query_bucket_capacity,
        refill_rate=rl.query_refill_rate,
        eviction_ttl=rl.eviction_ttl,
    )
    app.state.write_rate_limiter = RateLimiter(
        capacity=rl.write_bucket_capacity,
        refill_rate=rl.write_refill_rate,
        eviction_ttl=rl.eviction_ttl,
    )

    app.include_router(health_router)
    app.include_router(suggest_router)
    app.include_router(words_router)
    app.include_router(config_router)

    return app
