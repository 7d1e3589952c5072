"""HTTP API: suggestions, corrections, word additions and runtime config."""

from typeahead.api.app import create_app
from typeahead.api.rate_limiter import RateLimiter

__all__ = [
    "create_app",
    "RateLimiter",
]
