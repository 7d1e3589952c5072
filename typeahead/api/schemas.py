"""Pydantic response/request models for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SuggestResponse(BaseModel):
    """Ranked completions for a prefix."""

    prefix: str
    context: Optional[str] = None
    suggestions: list[str]


class CorrectionsResponse(BaseModel):
    """Did-you-mean candidates."""

    prefix: str
    corrections: list[str]


class AddWordRequest(BaseModel):
    """Request body for adding a word to the live index."""

    word: str = Field(..., min_length=1, max_length=100)


class WordResponse(BaseModel):
    """A word and its current frequency."""

    word: str
    exists: bool
    frequency: int


class ConfigResponse(BaseModel):
    """Current runtime query parameters."""

    max_suggestions: int
    fuzzy_distance: int
    corrections_limit: int


class ConfigUpdateRequest(BaseModel):
    """Partial update; omitted fields stay as they are."""

    max_suggestions: Optional[int] = Field(None, ge=1, le=100)
    fuzzy_distance: Optional[int] = Field(None, ge=0, le=5)


class StatsResponse(BaseModel):
    """Index statistics."""

    word_count: int
    bigram_heads: int
    bigram_pairs: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str


# Documented on every route that spends a rate-limiter token
RATE_LIMITED_RESPONSES = {429: {"model": ErrorResponse, "description": "Rate limit exceeded"}}
