"""Vocabulary routes: add and inspect words."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from typeahead.api.schemas import RATE_LIMITED_RESPONSES, AddWordRequest, WordResponse

router = APIRouter(prefix="/words", tags=["words"])


@router.post("", response_model=WordResponse, status_code=201, responses=RATE_LIMITED_RESPONSES)
def add_word(request: Request, body: AddWordRequest) -> WordResponse:
    """Insert a word into the live index and the user dictionary."""
    request.app.state.write_rate_limiter.enforce(request)

    engine = request.app.state.engine
    word = body.word.strip()
    if not engine.add_word(word):
        raise HTTPException(status_code=422, detail="Word must not be blank")

    return WordResponse(word=word, exists=True, frequency=engine.frequency_of(word))


@router.get("/{word}", response_model=WordResponse)
def get_word(request: Request, word: str) -> WordResponse:
    """Report whether a word is indexed and how often it was inserted."""
    engine = request.app.state.engine
    return WordResponse(
        word=word,
        exists=engine.contains(word),
        frequency=engine.frequency_of(word),
    )
