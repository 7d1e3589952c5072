"""
Shared test fixtures for the Typeahead test suite.

Every test that touches files gets its own project root under pytest's
tmp_path, so user dictionaries and logs never leak between tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from typeahead.config.runtime import QueryOptions, RuntimeConfig
from typeahead.config.settings import Settings
from typeahead.engine.engine import AutocompleteEngine
from typeahead.index.bigrams import BigramTable
from typeahead.index.trie import Trie
from typeahead.index.user_dictionary import UserDictionary


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary project directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s


@pytest.fixture
def trie() -> Trie:
    """A small trie with distinct frequencies."""
    return make_trie({"hello": 5, "help": 3, "helmet": 3, "world": 2, "wander": 1})


@pytest.fixture
def engine(settings: Settings):
    """Engine over a small vocabulary, persisting into the temp data dir."""
    trie = make_trie({"hello": 5, "help": 3, "world": 2, "wander": 1})
    bigrams = BigramTable()
    bigrams.add_pair("hello", "world", 5)
    bigrams.add_pair("hello", "wander", 1)
    eng = AutocompleteEngine(
        trie=trie,
        bigrams=bigrams,
        config=RuntimeConfig(QueryOptions(max_suggestions=5, fuzzy_distance=1)),
        user_dictionary=UserDictionary(settings.user_dictionary_path),
    )
    yield eng
    eng.shutdown()


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_trie(counts: dict[str, int]) -> Trie:
    """Build a Trie inserting each word the given number of times."""
    t = Trie()
    for word, n in counts.items():
        for _ in range(n):
            t.insert(word)
    return t
