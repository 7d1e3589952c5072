"""Tests for the suggestion merge and context policy."""

from __future__ import annotations

import pytest

from typeahead.config.runtime import QueryOptions
from typeahead.index.bigrams import BigramTable
from typeahead.ranking.ranker import SuggestionRanker

from tests.conftest import make_trie


def _options(max_suggestions: int = 5, fuzzy_distance: int = 1) -> QueryOptions:
    return QueryOptions(max_suggestions=max_suggestions, fuzzy_distance=fuzzy_distance)


@pytest.fixture
def context_ranker() -> SuggestionRanker:
    # "wander" is more frequent, but "world" follows "hello" more often
    trie = make_trie({"world": 1, "wander": 4, "hello": 2})
    bigrams = BigramTable()
    bigrams.add_pair("hello", "world", 5)
    bigrams.add_pair("hello", "wander", 1)
    return SuggestionRanker(trie, bigrams)


class TestContextPath:
    def test_bigram_weight_orders_results(self, context_ranker):
        assert context_ranker.suggest("w", "hello", _options()) == ["world", "wander"]

    def test_context_is_case_insensitive(self, context_ranker):
        assert context_ranker.suggest("w", "HELLO", _options()) == ["world", "wander"]

    def test_without_context_frequency_wins(self, context_ranker):
        # A one-letter prefix is within one edit of the empty path, so the
        # fuzzy top-up brings in the rest of the vocabulary after the exact hits
        assert context_ranker.suggest("w", None, _options()) == ["wander", "world", "hello"]

    def test_unknown_context_falls_back(self, context_ranker):
        for prefix in ["w", "he", "wrld"]:
            assert context_ranker.suggest(prefix, "nobody", _options()) == context_ranker.suggest(
                prefix, None, _options()
            )

    def test_context_without_matching_followers_falls_back(self, context_ranker):
        # "hello" is followed by world/wander only; nothing starts with "he" there
        assert context_ranker.suggest("he", "hello", _options()) == ["hello"]

    def test_context_results_capped(self, context_ranker):
        assert context_ranker.suggest("w", "hello", _options(max_suggestions=1)) == ["world"]

    def test_zero_weight_words_are_dropped(self):
        trie = make_trie({"world": 1, "wonder": 1})
        bigrams = BigramTable()
        bigrams.add_pair("hello", "world", 2)
        ranker = SuggestionRanker(trie, bigrams)
        assert ranker.suggest("w", "hello", _options()) == ["world"]


class TestRegularPath:
    def test_empty_prefix(self, context_ranker):
        assert context_ranker.suggest("", None, _options()) == []
        assert context_ranker.suggest(None, "hello", _options()) == []

    def test_exact_matches_fill_quota(self):
        ranker = SuggestionRanker(make_trie({"hello": 5, "help": 3, "helmet": 3}))
        assert ranker.suggest("hel", None, _options(max_suggestions=2)) == ["hello", "helmet"]

    def test_exact_then_fuzzy_then_phonetic(self):
        trie = make_trie({"cat": 5, "catalog": 2, "cut": 1, "cod": 1})
        ranker = SuggestionRanker(trie)
        # exact: cat, catalog; fuzzy adds cut; phonetic (C300) adds cod
        assert ranker.suggest("cat", None, _options()) == ["cat", "catalog", "cut", "cod"]

    def test_fuzzy_supplement(self):
        ranker = SuggestionRanker(make_trie({"world": 2, "wander": 1}))
        assert ranker.suggest("wrld", None, _options()) == ["world"]

    def test_phonetic_supplement(self):
        ranker = SuggestionRanker(make_trie({"Robert": 1, "Rubin": 1}))
        assert ranker.suggest("rupurt", None, _options()) == ["Robert"]

    def test_fuzzy_distance_option(self):
        ranker = SuggestionRanker(make_trie({"kitten": 1}))
        assert ranker.suggest("sitting", None, _options(fuzzy_distance=1)) == []
        assert ranker.suggest("sitting", None, _options(fuzzy_distance=3)) == ["kitten"]

    def test_never_exceeds_quota_and_no_duplicates(self):
        words = {w: 1 for w in ["bat", "cat", "hat", "mat", "rat", "sat", "vat"]}
        ranker = SuggestionRanker(make_trie(words))
        for n in range(1, 8):
            result = ranker.suggest("zat", None, _options(max_suggestions=n))
            assert len(result) <= n
            assert len(result) == len(set(result))


class TestCorrections:
    def test_at_most_five(self):
        words = {w: 1 for w in ["bat", "cat", "hat", "mat", "rat", "sat", "vat"]}
        ranker = SuggestionRanker(make_trie(words))
        assert ranker.corrections("zat", _options()) == ["bat", "cat", "hat", "mat", "rat"]

    def test_fuzzy_before_phonetic(self):
        trie = make_trie({"hello": 1, "Robert": 1})
        ranker = SuggestionRanker(trie)
        assert ranker.corrections("helo", _options()) == ["hello"]
        assert ranker.corrections("rupurt", _options()) == ["Robert"]

    def test_only_approximate_sources(self):
        ranker = SuggestionRanker(make_trie({"python": 3}))
        assert ranker.corrections("zzz", _options()) == []

    def test_independent_of_max_suggestions(self):
        words = {w: 1 for w in ["bat", "cat", "hat", "mat", "rat", "sat"]}
        ranker = SuggestionRanker(make_trie(words))
        assert len(ranker.corrections("zat", _options(max_suggestions=1))) == 5

    def test_empty_prefix(self):
        ranker = SuggestionRanker(make_trie({"python": 3}))
        assert ranker.corrections("", _options()) == []

    def test_queries_do_not_mutate(self):
        trie = make_trie({"hello": 2})
        ranker = SuggestionRanker(trie)
        ranker.suggest("hel", None, _options())
        ranker.corrections("helo", _options())
        assert trie.frequency_of("hello") == 2
        assert trie.size == 1
