"""Tests for the bigram table."""

from __future__ import annotations

from typeahead.index.bigrams import BigramTable


class TestBigramTable:
    def test_add_tokens_counts_adjacent_pairs(self):
        b = BigramTable()
        pairs = b.add_tokens(["the", "cat", "sat", "on", "the", "mat"])
        assert pairs == 5
        assert b.next_words("the") == {"cat": 1, "mat": 1}
        assert b.weight("cat", "sat") == 1

    def test_counts_accumulate(self):
        b = BigramTable()
        b.add_tokens(["hello", "world"])
        b.add_tokens(["hello", "world"])
        b.add_pair("hello", "world", 3)
        assert b.weight("hello", "world") == 5

    def test_previous_word_is_case_insensitive(self):
        b = BigramTable()
        b.add_pair("Hello", "world")
        assert b.weight("HELLO", "World") == 1
        assert "hello" in b

    def test_unknown_previous_word(self):
        b = BigramTable()
        assert b.next_words("nothing") == {}
        assert b.next_words(None) == {}
        assert b.weight("nothing", "here") == 0
        assert "nothing" not in b

    def test_empty_tokens_are_skipped(self):
        b = BigramTable()
        assert b.add_tokens(["a", "", "b"]) == 1
        assert b.weight("a", "b") == 1
        assert b.add_tokens(["solo"]) == 0

    def test_sizes(self):
        b = BigramTable()
        b.add_tokens(["a", "b", "c"])
        b.add_pair("a", "c")
        assert len(b) == 2
        assert b.pair_count() == 3
