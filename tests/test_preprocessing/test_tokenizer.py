"""Tests for corpus line tokenization."""

from __future__ import annotations

from typeahead.preprocessing.tokenizer import CorpusProfile, clean_line, tokenize, tokenize_line


class TestTokenizeLine:
    def test_lowercases_and_splits_on_whitespace(self):
        assert tokenize_line("The Cat\tsat  on\n") == ["the", "cat", "sat", "on"]

    def test_empty(self):
        assert tokenize_line("") == []
        assert tokenize_line(None) == []
        assert tokenize_line("   ") == []

    def test_unicode_kept_as_written(self):
        assert tokenize_line("ﬁle Ｈｅｌｌｏ") == ["ﬁle", "ｈｅｌｌｏ"]


class TestCleanLine:
    def test_drops_everything_but_letters_and_spaces(self):
        assert clean_line("Hello, World! 42 times") == ["hello", "world", "times"]

    def test_tabs_still_separate_words(self):
        assert clean_line("one\ttwo") == ["one", "two"]

    def test_apostrophes_are_removed(self):
        assert clean_line("don't stop") == ["dont", "stop"]

    def test_unicode_is_normalised(self):
        # Ligatures and fullwidth letters fold to ASCII before stripping
        assert clean_line("ﬁle Ｈｅｌｌｏ") == ["file", "hello"]


class TestProfiles:
    def test_profile_dispatch(self):
        line = "Hi, there"
        assert tokenize(line, CorpusProfile.LINES) == ["hi,", "there"]
        assert tokenize(line, CorpusProfile.CLEANED) == ["hi", "there"]
