"""Tests for phonetic codes and sound-alike lookup."""

from __future__ import annotations

import pytest

from typeahead.index.phonetic import PhoneticIndex, phonetic_code

from tests.conftest import make_trie


class TestPhoneticCode:
    def test_robert_and_rupert_share_a_code(self):
        assert phonetic_code("Robert") == "R163"
        assert phonetic_code("Rupert") == "R163"

    def test_empty_input(self):
        assert phonetic_code("") == ""
        assert phonetic_code(None) == ""

    @pytest.mark.parametrize(
        "word, code",
        [
            ("robert", "R163"),
            ("Tymczak", "T522"),
            ("Pfister", "P236"),
            ("Lee", "L000"),
            ("a", "A000"),
            ("world", "W643"),
        ],
    )
    def test_known_codes(self, word, code):
        assert phonetic_code(word) == code

    def test_vowel_resets_the_previous_class(self):
        # s and c share a class; the h between them resets the tracker
        assert phonetic_code("Ashcraft") == "A226"

    def test_adjacent_same_class_collapses(self):
        assert phonetic_code("Jackson") == "J250"

    def test_always_four_characters(self):
        for word in ["x", "Washington", "Lloyd", "Honeyman"]:
            assert len(phonetic_code(word)) == 4


class TestPhoneticIndex:
    def test_finds_sound_alikes(self):
        t = make_trie({"Robert": 2, "Rupert": 1, "Rubin": 5})
        terms = [s.term for s in PhoneticIndex(t).search("rupurt")]
        assert terms == ["Robert", "Rupert"]

    def test_limit(self):
        t = make_trie({"Robert": 2, "Rupert": 1})
        assert len(PhoneticIndex(t).search("robert", limit=1)) == 1

    def test_empty_prefix(self):
        t = make_trie({"Robert": 1})
        assert PhoneticIndex(t).search("") == []
