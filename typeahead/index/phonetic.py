"""
Phonetic encoding for sound-alike suggestions.

- Soundex-style code: first letter + 3 consonant-class digits.
- Similar-sounding words ("Robert", "Rupert") share a code.
"""

from __future__ import annotations

import logging
from typing import Optional

from typeahead.index.trie import Suggestion, Trie, rank_key

logger = logging.getLogger(__name__)

CODE_LENGTH = 4

_CLASSES = {
    "1": "BFPV",
    "2": "CGJKQSXZ",
    "3": "DT",
    "4": "L",
    "5": "MN",
    "6": "R",
}
_DIGIT = {ch: digit for digit, letters in _CLASSES.items() for ch in letters}


def _class_of(ch: str) -> str:
    """Consonant class digit; vowels, H, W, Y and non-letters map to '0'."""
    return _DIGIT.get(ch, "0")


def phonetic_code(word: Optional[str]) -> str:
    """
    Soundex-class code for *word*.

    The previous-class tracker moves on every character, so a vowel
    between two same-class consonants lets the second one through.
    """
    if not word:
        return ""

    upper = word.upper()
    code = [upper[0]]
    prev = _class_of(upper[0])
    for ch in upper[1:]:
        digit = _class_of(ch)
        if digit != "0" and digit != prev:
            code.append(digit)
        prev = digit

    return "".join(code)[:CODE_LENGTH].ljust(CODE_LENGTH, "0")


class PhoneticIndex:
    """
    Sound-alike lookup over a Trie.

    Scans every indexed word on each query, which is fine for small
    vocabularies.
    """

    def __init__(self, trie: Trie) -> None:
        self._trie = trie

    def search(self, prefix: Optional[str], limit: Optional[int] = 10) -> list[Suggestion]:
        """Return up to *limit* words sharing *prefix*'s code, most frequent first."""
        if not prefix or (limit is not None and limit <= 0):
            return []

        target = phonetic_code(prefix)
        results = [s for s in self._trie.iter_words() if phonetic_code(s.term) == target]
        results.sort(key=rank_key)
        if limit is not None:
            results = results[:limit]
        logger.debug("Phonetic %r (%s) matched %d words", prefix, target, len(results))
        return results
