"""
Dictionary and corpus loading.

Word lists seed the trie one word per line.  Corpora seed both the trie
and the bigram table from adjacent tokens.  When no file is supplied the
built-in vocabulary and sentences below are used, so an index is always
usable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from typeahead.index.bigrams import BigramTable
from typeahead.index.trie import Trie
from typeahead.preprocessing.tokenizer import CorpusProfile, tokenize

logger = logging.getLogger(__name__)

DEFAULT_WORDS: tuple[str, ...] = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "I",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "Apple", "banana", "Cat", "dog", "Elephant",
)

DEFAULT_SENTENCES: tuple[str, ...] = (
    "the cat sat on the mat",
    "I have a dog and a cat",
    "Apple is a fruit",
    "he is not at home",
    "you do it for me",
)


class DictionaryLoader:
    """Fill a Trie (and optionally a BigramTable) from text sources."""

    @staticmethod
    def insert_words(trie: Trie, lines: Iterable[str]) -> int:
        """Insert each non-blank stripped line verbatim. Returns words inserted."""
        count = 0
        for line in lines:
            word = line.strip()
            if not word:
                continue
            trie.insert(word)
            count += 1
        return count

    @staticmethod
    def insert_sentences(
        trie: Trie,
        bigrams: BigramTable,
        lines: Iterable[str],
        profile: CorpusProfile = CorpusProfile.LINES,
    ) -> int:
        """
        Tokenize each line and count its adjacent pairs.

        LINES inserts every token.  CLEANED only inserts tokens that take
        part in a pair, each once per line.
        """
        pairs = 0
        for line in lines:
            tokens = tokenize(line, profile)
            if not tokens:
                continue
            if profile == CorpusProfile.LINES or len(tokens) > 1:
                for token in tokens:
                    trie.insert(token)
            pairs += bigrams.add_tokens(tokens)
        return pairs

    @classmethod
    def load_words(cls, trie: Trie, path: Path) -> int:
        """Load a word list. IO and decode errors propagate; nothing is inserted then."""
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
        count = cls.insert_words(trie, lines)
        logger.info("Loaded %d words from %s", count, path)
        return count

    @classmethod
    def load_corpus(
        cls,
        trie: Trie,
        bigrams: BigramTable,
        path: Path,
        cleaned: bool = False,
    ) -> int:
        """Load a sentence corpus. IO and decode errors propagate; nothing is inserted then."""
        profile = CorpusProfile.CLEANED if cleaned else CorpusProfile.LINES
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
        pairs = cls.insert_sentences(trie, bigrams, lines, profile)
        logger.info("Loaded %d bigrams from %s (%s)", pairs, path, profile.value)
        return pairs

    @classmethod
    def load_default_dictionary(cls, trie: Trie) -> int:
        count = cls.insert_words(trie, DEFAULT_WORDS)
        logger.info("Loaded %d built-in words", count)
        return count

    @classmethod
    def load_default_corpus(cls, trie: Trie, bigrams: BigramTable) -> int:
        pairs = cls.insert_sentences(trie, bigrams, DEFAULT_SENTENCES)
        logger.info("Loaded %d built-in bigrams", pairs)
        return pairs
