"""
Prefix trie for autocomplete suggestions.

Each node is keyed by a lower-cased character and may mark the end of
an inserted word.  Terminal nodes carry an insertion count and the most
recently inserted spelling of the word (its canonical form), so lookups
are case-insensitive while results keep the user's casing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class TrieNode:
    """Single node in the trie."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False
    frequency: int = 0
    canonical: Optional[str] = None


@dataclass(frozen=True)
class Suggestion:
    """A single indexed word and how often it was inserted."""

    term: str
    frequency: int


def rank_key(s: Suggestion) -> tuple[int, str]:
    """Sort key: frequency descending, then canonical form ascending."""
    return (-s.frequency, s.term)


class Trie:
    """Frequency-counting prefix trie with ranked prefix retrieval."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def size(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def insert(self, word: Optional[str]) -> None:
        """
        Insert *word*, counting repeated insertions.

        The key path is the lower-cased word; the terminal node remembers
        the spelling used by the latest insertion.
        """
        if not word:
            return

        node = self._root
        for ch in word.lower():
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.canonical = word
        node.frequency += 1

    def search(self, word: Optional[str]) -> bool:
        """True if *word* (any casing) was inserted."""
        if not word:
            return False
        node = self.node_for(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: Optional[str]) -> bool:
        """True if any indexed word starts with *prefix*."""
        if not prefix:
            return False
        return self.node_for(prefix) is not None

    def node_for(self, prefix: str) -> Optional[TrieNode]:
        """Follow *prefix* from the root. Returns None when a character is missing."""
        node = self._root
        for ch in prefix.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def frequency_of(self, word: Optional[str]) -> int:
        if not word:
            return 0
        node = self.node_for(word)
        if node is None or not node.is_terminal:
            return 0
        return node.frequency

    def words_under(self, node: TrieNode) -> list[Suggestion]:
        """Every terminal node in the subtree rooted at *node*, unordered."""
        out: list[Suggestion] = []
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                out.append(Suggestion(term=current.canonical, frequency=current.frequency))
            stack.extend(current.children.values())
        return out

    def iter_words(self) -> Iterator[Suggestion]:
        """Yield every indexed word in the trie."""
        stack = [self._root]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                yield Suggestion(term=current.canonical, frequency=current.frequency)
            stack.extend(current.children.values())

    def get_suggestions(self, prefix: Optional[str], limit: Optional[int] = 10) -> list[Suggestion]:
        """
        Return up to *limit* words starting with *prefix*, most frequent
        first and alphabetical among equals. ``limit=None`` returns all.
        """
        if not prefix or (limit is not None and limit <= 0):
            return []

        node = self.node_for(prefix)
        if node is None:
            return []

        results = self.words_under(node)
        results.sort(key=rank_key)
        if limit is not None:
            results = results[:limit]
        logger.debug("Prefix %r matched %d words", prefix, len(results))
        return results
