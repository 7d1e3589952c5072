"""
Typo-tolerant lookup over the prefix trie.

Walks the trie carrying one Levenshtein row per node: row[j] is the edit
distance between the path spelled so far and the first j characters of
the query.  Each edge extends the row by one character, so the whole
search shares work across words with a common prefix.

Emission is deliberately permissive: as soon as the path to a node is
within the bound of the *whole* query, every word below that node is a
candidate, however long it is.  Frequency ranking and the limit trim
the oversampling afterwards.
"""

from __future__ import annotations

import logging
from typing import Optional

from typeahead.index.trie import Suggestion, Trie, TrieNode, rank_key

logger = logging.getLogger(__name__)


def next_row(prev: list[int], ch: str, query: str) -> list[int]:
    """Extend a Levenshtein row by one trie edge labelled *ch*."""
    row = [prev[0] + 1]
    for j in range(1, len(query) + 1):
        insert = row[j - 1] + 1
        delete = prev[j] + 1
        replace = prev[j - 1] + (0 if query[j - 1] == ch else 1)
        row.append(min(insert, delete, replace))
    return row


def levenshtein(a: str, b: str) -> int:
    """Plain two-row edit distance between *a* and *b*."""
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for ch in a:
        prev = next_row(prev, ch, b)
    return prev[-1]


class EditDistanceSearch:
    """Bounded edit-distance search over a Trie."""

    def __init__(self, trie: Trie) -> None:
        self._trie = trie

    def search(
        self,
        query: Optional[str],
        max_distance: int = 1,
        limit: Optional[int] = 10,
    ) -> list[Suggestion]:
        """
        Return up to *limit* words whose trie path comes within
        *max_distance* edits of *query*, most frequent first.
        """
        if not query or max_distance < 0 or (limit is not None and limit <= 0):
            return []

        q = query.lower()
        found: dict[str, Suggestion] = {}

        stack: list[tuple[TrieNode, list[int]]] = [
            (self._trie.root, list(range(len(q) + 1)))
        ]
        while stack:
            node, row = stack.pop()

            if row[-1] <= max_distance:
                # Whole subtree qualifies; descendants would only re-emit it.
                for s in self._trie.words_under(node):
                    found.setdefault(s.term, s)
                continue

            # Row minima never decrease along a path, so nothing below can qualify.
            if min(row) > max_distance:
                continue

            for ch, child in node.children.items():
                stack.append((child, next_row(row, ch, q)))

        results = sorted(found.values(), key=rank_key)
        if limit is not None:
            results = results[:limit]
        logger.debug(
            "Fuzzy %r (<=%d) matched %d words", query, max_distance, len(results),
        )
        return results
