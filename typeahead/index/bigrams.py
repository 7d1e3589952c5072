# bigrams.py
# Adjacent-word counts used to re-rank completions by the preceding word.

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, Mapping, Optional

_EMPTY: Mapping[str, int] = {}


class BigramTable:
    """
    prev word (lower-cased) -> Counter(next word -> occurrences).
    Counts only grow; there is no removal.
    """

    def __init__(self) -> None:
        self._chain: Dict[str, Counter] = defaultdict(Counter)

    def add_pair(self, prev: str, nxt: str, count: int = 1) -> None:
        if not prev or not nxt or count <= 0:
            return
        self._chain[prev.lower()][nxt] += count

    def add_tokens(self, tokens: Iterable[str]) -> int:
        """Count every adjacent pair of non-empty tokens. Returns pairs counted."""
        toks = [t for t in tokens if t]
        for a, b in zip(toks, toks[1:]):
            self._chain[a.lower()][b] += 1
        return max(0, len(toks) - 1)

    def next_words(self, prev: Optional[str]) -> Mapping[str, int]:
        """Followers of *prev*; empty mapping if it was never seen."""
        if not prev:
            return _EMPTY
        return self._chain.get(prev.lower(), _EMPTY)

    def weight(self, prev: Optional[str], nxt: str) -> int:
        """How often *nxt* followed *prev* (compared lower-cased)."""
        followers = self.next_words(prev)
        if not followers:
            return 0
        return followers.get(nxt.lower(), 0)

    def pair_count(self) -> int:
        """Total number of distinct (prev, next) pairs."""
        return sum(len(c) for c in self._chain.values())

    def __contains__(self, prev: object) -> bool:
        return isinstance(prev, str) and bool(self._chain.get(prev.lower()))

    def __len__(self) -> int:
        return len(self._chain)
