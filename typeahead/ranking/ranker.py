"""
Suggestion ranker: merges exact, fuzzy and phonetic candidates.

Two paths:

* context path: when the preceding word has bigram data, exact prefix
  matches that actually followed it are ordered by bigram count;
* regular path: exact matches first, topped up with fuzzy matches and
  then phonetic matches until the quota is reached.

The ranker only reads the index; callers own locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from typeahead.config.runtime import QueryOptions
from typeahead.index.bigrams import BigramTable
from typeahead.index.fuzzy import EditDistanceSearch
from typeahead.index.phonetic import PhoneticIndex
from typeahead.index.trie import Suggestion, Trie

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = QueryOptions()


def _merge(into: list[str], seen: set[str], terms: Iterable[str], quota: int) -> None:
    """Append unseen *terms* to *into* until it holds *quota* items."""
    for term in terms:
        if len(into) >= quota:
            return
        if term not in seen:
            seen.add(term)
            into.append(term)


def _terms(suggestions: list[Suggestion]) -> list[str]:
    return [s.term for s in suggestions]


class SuggestionRanker:
    """Compose trie, fuzzy and phonetic lookups into one ordered list."""

    def __init__(
        self,
        trie: Trie,
        bigrams: Optional[BigramTable] = None,
        fuzzy: Optional[EditDistanceSearch] = None,
        phonetic: Optional[PhoneticIndex] = None,
    ) -> None:
        self._trie = trie
        self._bigrams = bigrams if bigrams is not None else BigramTable()
        self._fuzzy = fuzzy or EditDistanceSearch(trie)
        self._phonetic = phonetic or PhoneticIndex(trie)

    def suggest(
        self,
        prefix: Optional[str],
        context: Optional[str] = None,
        options: QueryOptions = _DEFAULT_OPTIONS,
    ) -> list[str]:
        """Ranked completions for *prefix*, optionally conditioned on the previous word."""
        if not prefix:
            return []

        if context:
            ranked = self._context_suggestions(prefix, context, options)
            if ranked:
                logger.debug("Context %r ranked %d words for %r", context, len(ranked), prefix)
                return ranked

        return self._regular_suggestions(prefix, options)

    def corrections(
        self,
        prefix: Optional[str],
        options: QueryOptions = _DEFAULT_OPTIONS,
    ) -> list[str]:
        """Did-you-mean candidates: fuzzy then phonetic, at most corrections_limit."""
        if not prefix:
            return []

        limit = options.corrections_limit
        fuzzy = self._fuzzy.search(prefix, options.fuzzy_distance, limit)
        phonetic = self._phonetic.search(prefix, limit)

        out: list[str] = []
        seen: set[str] = set()
        _merge(out, seen, _terms(fuzzy), limit)
        _merge(out, seen, _terms(phonetic), limit)
        return out

    def _context_suggestions(
        self,
        prefix: str,
        context: str,
        options: QueryOptions,
    ) -> list[str]:
        followers = self._bigrams.next_words(context)
        if not followers:
            return []

        weighted = []
        for s in self._trie.get_suggestions(prefix, limit=None):
            weight = followers.get(s.term.lower(), 0)
            if weight > 0:
                weighted.append((weight, s.term))

        # Stable sort keeps frequency order among equal bigram counts
        weighted.sort(key=lambda x: x[0], reverse=True)
        return [term for _, term in weighted[: options.max_suggestions]]

    def _regular_suggestions(self, prefix: str, options: QueryOptions) -> list[str]:
        quota = options.max_suggestions
        exact = _terms(self._trie.get_suggestions(prefix, quota))
        if len(exact) >= quota:
            return exact

        out: list[str] = []
        seen: set[str] = set()
        _merge(out, seen, exact, quota)

        fuzzy = self._fuzzy.search(prefix, options.fuzzy_distance, quota - len(exact))
        _merge(out, seen, _terms(fuzzy), quota)

        if len(out) < quota:
            phonetic = self._phonetic.search(prefix, quota - len(out))
            _merge(out, seen, _terms(phonetic), quota)

        return out
