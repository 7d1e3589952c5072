"""
Autocomplete engine: the live index plus everything that mutates it.

Owns the trie, the bigram table, the runtime configuration and the user
dictionary.  One re-entrant lock covers every insert and every query, so
a query issued after ``add_word`` returns always sees the new word.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Any, Optional

from typeahead.config.runtime import QueryOptions, RuntimeConfig
from typeahead.config.settings import Settings, WorkerSettings, get_settings
from typeahead.errors import DictionaryLoadError
from typeahead.index.bigrams import BigramTable
from typeahead.index.loader import DictionaryLoader
from typeahead.index.trie import Trie
from typeahead.index.user_dictionary import UserDictionary
from typeahead.jobs.worker import QueryWorker
from typeahead.ranking.ranker import SuggestionRanker

logger = logging.getLogger(__name__)


class AutocompleteEngine:
    """Thread-safe facade over the index and ranker."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        bigrams: Optional[BigramTable] = None,
        config: Optional[RuntimeConfig] = None,
        user_dictionary: Optional[UserDictionary] = None,
        worker: Optional[QueryWorker] = None,
        worker_settings: Optional[WorkerSettings] = None,
    ) -> None:
        self._trie = trie or Trie()
        self._bigrams = bigrams if bigrams is not None else BigramTable()
        self._config = config or RuntimeConfig()
        self._user_dictionary = user_dictionary
        self._ranker = SuggestionRanker(self._trie, self._bigrams)
        self._lock = threading.RLock()
        self._worker = worker
        self._worker_settings = worker_settings or WorkerSettings()
        self._owns_worker = worker is None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        dictionary_path: Optional[Path] = None,
        corpus_path: Optional[Path] = None,
    ) -> "AutocompleteEngine":
        """
        Build an engine from configured sources.

        The primary dictionary must load if a path is given; the user
        dictionary and corpus are optional and fall back quietly.
        """
        settings = settings or get_settings()
        ds = settings.dictionary
        dictionary_path = dictionary_path or ds.dictionary_path
        corpus_path = corpus_path or ds.corpus_path

        trie = Trie()
        bigrams = BigramTable()

        if dictionary_path:
            try:
                DictionaryLoader.load_words(trie, Path(dictionary_path))
            except (OSError, UnicodeDecodeError) as e:
                raise DictionaryLoadError(dictionary_path, str(e)) from e
        else:
            DictionaryLoader.load_default_dictionary(trie)

        user_dictionary = UserDictionary(settings.user_dictionary_path)
        user_dictionary.load_into(trie)

        loaded_corpus = False
        if corpus_path:
            try:
                DictionaryLoader.load_corpus(trie, bigrams, Path(corpus_path), cleaned=ds.cleaned_corpus)
                loaded_corpus = True
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read corpus %s: %s; using built-in sentences", corpus_path, e)
        if not loaded_corpus:
            DictionaryLoader.load_default_corpus(trie, bigrams)

        engine = cls(
            trie=trie,
            bigrams=bigrams,
            config=RuntimeConfig(QueryOptions.from_settings(settings.autocomplete)),
            user_dictionary=user_dictionary,
            worker_settings=settings.worker,
        )
        logger.info("Engine ready: %d words, %d bigram heads", trie.size, len(bigrams))
        return engine

    @property
    def config(self) -> RuntimeConfig:
        return self._config

    # ---- queries ----

    def query(self, prefix: Optional[str], context: Optional[str] = None) -> list[str]:
        """Ranked suggestions for *prefix*, using *context* as the previous word."""
        options = self._config.snapshot()
        with self._lock:
            return self._ranker.suggest(prefix, context, options)

    def corrections(self, prefix: Optional[str]) -> list[str]:
        """Did-you-mean candidates for a prefix with no useful completions."""
        options = self._config.snapshot()
        with self._lock:
            return self._ranker.corrections(prefix, options)

    def contains(self, word: Optional[str]) -> bool:
        with self._lock:
            return self._trie.search(word)

    def frequency_of(self, word: Optional[str]) -> int:
        with self._lock:
            return self._trie.frequency_of(word)

    def query_async(self, prefix: Optional[str], context: Optional[str] = None) -> Future:
        """Run :meth:`query` on the background worker."""
        worker = self._ensure_worker()
        return worker.submit(self.query, prefix, context)

    # ---- mutation ----

    def add_word(self, word: Optional[str]) -> bool:
        """
        Insert *word* into the live index and persist it.

        Returns False for empty input.  A failed write to the user
        dictionary is logged; the in-memory insert still stands.
        """
        if not word or not word.strip():
            return False
        word = word.strip()
        with self._lock:
            self._trie.insert(word)
        if self._user_dictionary is not None:
            self._user_dictionary.append(word)
        logger.info("Added word %r", word)
        return True

    def add_sentence(self, sentence: str) -> int:
        """Feed one corpus line into the trie and bigram table."""
        with self._lock:
            return DictionaryLoader.insert_sentences(self._trie, self._bigrams, [sentence])

    def configure(self, max_suggestions: Any = None, fuzzy_distance: Any = None) -> QueryOptions:
        """Change query parameters. Raises InvalidConfigError and changes nothing on bad input."""
        return self._config.update(max_suggestions=max_suggestions, fuzzy_distance=fuzzy_distance)

    # ---- lifecycle ----

    def stats(self) -> dict:
        with self._lock:
            return {
                "word_count": self._trie.size,
                "bigram_heads": len(self._bigrams),
                "bigram_pairs": self._bigrams.pair_count(),
            }

    def shutdown(self) -> None:
        """Stop the background worker if this engine started it."""
        if self._worker is not None and self._owns_worker:
            self._worker.stop()

    def _ensure_worker(self) -> QueryWorker:
        with self._lock:
            if self._worker is None:
                self._worker = QueryWorker(self._worker_settings)
            if not self._worker.is_running:
                self._worker.start()
            return self._worker
