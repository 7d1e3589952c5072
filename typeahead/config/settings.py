"""
Central configuration for the Typeahead system.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from functools import lru_cache
from typing import Optional


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class AutocompleteSettings:
    """Default query parameters. Adjustable at runtime via RuntimeConfig."""

    # Maximum suggestions returned per prefix query
    max_suggestions: int = 5

    # Edit-distance bound used by fuzzy matching
    fuzzy_distance: int = 1

    # Hard cap for "did you mean" corrections
    corrections_limit: int = 5


@dataclass(frozen=True)
class DictionarySettings:
    """Where the vocabulary and bigram corpus come from."""

    # Primary word list. None means the built-in fallback dictionary.
    dictionary_path: Optional[Path] = None

    # Sentence corpus for bigrams. None means the built-in fallback sentences.
    corpus_path: Optional[Path] = None

    # Strip everything outside [a-z ] from corpus lines before counting
    cleaned_corpus: bool = False

    language: str = "en"

    # File name (inside the data dir) that runtime-added words are appended to
    user_dictionary_template: str = "user_dictionary_{language}.txt"


@dataclass(frozen=True)
class RateLimitSettings:
    """Settings for API rate limiting (token bucket)."""

    # Suggest / corrections endpoints
    query_bucket_capacity: int = 120
    query_refill_rate: float = 2.0  # tokens per second (= 120/min)

    # Word additions and config changes
    write_bucket_capacity: int = 30
    write_refill_rate: float = 0.5  # tokens per second (= 30/min)

    # Evict buckets not seen for this many seconds
    eviction_ttl: float = 600.0


@dataclass(frozen=True)
class WorkerSettings:
    """Settings for the background query worker."""

    name: str = "query-worker"

    # How long stop() waits for the worker thread to drain (seconds)
    stop_timeout: float = 5.0


@dataclass
class Settings:
    """
    Top-level settings container. Aggregates all subsystem settings.

    Usage:
        settings = get_settings()
        print(settings.autocomplete.max_suggestions)
    """

    project_root: Path = field(default_factory=_project_root)
    autocomplete: AutocompleteSettings = field(default_factory=AutocompleteSettings)
    dictionary: DictionarySettings = field(default_factory=DictionarySettings)
    rate_limit: RateLimitSettings = field(default_factory=RateLimitSettings)
    worker: WorkerSettings = field(default_factory=WorkerSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for all runtime data (user dictionaries, logs)."""
        return self.project_root / "data"

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    @property
    def user_dictionary_path(self) -> Path:
        """Plain-text file that runtime-added words are appended to."""
        name = self.dictionary.user_dictionary_template.format(
            language=self.dictionary.language,
        )
        return self.data_dir / name

    def with_sources(
        self,
        dictionary_path: Optional[Path] = None,
        corpus_path: Optional[Path] = None,
        cleaned_corpus: bool = False,
    ) -> "Settings":
        """Copy of these settings with command-line dictionary/corpus overrides applied."""
        ds = self.dictionary
        return replace(
            self,
            dictionary=replace(
                ds,
                dictionary_path=dictionary_path or ds.dictionary_path,
                corpus_path=corpus_path or ds.corpus_path,
                cleaned_corpus=cleaned_corpus or ds.cleaned_corpus,
            ),
        )

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
