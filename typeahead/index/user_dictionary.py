"""
Per-language file of words added at runtime.

Plain text, one word per line, appended on every addition and replayed
into the trie at start-up.  Failures here never reach the ranking core:
they are logged and reported as "nothing happened".
"""

from __future__ import annotations

import logging
from pathlib import Path

from typeahead.index.loader import DictionaryLoader
from typeahead.index.trie import Trie

logger = logging.getLogger(__name__)


class UserDictionary:
    """Append-only word list backing runtime additions."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_into(self, trie: Trie) -> int:
        """Replay saved words into *trie*. Returns 0 if the file is missing or unreadable."""
        if not self._path.exists():
            logger.info("No user dictionary at %s", self._path)
            return 0
        try:
            return DictionaryLoader.load_words(trie, self._path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read user dictionary %s: %s", self._path, e)
            return 0

    def append(self, word: str) -> bool:
        """Persist *word*. Returns False (and logs) when the write fails."""
        word = word.strip() if word else ""
        if not word:
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(word + "\n")
        except OSError as e:
            logger.warning("Could not write to user dictionary %s: %s", self._path, e)
            return False
        return True
