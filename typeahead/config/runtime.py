"""
Runtime-adjustable query parameters.

``RuntimeConfig`` is the single handle queries read their parameters
from.  Readers take an immutable ``QueryOptions`` snapshot, so a query
never sees half of an update.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Optional

from typeahead.config.settings import AutocompleteSettings
from typeahead.errors import InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryOptions:
    """Parameters for one suggestion or corrections query."""

    max_suggestions: int = 5
    fuzzy_distance: int = 1
    corrections_limit: int = 5

    @classmethod
    def from_settings(cls, ac: AutocompleteSettings) -> "QueryOptions":
        return cls(
            max_suggestions=ac.max_suggestions,
            fuzzy_distance=ac.fuzzy_distance,
            corrections_limit=ac.corrections_limit,
        )


def _parse_int(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool):
        raise InvalidConfigError(key, value, "expected an integer")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidConfigError(key, value, "expected an integer") from None
    if not isinstance(value, int):
        raise InvalidConfigError(key, value, "expected an integer")
    if value < minimum:
        raise InvalidConfigError(key, value, f"must be >= {minimum}")
    return value


class RuntimeConfig:
    """Thread-safe holder of the current QueryOptions."""

    def __init__(self, options: Optional[QueryOptions] = None) -> None:
        self._options = options or QueryOptions()
        self._lock = threading.Lock()

    def snapshot(self) -> QueryOptions:
        with self._lock:
            return self._options

    def update(
        self,
        max_suggestions: Any = None,
        fuzzy_distance: Any = None,
    ) -> QueryOptions:
        """
        Validate and apply new values. ``None`` leaves a value as is.

        Raises InvalidConfigError without changing anything if any value
        is rejected.  Numeric strings are accepted.
        """
        changes: dict[str, int] = {}
        if max_suggestions is not None:
            changes["max_suggestions"] = _parse_int("max_suggestions", max_suggestions, 1)
        if fuzzy_distance is not None:
            changes["fuzzy_distance"] = _parse_int("fuzzy_distance", fuzzy_distance, 0)

        with self._lock:
            if changes:
                self._options = replace(self._options, **changes)
                logger.info("Runtime config updated: %s", changes)
            return self._options
