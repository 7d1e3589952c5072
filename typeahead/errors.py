"""Exception types raised across the Typeahead package."""

from __future__ import annotations


class TypeaheadError(Exception):
    """Base class for all Typeahead errors."""


class DictionaryLoadError(TypeaheadError):
    """The mandatory dictionary file could not be read."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Cannot load dictionary {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidConfigError(TypeaheadError, ValueError):
    """A runtime configuration value was rejected. Nothing was changed."""

    def __init__(self, key: str, value, reason: str) -> None:
        super().__init__(f"Invalid value for {key}: {value!r} ({reason})")
        self.key = key
        self.value = value
        self.reason = reason
