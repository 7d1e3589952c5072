"""Engine package: thread-safe autocomplete facade."""

from typeahead.engine.engine import AutocompleteEngine

__all__ = ["AutocompleteEngine"]
