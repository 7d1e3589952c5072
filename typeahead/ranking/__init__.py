"""Ranking package: merge policy for suggestions and corrections."""

from typeahead.ranking.ranker import SuggestionRanker

__all__ = ["SuggestionRanker"]
