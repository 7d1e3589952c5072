"""Preprocessing package: corpus line tokenization."""

from typeahead.preprocessing.tokenizer import CorpusProfile, clean_line, tokenize, tokenize_line

__all__ = ["CorpusProfile", "clean_line", "tokenize", "tokenize_line"]
