"""Index package: trie, fuzzy and phonetic lookup, bigram counts, loaders."""

from typeahead.index.bigrams import BigramTable
from typeahead.index.fuzzy import EditDistanceSearch, levenshtein
from typeahead.index.loader import DictionaryLoader
from typeahead.index.phonetic import PhoneticIndex, phonetic_code
from typeahead.index.trie import Suggestion, Trie, TrieNode
from typeahead.index.user_dictionary import UserDictionary

__all__ = [
    "BigramTable",
    "DictionaryLoader",
    "EditDistanceSearch",
    "PhoneticIndex",
    "Suggestion",
    "Trie",
    "TrieNode",
    "UserDictionary",
    "levenshtein",
    "phonetic_code",
]
