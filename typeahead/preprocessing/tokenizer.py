"""Line tokenization for dictionary and corpus loading."""

from __future__ import annotations

import re
import unicodedata
from enum import Enum

_NON_LETTER_RE = re.compile(r"[^a-z ]+")


class CorpusProfile(str, Enum):
    """Supported corpus tokenization profiles."""

    # Lower-case and split on whitespace; punctuation stays attached
    LINES = "lines"
    # Lower-case, drop everything outside [a-z ], then split
    CLEANED = "cleaned"


def normalize(text: str | None) -> str:
    """NFKC-normalise and lower-case *text*."""
    if not text:
        return ""
    return unicodedata.normalize("NFKC", text).lower()


def tokenize_line(line: str | None) -> list[str]:
    """Whitespace tokens of a lower-cased line. Characters are kept as written."""
    if not line:
        return []
    return line.lower().split()


def clean_line(line: str | None) -> list[str]:
    """Letter-only tokens of an NFKC-normalised, lower-cased line."""
    value = normalize(line).replace("\t", " ")
    value = _NON_LETTER_RE.sub("", value)
    return [t for t in value.split() if t]


def tokenize(line: str | None, profile: CorpusProfile) -> list[str]:
    if profile == CorpusProfile.CLEANED:
        return clean_line(line)
    return tokenize_line(line)
