"""Autocomplete CLI: query suggestions, corrections and add words."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from typeahead.config.logging_config import setup_logging
from typeahead.config.settings import Settings, get_settings
from typeahead.engine.engine import AutocompleteEngine
from typeahead.errors import DictionaryLoadError, InvalidConfigError
from typeahead.index.fuzzy import levenshtein
from typeahead.index.phonetic import phonetic_code


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dictionary", type=Path, default=None, help="Word list, one word per line.")
    common.add_argument("--corpus", type=Path, default=None, help="Sentence corpus for bigram context.")
    common.add_argument("--cleaned-corpus", action="store_true", help="Strip non-letters from corpus lines.")
    common.add_argument("--max-suggestions", type=int, default=None, help="Max suggestions per query.")
    common.add_argument("--fuzzy-distance", type=int, default=None, help="Edit-distance bound for fuzzy matches.")

    parser = argparse.ArgumentParser(description="Autocomplete tools.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command")

    query = sub.add_parser("query", parents=[common], help="Suggest completions for a prefix.")
    query.add_argument("prefix", help="Prefix to complete.")
    query.add_argument("--context", default=None, help="Previous word, for bigram ranking.")

    corrections = sub.add_parser("corrections", parents=[common], help="Did-you-mean candidates.")
    corrections.add_argument("prefix", help="Misspelled prefix.")

    add = sub.add_parser("add", parents=[common], help="Add a word to the user dictionary.")
    add.add_argument("word", help="Word to add.")

    phonetic = sub.add_parser("phonetic", help="Print the phonetic code of a word.")
    phonetic.add_argument("word", help="Word to encode.")

    distance = sub.add_parser("distance", help="Print the edit distance between two words.")
    distance.add_argument("first", help="First word.")
    distance.add_argument("second", help="Second word.")

    return parser


def _print_numbered(header: str, items: list[str]) -> None:
    print(header)
    for i, item in enumerate(items, start=1):
        print(f"  {i}. {item}")


def run(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "phonetic":
        print(phonetic_code(args.word))
        return 0
    if args.command == "distance":
        # Same case folding as the index
        print(levenshtein(args.first.lower(), args.second.lower()))
        return 0

    settings = settings.with_sources(args.dictionary, args.corpus, args.cleaned_corpus)
    try:
        engine = AutocompleteEngine.from_settings(settings)
    except DictionaryLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        engine.configure(max_suggestions=args.max_suggestions, fuzzy_distance=args.fuzzy_distance)
    except InvalidConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        if args.command == "query":
            suggestions = engine.query_async(args.prefix, args.context).result()
            if suggestions:
                _print_numbered(f"Suggestions for '{args.prefix}':", suggestions)
                return 0
            corrections = engine.corrections(args.prefix)
            if corrections:
                _print_numbered("Did you mean:", corrections)
            else:
                print("No suggestions or corrections.")
            return 0

        if args.command == "corrections":
            corrections = engine.corrections(args.prefix)
            if corrections:
                _print_numbered("Did you mean:", corrections)
            else:
                print("No corrections.")
            return 0

        if args.command == "add":
            if not engine.add_word(args.word):
                print("error: word must not be blank", file=sys.stderr)
                return 2
            print(f"'{args.word.strip()}' added to dictionary")
            return 0
    finally:
        engine.shutdown()

    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, level=logging.WARNING, verbose=args.verbose)
    return run(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
