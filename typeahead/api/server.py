"""Uvicorn entrypoint for running the API server."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn

from typeahead.api.app import create_app
from typeahead.config.logging_config import setup_logging
from typeahead.config.settings import get_settings
from typeahead.errors import DictionaryLoadError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Typeahead API server.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port.")
    parser.add_argument("--dictionary", type=Path, default=None, help="Word list, one word per line.")
    parser.add_argument("--corpus", type=Path, default=None, help="Sentence corpus for bigram context.")
    parser.add_argument("--cleaned-corpus", action="store_true", help="Strip non-letters from corpus lines.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main() -> int:
    args = build_parser().parse_args()

    settings = get_settings().with_sources(args.dictionary, args.corpus, args.cleaned_corpus)
    setup_logging(log_dir=settings.logs_dir, verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        app = create_app(settings)
    except DictionaryLoadError as e:
        logger.error("%s", e)
        return 2

    logger.info("Starting API server on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
