"""
Logging configuration for the Typeahead system.

Console output goes to stderr so CLI results on stdout stay clean; a
rotating file under the data dir keeps the history.  Modules log through
``logging.getLogger(__name__)`` and inherit from the ``typeahead`` logger.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Mapping, Optional

PACKAGE_LOGGER = "typeahead"

# Handlers installed here carry this name prefix so a re-run can replace them
_HANDLER_PREFIX = "typeahead."

# Noisy sub-packages, unless verbose
DEFAULT_LEVELS: dict[str, int] = {
    "typeahead.jobs": logging.WARNING,
}

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_PREFIX + "console")
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_dir: Path, log_file: str, formatter: logging.Formatter) -> Optional[logging.Handler]:
    """Rotating file handler, or None if *log_dir* is not writable."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(PACKAGE_LOGGER).warning("Could not set up file logging: %s", e)
        return None
    handler.set_name(_HANDLER_PREFIX + "file")
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
    log_file: str = "typeahead.log",
    verbose: bool = False,
    levels: Mapping[str, int] | None = None,
) -> None:
    """
    Configure the ``typeahead`` logger tree.

    Args:
        log_dir: Directory for the rotating log file. None means console only.
        level: Level for the package logger.
        log_file: Name of the log file inside *log_dir*.
        verbose: Log everything at DEBUG and skip the per-package defaults.
        levels: Extra per-logger levels, applied after ``DEFAULT_LEVELS``.

    Calling it again replaces the handlers it installed earlier.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else level)

    overrides: dict[str, int] = {} if verbose else dict(DEFAULT_LEVELS)
    overrides.update(levels or {})
    for name in DEFAULT_LEVELS:
        # Undo defaults from an earlier non-verbose call
        logging.getLogger(name).setLevel(logging.NOTSET)
    for name, lvl in overrides.items():
        logging.getLogger(name).setLevel(lvl)

    for handler in list(package_logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    package_logger.addHandler(_console_handler(formatter))
    if log_dir is not None:
        file_handler = _file_handler(log_dir, log_file, formatter)
        if file_handler is not None:
            package_logger.addHandler(file_handler)
