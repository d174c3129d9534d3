"""Logging configuration for the gopdeps command line.

Called once at startup by the CLI. Library modules only do
``logger = logging.getLogger(__name__)`` and never configure logging.

Levels are resolved in precedence order:
    --log-level flag  >  GOPDEPS_LOG_LEVEL env var  >  WARNING
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "GOPDEPS_LOG_LEVEL"

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# WARNING and above: message only
_FMT_MINIMAL = "%(message)s"

# INFO: timestamp and logger name
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG: file:line diagnostics
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(flag: str | None = None) -> str:
    """Pick the effective level name from flag, environment or default."""
    if flag:
        return flag.upper()
    env = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if env:
        return env.upper()
    return "WARNING"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure the root logger for the whole process.

    Replaces any handlers already installed on the root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional path of a log file receiving full detail.
    """
    numeric_level = parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(file_handler)

    root.setLevel(numeric_level)


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
