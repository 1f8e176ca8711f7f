"""
Runtime settings for the GoF Patterns catalogue.

Settings come from environment variables with sensible defaults, so
demos stay runnable without any configuration while tests and users can
point file output somewhere else.
"""

import logging
import os
import tempfile
from typing import Optional

logger = logging.getLogger('GoFPatterns.Settings')

ENV_JOURNAL_PATH = 'GOFPATTERNS_JOURNAL_PATH'
ENV_MAGIC_SQUARE_ATTEMPTS = 'GOFPATTERNS_MAGIC_SQUARE_ATTEMPTS'
ENV_LOG_FILE = 'GOFPATTERNS_LOG_FILE'
ENV_LOG_LEVEL = 'GOFPATTERNS_LOG_LEVEL'

DEFAULT_MAGIC_SQUARE_ATTEMPTS = 100
DEFAULT_LOG_LEVEL = 'CRITICAL'
JOURNAL_FILE_NAME = 'journal_entries.txt'


def get_journal_path() -> str:
    """
    Get the file used by the single responsibility demo.

    Returns:
        str: Path from GOFPATTERNS_JOURNAL_PATH, or a file under the
        system temp directory.
    """
    path = os.getenv(ENV_JOURNAL_PATH)
    if path:
        return os.path.expanduser(path)
    return os.path.join(tempfile.gettempdir(), 'gofpatterns', JOURNAL_FILE_NAME)


def get_magic_square_attempts() -> int:
    """
    Get the maximum number of candidates the magic square facade tries.

    Invalid or non-positive values fall back to the default.
    """
    raw = os.getenv(ENV_MAGIC_SQUARE_ATTEMPTS)
    if raw is None:
        return DEFAULT_MAGIC_SQUARE_ATTEMPTS
    try:
        attempts = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer", ENV_MAGIC_SQUARE_ATTEMPTS, raw)
        return DEFAULT_MAGIC_SQUARE_ATTEMPTS
    if attempts < 1:
        logger.warning("Ignoring %s=%d, must be positive", ENV_MAGIC_SQUARE_ATTEMPTS, attempts)
        return DEFAULT_MAGIC_SQUARE_ATTEMPTS
    return attempts


def get_log_file() -> Optional[str]:
    """Get the debug log file path, or None when file logging is off."""
    return os.getenv(ENV_LOG_FILE) or None


def get_log_level() -> int:
    """
    Get the console log level.

    Returns:
        int: logging level constant; unknown names resolve to CRITICAL.
    """
    name = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.CRITICAL
    return level
