from __future__ import annotations

"""Log levels and their rendered words.

Levels form a closed set. Every member must have an entry in `LEVEL_WORDS`;
`level_word` raises for anything else so that a new member added without a
word fails loudly the first time it is rendered.
"""

from enum import Enum
from typing import Dict, Tuple


class LogLevel(Enum):
    INFO = "info"
    DEBUG = "debug"
    WARNING = "warning"
    ERROR = "error"
    VERBOSE = "verbose"


LEVEL_WORDS: Dict[LogLevel, str] = {
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.VERBOSE: "VERBOSE",
}

# Ordered as declared; used by the reader to recognize level tokens
ALL_LEVEL_WORDS: Tuple[str, ...] = tuple(LEVEL_WORDS[lvl] for lvl in LogLevel)


def level_word(level: LogLevel) -> str:
    """Return the upper-case word rendered for `level`."""
    try:
        return LEVEL_WORDS[level]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unknown log level: {level!r}") from exc


__all__ = ["LogLevel", "LEVEL_WORDS", "ALL_LEVEL_WORDS", "level_word"]
