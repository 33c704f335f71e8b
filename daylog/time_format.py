from __future__ import annotations

"""Timestamp rendering for log lines.

Two pattern styles are accepted:

- Token patterns such as ``"YYYY-MM-DD HH:mm:ss,SSS"`` (the default). Tokens
  are matched longest-first; every other character is copied literally.
- Plain ``strftime`` patterns. Any pattern containing ``%`` is handed to
  ``datetime.strftime`` unchanged.

Supported tokens:

    YYYY / yyyy   4-digit year        YY / yy   2-digit year
    MM            2-digit month       DD / dd   2-digit day
    HH            24-hour hour        hh        12-hour hour
    mm            minute              ss        second
    SSS / fff     milliseconds        tt        AM or PM
"""

import re
from datetime import datetime
from typing import Callable, Dict


DEFAULT_TIME_FORMAT = "YYYY-MM-DD HH:mm:ss,SSS"
DATE_FILE_FORMAT = "YYYY-MM-DD"


def _hour12(dt: datetime) -> int:
    h = dt.hour % 12
    return 12 if h == 0 else h


_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "yyyy": lambda dt: f"{dt.year:04d}",
    "YY": lambda dt: f"{dt.year % 100:02d}",
    "yy": lambda dt: f"{dt.year % 100:02d}",
    "MM": lambda dt: f"{dt.month:02d}",
    "DD": lambda dt: f"{dt.day:02d}",
    "dd": lambda dt: f"{dt.day:02d}",
    "HH": lambda dt: f"{dt.hour:02d}",
    "hh": lambda dt: f"{_hour12(dt):02d}",
    "mm": lambda dt: f"{dt.minute:02d}",
    "ss": lambda dt: f"{dt.second:02d}",
    "SSS": lambda dt: f"{dt.microsecond // 1000:03d}",
    "fff": lambda dt: f"{dt.microsecond // 1000:03d}",
    "tt": lambda dt: "AM" if dt.hour < 12 else "PM",
}

# Longest tokens first so "YYYY" wins over "YY"
_TOKEN_RE = re.compile("|".join(re.escape(t) for t in sorted(_TOKENS, key=len, reverse=True)))


def format_timestamp(dt: datetime, pattern: str) -> str:
    """Render `dt` according to `pattern` (token or strftime style)."""
    if not pattern:
        raise ValueError("Time format must be a non-empty string")
    if "%" in pattern:
        return dt.strftime(pattern)
    return _TOKEN_RE.sub(lambda m: _TOKENS[m.group(0)](dt), pattern)


_STRFTIME_RE = re.compile(r"%(.)", re.DOTALL)

_STRFTIME_DIRECTIVES: Dict[str, str] = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "H": r"\d{2}",
    "I": r"\d{2}",
    "M": r"\d{2}",
    "S": r"\d{2}",
    "f": r"\d{6}",
    "j": r"\d{3}",
    "p": r"[^\W\d_]+",
    "a": r"[^\W\d_]+",
    "A": r"[^\W\d_]+",
    "b": r"[^\W\d_]+",
    "B": r"[^\W\d_]+",
    "z": r"(?:[+-]\d{4})?",
    "%": "%",
}


def _strftime_to_regex(pattern: str) -> str:
    out = []
    pos = 0
    for m in _STRFTIME_RE.finditer(pattern):
        out.append(re.escape(pattern[pos : m.start()]))
        # Directives without a fixed shape match lazily
        out.append(_STRFTIME_DIRECTIVES.get(m.group(1), r".+?"))
        pos = m.end()
    out.append(re.escape(pattern[pos:]))
    return "".join(out)


def pattern_to_regex(pattern: str) -> str:
    """Return a regular expression source matching timestamps of `pattern`.

    Used to recognize the timestamp segment when reading log files back.
    Token patterns map every token to a fixed shape. For strftime patterns
    the numeric directives (%Y %y %m %d %H %I %M %S %f %j), names (%a %A %b
    %B %p) and %z are mapped; any other directive falls back to a lazy
    `.+?`, which can split wrongly when the rendered value contains " - ".
    """
    if "%" in pattern:
        return _strftime_to_regex(pattern)
    out = []
    pos = 0
    for m in _TOKEN_RE.finditer(pattern):
        out.append(re.escape(pattern[pos : m.start()]))
        tok = m.group(0)
        if tok in ("YYYY", "yyyy"):
            out.append(r"\d{4}")
        elif tok in ("SSS", "fff"):
            out.append(r"\d{3}")
        elif tok == "tt":
            out.append(r"(?:AM|PM)")
        else:
            out.append(r"\d{2}")
        pos = m.end()
    out.append(re.escape(pattern[pos:]))
    return "".join(out)


__all__ = ["DEFAULT_TIME_FORMAT", "DATE_FILE_FORMAT", "format_timestamp", "pattern_to_regex"]
