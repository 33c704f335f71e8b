from __future__ import annotations

"""
Helpers for reading log files written by `daylog.Logger`.

Functions provided:
- parse_line: split one rendered line into a `LogRecord`
- read_records: parse a whole file, folding continuation lines (messages
  with embedded newlines) into the preceding record
- load_log_frame: the same records as a pandas DataFrame
- read_log_tail: efficient tail with level/substring filters
- log_stats: basic file statistics
"""

import dataclasses
import functools
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Union

import pandas as pd

from .levels import ALL_LEVEL_WORDS
from .time_format import DEFAULT_TIME_FORMAT, pattern_to_regex


PathLike = Union[str, Path]

FRAME_COLUMNS = ["timestamp", "label", "level", "message"]

# Bytes read from the end of the file by read_log_tail
TAIL_WINDOW_BYTES = 128 * 1024


@dataclass(frozen=True)
class LogRecord:
    timestamp: str
    label: Optional[str]
    level: str
    message: str


@functools.lru_cache(maxsize=32)
def _line_regex(time_format: str) -> Pattern[str]:
    ts = pattern_to_regex(time_format)
    levels = "|".join(re.escape(w) for w in ALL_LEVEL_WORDS)
    # The label group is lazy-optional so "<ts> - INFO - ..." never reads
    # INFO as a label
    return re.compile(
        rf"^(?P<timestamp>{ts}) - (?:(?P<label>.*?) - )??(?P<level>{levels}) - (?P<message>.*)$",
        re.DOTALL,
    )


def _split_lines(text: str) -> List[str]:
    """Split on newline characters only; messages may hold other line breaks.

    One trailing carriage return per line is dropped to undo a CRLF platform
    newline.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def _record_from_match(m: "re.Match[str]") -> LogRecord:
    return LogRecord(
        timestamp=m.group("timestamp"),
        label=m.group("label") or None,
        level=m.group("level"),
        message=m.group("message"),
    )


def parse_line(line: str, time_format: str = DEFAULT_TIME_FORMAT) -> Optional[LogRecord]:
    """Parse a rendered line; return None when it is not a record start.

    The format is ambiguous when a label equals a level word: "<ts> - DEBUG -
    INFO - hi" reads as level DEBUG with message "INFO - hi", because the
    unlabelled reading is tried first.
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    m = _line_regex(time_format).match(line)
    return _record_from_match(m) if m is not None else None


def read_records(path: PathLike, time_format: str = DEFAULT_TIME_FORMAT) -> List[LogRecord]:
    """Parse every record in `path`; missing files yield an empty list."""
    path = Path(path)
    if not path.exists():
        return []
    pattern = _line_regex(time_format)
    records: List[LogRecord] = []
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
        text = fh.read()
    for raw in _split_lines(text):
        m = pattern.match(raw)
        if m is not None:
            records.append(_record_from_match(m))
        elif records:
            prev = records[-1]
            records[-1] = dataclasses.replace(prev, message=prev.message + "\n" + raw)
        # Text before the first record has no owner and is dropped
    return records


def load_log_frame(path: PathLike, time_format: str = DEFAULT_TIME_FORMAT) -> pd.DataFrame:
    """Return the records of `path` as a DataFrame.

    With the default time format the `timestamp` column is converted to
    datetimes; otherwise it is left as text.
    """
    records = read_records(path, time_format)
    df = pd.DataFrame([dataclasses.asdict(r) for r in records], columns=FRAME_COLUMNS)
    if time_format == DEFAULT_TIME_FORMAT:
        df["timestamp"] = pd.to_datetime(df["timestamp"], format="%Y-%m-%d %H:%M:%S,%f", errors="coerce")
    return df


def read_log_tail(
    path: PathLike,
    max_lines: int = 500,
    *,
    level: Optional[str] = None,
    contains: Optional[str] = None,
) -> List[str]:
    """Return up to the last `max_lines` lines of `path` with optional filters.

    Only the final `TAIL_WINDOW_BYTES` of the file are read. `level` keeps
    lines containing the level token (e.g. "ERROR"); `contains` is a plain
    substring filter applied afterwards.
    """
    path = Path(path)
    if not path.exists():
        return []
    size = path.stat().st_size
    start = max(0, size - TAIL_WINDOW_BYTES)
    with open(path, "rb") as fh:
        # The byte before the window tells whether its first line is whole
        if start > 0:
            fh.seek(start - 1)
            cut = fh.read(1) != b"\n"
        else:
            cut = False
        data = fh.read()
    lines = _split_lines(data.decode("utf-8", errors="ignore"))
    if cut and lines:
        lines = lines[1:]
    if level:
        token = f" - {level.upper()} - "
        lines = [ln for ln in lines if token in ln]
    if contains:
        lines = [ln for ln in lines if contains in ln]
    if max_lines > 0 and len(lines) > max_lines:
        return lines[-max_lines:]
    return lines


def log_stats(path: PathLike) -> Dict[str, Any]:
    """Return basic statistics about a log file."""
    path = Path(path)
    if not path.exists():
        return {"exists": False, "path": str(path)}
    st = path.stat()
    return {
        "exists": True,
        "size_bytes": int(st.st_size),
        "modified_epoch": float(st.st_mtime),
        "path": str(path),
    }


__all__ = [
    "LogRecord",
    "FRAME_COLUMNS",
    "parse_line",
    "read_records",
    "load_log_frame",
    "read_log_tail",
    "log_stats",
]
