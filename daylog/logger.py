from __future__ import annotations

"""
File logger with fluent construction.

Each call to one of the level methods renders a single line

    <timestamp> - [<label> - ]<LEVEL> - <message>

and appends it to the target file inside one open/append/close cycle,
holding the instance's write lock for the whole cycle.

Target resolution
- An explicit `file_path` wins. It must name an existing file (not a
  directory) at write time, otherwise `InvalidLogPathError` is raised and
  nothing is written.
- Otherwise the line goes to today's file under the default location
  (see `daylog.paths`), so output rolls into a new file after midnight.

The rendered line is also sent to the `daylog` stdlib logger at DEBUG level
for live observation. That side channel is best-effort.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from . import paths
from .levels import LogLevel, level_word
from .time_format import DEFAULT_TIME_FORMAT, format_timestamp


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class InvalidLogPathError(ValueError):
    """Raised when an explicit log file path is missing or is a directory."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(
            f"Invalid log file path '{path}': it must be an existing file, not a directory"
        )


def _now() -> datetime:
    return datetime.now()


def _type_name(type_: Any) -> Optional[str]:
    """Return the label for a class, a plain string, or an instance."""
    if type_ is None:
        return None
    if isinstance(type_, str):
        return type_
    if isinstance(type_, type):
        return type_.__name__
    return type(type_).__name__


def _emit_debug(line: str) -> None:
    try:
        logger.debug(line)
    except Exception:
        pass


class Logger:
    """Append leveled, timestamped lines to a log file.

    Instances are created through `get_logger` or `Builder.build`. Only the
    time format can change after construction.
    """

    def __init__(
        self,
        label: Optional[str] = None,
        time_format: Optional[str] = None,
        file_path: Optional[PathLike] = None,
        directory_name: Optional[str] = None,
    ) -> None:
        self._label = label or None
        self._time_format = time_format or DEFAULT_TIME_FORMAT
        self._file_path = Path(file_path) if file_path else None
        self._directory_name = directory_name or None
        self._lock = threading.Lock()

    @property
    def label(self) -> Optional[str]:
        return self._label

    @property
    def time_format(self) -> str:
        return self._time_format

    @property
    def file_path(self) -> Optional[Path]:
        return self._file_path

    @property
    def directory_name(self) -> Optional[str]:
        return self._directory_name

    def set_time_format(self, time_format: Optional[str]) -> "Logger":
        """Replace the timestamp pattern; empty values are ignored."""
        if time_format:
            self._time_format = time_format
        return self

    # --- Level methods ---
    def info(self, message: str) -> None:
        self._write(message, LogLevel.INFO)

    def debug(self, message: str) -> None:
        self._write(message, LogLevel.DEBUG)

    def warning(self, message: str) -> None:
        self._write(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self._write(message, LogLevel.ERROR)

    def verbose(self, message: str) -> None:
        self._write(message, LogLevel.VERBOSE)

    # --- Rendering and output ---
    def render(self, message: str, level: LogLevel, now: Optional[datetime] = None) -> str:
        """Return the line for `message` at `level` (without newline)."""
        when = now if now is not None else _now()
        prefix = format_timestamp(when, self._time_format) + " - "
        if self._label:
            prefix += self._label + " - "
        line = f"{prefix}{level_word(level)} - {message}"
        _emit_debug(line)
        return line

    def resolve_path(self, now: Optional[datetime] = None) -> Path:
        """Return the file the next line will be appended to.

        Creates the default log directory when no explicit path is set.
        """
        if self._file_path is not None:
            if not self._file_path.exists() or self._file_path.is_dir():
                raise InvalidLogPathError(self._file_path)
            return self._file_path
        when = now if now is not None else _now()
        return paths.default_log_file(self._directory_name, when)

    def _write(self, message: str, level: LogLevel) -> None:
        with self._lock:
            now = _now()
            target = self.resolve_path(now)
            line = self.render(message, level, now)
            with open(target, "a", encoding="utf-8") as fh:
                fh.write(line + "\n")

    def __repr__(self) -> str:
        return (
            f"Logger(label={self._label!r}, time_format={self._time_format!r}, "
            f"file_path={self._file_path!r}, directory_name={self._directory_name!r})"
        )


@dataclass
class Builder:
    """Chainable configuration for a `Logger`.

    No validation happens here; an unusable file path only surfaces when the
    built logger first writes.
    """

    label: Optional[Any] = None
    time_format: str = DEFAULT_TIME_FORMAT
    file_path: Optional[PathLike] = None
    directory_name: Optional[str] = None

    def __post_init__(self) -> None:
        self.label = _type_name(self.label)
        if not self.time_format:
            self.time_format = DEFAULT_TIME_FORMAT

    def set_time_format(self, time_format: Optional[str]) -> "Builder":
        if time_format:
            self.time_format = time_format
        return self

    def set_type(self, type_: Any) -> "Builder":
        """Set the label from a class (its name), a string, or None."""
        self.label = _type_name(type_)
        return self

    def set_file_path(self, file_path: Optional[PathLike]) -> "Builder":
        self.file_path = file_path
        return self

    def set_directory_name(self, directory_name: Optional[str]) -> "Builder":
        self.directory_name = directory_name
        return self

    def build(self) -> Logger:
        return Logger(
            label=self.label,
            time_format=self.time_format,
            file_path=self.file_path,
            directory_name=self.directory_name,
        )


def get_logger(type_: Any = None) -> Logger:
    """Quick logger labelled by `type_`, writing to the default location."""
    return Logger(label=_type_name(type_))


__all__ = ["InvalidLogPathError", "Logger", "Builder", "get_logger"]
