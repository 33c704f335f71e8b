from __future__ import annotations

"""Default log locations.

Resolves the per-user application-data root for the current platform and
the daily log file beneath it:

    <app-data-root>/<directory name or program name>/Log/YYYY-MM-DD.log
"""

import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .time_format import DATE_FILE_FORMAT, format_timestamp


LOG_SUBDIR = "Log"
LOG_SUFFIX = ".log"


def app_data_root() -> Path:
    """Return the per-user application-data directory for this platform."""
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def program_name() -> str:
    """Name of the running program, taken from the script path."""
    argv0 = sys.argv[0] if sys.argv else ""
    name = Path(argv0).stem if argv0 else ""
    # `python -c` and the interactive prompt leave no usable script name
    if not name or name in ("-c", "-"):
        return "python"
    return name


def log_file_name(now: datetime) -> str:
    return format_timestamp(now, DATE_FILE_FORMAT) + LOG_SUFFIX


def default_log_dir(directory_name: Optional[str] = None) -> Path:
    """Return `<root>/<name>/Log`, creating it when missing."""
    name = directory_name if directory_name else program_name()
    log_dir = app_data_root() / name / LOG_SUBDIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def default_log_file(directory_name: Optional[str], now: datetime) -> Path:
    """Return today's log file under the default location."""
    return default_log_dir(directory_name) / log_file_name(now)


__all__ = [
    "LOG_SUBDIR",
    "LOG_SUFFIX",
    "app_data_root",
    "program_name",
    "log_file_name",
    "default_log_dir",
    "default_log_file",
]
