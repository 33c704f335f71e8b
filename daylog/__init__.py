"""daylog: daily file logger.

Quick start::

    from daylog import get_logger, Builder

    log = get_logger(MyService)
    log.info("started")

    log = Builder().set_directory_name("MyApp").build()
    log.error("disk almost full")
"""

from .levels import LogLevel, level_word  # noqa: F401
from .logger import Builder, InvalidLogPathError, Logger, get_logger  # noqa: F401
from .time_format import DEFAULT_TIME_FORMAT, format_timestamp  # noqa: F401

__all__ = [
    "LogLevel",
    "level_word",
    "Builder",
    "InvalidLogPathError",
    "Logger",
    "get_logger",
    "DEFAULT_TIME_FORMAT",
    "format_timestamp",
]

# Settings files and log reading helpers
from .config import (  # noqa: F401
    BuilderSettings,
    builder_from_settings,
    load_builder,
    load_settings,
)
from .reader import (  # noqa: F401
    LogRecord,
    load_log_frame,
    parse_line,
    read_log_tail,
    read_records,
)
from .utils_logging import configure_logging  # noqa: F401

__all__ += [
    "BuilderSettings",
    "builder_from_settings",
    "load_builder",
    "load_settings",
    "LogRecord",
    "load_log_frame",
    "parse_line",
    "read_log_tail",
    "read_records",
    "configure_logging",
]

__version__ = "1.0.0"
