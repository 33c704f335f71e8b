from __future__ import annotations

"""Logging utilities.

Every rendered line is also sent to the `daylog` stdlib logger at DEBUG
level. `configure_logging` attaches a console handler to that logger so the
lines can be watched live. It only touches the `daylog` logger, never the
root logger, and is safe to call more than once.
"""

import logging
from typing import IO, Optional


PACKAGE_LOGGER = "daylog"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_HANDLER_ATTR = "_daylog_console"


def configure_logging(debug: bool = False, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Attach (or retune) the console handler of the `daylog` logger.

    - Uses DEBUG level if `debug=True` (shows every rendered line), otherwise
      WARNING so the side channel stays quiet
    - `stream` defaults to stderr, as for `logging.StreamHandler`
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if debug else logging.WARNING

    handler = next((h for h in log.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is not None and stream is not None and handler.stream is not stream:
        log.removeHandler(handler)
        handler = None
    if handler is None:
        handler = logging.StreamHandler(stream)
        setattr(handler, _HANDLER_ATTR, True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    handler.setLevel(level)
    log.setLevel(level)
    return log
