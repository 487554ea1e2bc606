"""
Logging setup shared by the CGI, JSON and HTTP entry points.

In CGI mode stdout is the HTTP response, so `main.run()` and
`main.print_json()` route log records to stderr, where web servers collect
them into their error log. The uvicorn server keeps the default stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"

# Libraries whose INFO chatter drowns out the checker's own records
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Attach one stream handler to the root logger.

    Later calls are no-ops, so every entry point may call this safely.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper())
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
