"""Logging setup shared by the search engine and the command line.

Searches log once when they start and once when they finish, never per
visited sequence, so the default INFO level stays quiet during long
exhaustive walks.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def parse_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` constant.

    Unknown names fall back to ``default``.
    """

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO) -> None:
    """Route all records to stderr with the search log format.

    Replaces any handler already installed on the root logger, so repeated
    CLI invocations in one process do not duplicate lines.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``selfdesc`` namespace; sets up defaults on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "selfdesc")
