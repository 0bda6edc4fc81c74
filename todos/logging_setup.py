"""
Logging configuration for the todos server.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Send all logs to stdout. ``level`` applies to the ``todos`` loggers;
    third-party loggers stay at WARNING.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")

    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("todos").setLevel(level)
