"""Logging configuration for the console entry point.

Log records go to stderr so they never interleave with the inventory
listings the CLI writes to stdout.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HANDLER_NAME = "warehouse-console"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach a single stderr handler to the root logger.

    Calling this again replaces the handler installed by the previous
    call instead of adding a second one.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
