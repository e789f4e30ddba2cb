"""Logging setup for applications embedding the engine.

Library modules only create `logging.getLogger(__name__)` loggers; calling
`configure_logging` is left to the application.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Logging level as int or name ("DEBUG", "INFO", ...).
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    # Replace rather than stack handlers when called repeatedly
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
