"""Logging helpers shared by all Satellite Watcher components."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

ROOT_LOGGER = 'satwatch'


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Attach a stream handler to the application's root logger.

    Safe to call more than once; the level is updated and no duplicate
    handler is added.

    Args:
        level: Logging level name or number (e.g. 'DEBUG', logging.INFO)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level)
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the application's namespace.

    Args:
        name: Dotted logger name, e.g. 'satwatch.passes'

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
