"""Logging for the engine, scoped to the ``calcudoku`` logger tree.

The engine is meant to be embedded in a host application, so configuration
touches only the package logger and leaves the root logger to the host.
"""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "calcudoku"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Send engine logs to stderr at ``level``.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the package tree.

    Names outside the tree are nested under it. Defaults are installed only
    when neither the host (root) nor the package logger has a handler.
    """

    package = logging.getLogger(PACKAGE_LOGGER)
    if not logging.getLogger().handlers and not package.handlers:
        configure_logging()
    if not name or name == PACKAGE_LOGGER:
        return package
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
