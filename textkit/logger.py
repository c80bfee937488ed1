"""
Logging setup for textkit.

Every module asks `get_logger(__name__)` for a logger under the `textkit`
namespace. Importing the package only attaches a `NullHandler`; an
application that wants console output calls `configure_logging()` once.
"""

import logging
import sys
from typing import Optional

from . import config

ROOT_NAME = "textkit"

logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stdout handler to the root `textkit` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to
            the configured TEXTKIT_LOG_LEVEL

    Returns:
        The root `textkit` logger
    """
    level = (level or config.LOG_LEVEL).upper()
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(getattr(logging, level, logging.WARNING))
    root.handlers.clear()  # Remove existing handlers

    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the `textkit` namespace; never adds handlers."""
    if not name or name == ROOT_NAME:
        return logging.getLogger(ROOT_NAME)
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def reset_logger():
    """Put the root `textkit` logger back to its import-time state (useful for testing)."""
    root = logging.getLogger(ROOT_NAME)
    root.handlers.clear()
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)
