"""Centralized logging configuration for the pipe generator.

Standard output is reserved for the rendered grid, so all log records go to standard error.

Usage:
    from logging_config import setup_logging
    setup_logging()  # Call once at startup
"""

from __future__ import annotations

import logging
import sys

from constants import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(level: int = logging.WARNING) -> None:
    """Configures the root logger with a single handler writing to standard error.

    Calling it again replaces the previously installed handler.

    Args:
        level: The minimum level of records that are written.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers (for re-initialization)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)
