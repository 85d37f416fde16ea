"""Logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "svg_markup2tspan"


def set_log_level(level: str | int) -> logging.Logger:
    """Set the level of the package logger and return it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Send package logs to stderr through rich. Safe to call more than once."""
    logger = set_log_level(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
