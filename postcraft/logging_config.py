"""Logging setup shared by the library and the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "postcraft"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger with a Rich handler (idempotent)."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. ``get_logger("feeds")`` -> ``postcraft.feeds``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
