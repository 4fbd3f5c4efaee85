"""
Logging helpers for the events scraper.

Level precedence: LOG_LEVEL, then DEBUG if any debug flag is "1", then INFO.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEBUG_FLAGS = ("SCRAPER_DEBUG", "DEBUG")


def resolve_level() -> str:
    """Log level name taken from the environment."""
    level = os.getenv("LOG_LEVEL")
    if level:
        return level.upper()
    if any(os.getenv(flag) == "1" for flag in DEBUG_FLAGS):
        return "DEBUG"
    return "INFO"


def configure_logging() -> None:
    """Configure the root logger unless something else already did."""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=resolve_level(), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)


def is_debug() -> bool:
    return resolve_level() == "DEBUG"
