"""Logging configuration for the application."""

import logging
import sys
from typing import get_args

from viewcache.core.config import LogLevel, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


def setup_logging(level: str | None = None) -> None:
    """Configure application-wide logging.

    Level is the explicit argument, else settings.log_level, else DEBUG when
    settings.debug is True and INFO otherwise. Output goes to stdout.
    Cache HIT/MISS/SET lines are logged at DEBUG by the cache stores.

    Raises:
        ValueError: If level is not one of LOG_LEVELS (case-insensitive).
    """
    settings = get_settings()
    name = level.upper() if level else settings.log_level
    if name:
        if name not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"Unknown log level {level!r}; expected one of {expected}")
        log_level = logging.getLevelNamesMapping()[name]
    else:
        log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
