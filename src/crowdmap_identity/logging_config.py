"""Logging setup for command-line entry points."""

import logging
import sys
from functools import lru_cache

from crowdmap_config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@lru_cache()
def configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the package log
    level taken from settings, and WARNING for noisy third-party loggers.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("crowdmap_identity").setLevel(log_level)
    logging.getLogger("crowdmap_config").setLevel(log_level)

    # SQL echo is controlled by SQL_ECHO, not the log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
