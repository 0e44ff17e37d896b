"""
Notice Board — Logging Configuration
======================================

What:  One place that configures stdlib logging for both entry points.
How:   `setup_logging()` installs a single stream handler on the root logger
       with a consistent format and quiets chatty third-party loggers.
Who:   The API lifespan (stdout, settings.log_level) and the terminal board
       (stderr, WARNING so log lines stay out of the rendered board).
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpcore", "httpx", "aiosqlite", "asyncio")


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger.

    Args:
        level:  Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Where log lines go; defaults to stdout (captured by Docker)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
