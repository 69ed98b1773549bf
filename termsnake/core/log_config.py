# termsnake/core/log_config.py

"""
Logging setup for termsnake.

curses owns the terminal while a game runs, so log records never go to the
console: they go to a file when one is configured and are discarded
otherwise.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger("termsnake")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def setup_package_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Configure the package logger, replacing any handlers from a previous call."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    logger.debug(f"Logging configured (level={level}, file={log_file})")
