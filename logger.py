"""
Logging setup for the app.

``setup_logger`` configures the root logger once, at app start-up; every
module then logs through ``logging.getLogger(__name__)``.
"""

import logging
import sys
from logging import Logger, StreamHandler
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str = "dailyspends", level: str = "INFO") -> Logger:
    """
    Configure logging to stdout and return a named logger.

    ``level`` is a level name such as "DEBUG" or "error"; unknown names fall
    back to INFO.
    """
    log_levels: dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    log_level = log_levels.get(str(level).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
        force=True,
    )

    return logging.getLogger(name)
