"""Logger configuration for the ledger tools."""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "timeledger"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


def setup_logger(level: int | str = logging.INFO) -> logging.Logger:
    """Replace the project logger's handlers with one stderr handler."""

    logger = logging.getLogger(LOGGER_NAME)
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    if isinstance(level, str):
        level = level.upper()
        if level == "WARN":
            level = "WARNING"
    logger.setLevel(level)
    return logger


LOGGER = logging.getLogger(LOGGER_NAME)


__all__ = ["LOGGER", "LOGGER_NAME", "LOG_FORMAT", "TRACE", "setup_logger"]
