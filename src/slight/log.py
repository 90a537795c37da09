from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "slight"
LEVEL_ENV = "SLIGHT_LOG_LEVEL"


class SlightFormatter(logging.Formatter):
    """Format: ``slight: {level[0]} {module}: {message}``"""

    def format(self, record: logging.LogRecord) -> str:
        module = record.name.split(".")[-1]
        return f"{LOGGER_NAME}: {record.levelname[0]} {module}: {record.getMessage()}"


def setup(verbose: bool = False, stream=None) -> logging.Logger:
    """Configure the package logger; safe to call more than once.

    Level is DEBUG when verbose, else $SLIGHT_LOG_LEVEL, else WARNING.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv(LEVEL_ENV, "WARNING")
        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(SlightFormatter())
    logger.addHandler(handler)
    return logger
