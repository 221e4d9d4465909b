"""Logging setup for solidkit entry points."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "solidkit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; later calls only change the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)

    return logger
