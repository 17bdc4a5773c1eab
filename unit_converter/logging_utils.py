"""Logging helpers for the unit converter front-ends."""

import logging
import sys

from unit_converter import config


def setup_logger(level: str = None, name: str = "unit_converter") -> logging.Logger:
    """Configure the package logger; unknown level names fall back to WARNING."""
    level = (level or config.LOG_LEVEL).upper()
    resolved = logging.getLevelName(level)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.propagate = False

    # Replace stream handlers so repeated setup doesn't duplicate output.
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logger.addHandler(handler)

    if resolved == logging.WARNING and level != "WARNING":
        logger.warning("Unknown log level %r, using WARNING", level)
    return logger
