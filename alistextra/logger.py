"""Logging setup for the alistextra command line tool."""

import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logger(name="alistextra", level=None, format_string=None):
    """
    Configure and return the project logger.

    level falls back to the LOG_LEVEL environment variable, then to WARNING.
    The handler is only attached once, so calling this again just returns the logger
    (with its level updated if one was given).
    """
    logger = logging.getLogger(name)
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    logger.setLevel(level.upper()) # ValueError on unknown names

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
