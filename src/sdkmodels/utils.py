"""Utility functions for sdkmodels."""

import logging
from typing import Optional, TextIO

from .constants import LOG_FORMAT, VERBOSE_LOG_FORMAT


def setup_logger(name: str = "sdkmodels", verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Return a logger with one stream handler, attached on first use.

    Verbose runs log at DEBUG and prefix each record with the logger name.

    Args:
        name: Logger name.
        verbose: If True, sets log level to DEBUG.
        stream: Handler stream for the first call; defaults to stderr.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(stream))

    formatter = logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT)
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
