"""Minimal logging utilities for libhtml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from libhtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "libhtml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'libhtml.mymodule'
    """
    if not (name == "libhtml" or name.startswith("libhtml.")):
        name = f"libhtml.{name}"
    return logging.getLogger(name)
