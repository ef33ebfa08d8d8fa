"""Minimal logging utilities for cssbuilder.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from cssbuilder.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Combining selectors")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "cssbuilder.".

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'cssbuilder.mymodule'
    """
    if not (name == "cssbuilder" or name.startswith("cssbuilder.")):
        name = f"cssbuilder.{name}"
    return logging.getLogger(name)
