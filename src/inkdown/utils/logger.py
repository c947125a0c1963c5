"""Minimal logging utilities for inkdown.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from inkdown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``inkdown``.

    Example:
        >>> get_logger("mymodule").name
        'inkdown.mymodule'
        >>> get_logger("inkdown.parser").name
        'inkdown.parser'
    """
    if not (name == "inkdown" or name.startswith("inkdown.")):
        name = f"inkdown.{name}"
    return logging.getLogger(name)
