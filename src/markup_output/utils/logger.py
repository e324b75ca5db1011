"""Minimal logging utilities for markup_output.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from markup_output.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "markup_output." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("renderers")
        >>> logger.name
        'markup_output.renderers'
    """
    if not (name == "markup_output" or name.startswith("markup_output.")):
        name = f"markup_output.{name}"
    return logging.getLogger(name)
