"""Logging helpers for patitex.

Example:
    >>> from patitex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("math block opened at line %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``patitex`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("engine").name
        'patitex.engine'
    """
    if not (name == "patitex" or name.startswith("patitex.")):
        name = f"patitex.{name}"
    return logging.getLogger(name)
