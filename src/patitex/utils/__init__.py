"""Utility helpers for patitex."""

from patitex.utils.logger import get_logger
from patitex.utils.text import (
    dedent_position,
    indent_position,
    indent_width,
    is_blank,
    tab_width,
)

__all__ = [
    "dedent_position",
    "get_logger",
    "indent_position",
    "indent_width",
    "is_blank",
    "tab_width",
]
