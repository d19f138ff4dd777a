"""Inline parsing.

Handles text, backslash escapes, code spans, emphasis, strong, soft breaks
and inline math ($expression$).
"""

from patitex.parsing.inline.core import InlineParser
from patitex.parsing.inline.math import try_parse_math

__all__ = ["InlineParser", "try_parse_math"]
