"""Inline ``$...$`` math.

The inline scanner is the stateless peer of the display math block parser.
It runs over the joined text of a paragraph or heading, so inline math may
continue across a soft line break (``$a\\nb$``).
"""

from __future__ import annotations

from patitex.location import SourceLocation
from patitex.nodes import Math


def try_parse_math(text: str, pos: int, location: SourceLocation) -> tuple[Math, int] | None:
    """Try to parse inline math at position.

    Syntax: $expression$ (``$$`` belongs to block math and is rejected)

    Returns (Math, new_position) or None if not valid math.
    """
    if text[pos] != "$":
        return None

    text_len = len(text)

    if pos + 1 < text_len and text[pos + 1] == "$":
        return None

    content_start = pos + 1
    dollar_close = text.find("$", content_start)
    if dollar_close == -1:
        return None

    content = text[content_start:dollar_close]
    if not content:
        return None

    # $ a $ reads as prose with dollar signs, not math
    if len(content) > 1 and content[0] == " " and content[-1] == " ":
        return None

    return Math(location=location, content=content), dollar_close + 1
