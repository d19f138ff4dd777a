"""Whitespace and indentation arithmetic shared by block parsers.

Columns are visual: a tab advances to the next multiple of four.

Example:
    >>> indent_width("  \\tx")
    (4, 3)
    >>> indent_position("      x", 0, 2)
    (2, 0)
"""

from __future__ import annotations

TAB_STOP = 4

_BLANK_CHARS = frozenset(" \t\r\n\f\v")


def tab_width(column: int) -> int:
    """Width of a tab that starts at ``column``."""
    return TAB_STOP - column % TAB_STOP


def is_blank(text: str) -> bool:
    """True when ``text`` is empty or holds only whitespace."""
    return all(ch in _BLANK_CHARS for ch in text)


def indent_width(line: str, column: int = 0) -> tuple[int, int]:
    """Measure leading indentation.

    Args:
        line: Line text
        column: Visual column at which ``line`` starts

    Returns:
        (width, pos): visual width of the leading spaces and tabs, and the
        index of the first character that is neither.
    """
    width = 0
    pos = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += tab_width(column + width)
        else:
            break
        pos += 1
    return width, pos


def indent_position(line: str, column: int, width: int) -> tuple[int, int]:
    """Find where ``width`` columns of indentation end.

    Indentation beyond ``width`` is left in the line untouched.

    Args:
        line: Line text
        column: Visual column at which ``line`` starts
        width: Number of columns to strip

    Returns:
        (pos, padding): index of the first character to keep, and how many
        columns of a straddling tab lie beyond ``width`` and must be restored
        as spaces. A line with less indentation than ``width`` loses all of
        it and gets no padding.
    """
    if width == 0:
        return 0, 0
    w = 0
    for i, ch in enumerate(line):
        if ch == "\t":
            w += tab_width(column + w)
        elif ch == " ":
            w += 1
        else:
            return i, 0
        if w >= width:
            return i + 1, w - width
    return len(line), 0


def dedent_position(line: str, column: int, width: int) -> tuple[int, int]:
    """Skip all leading whitespace, owing back what lies beyond ``width``.

    Unlike ``indent_position`` the returned position is always the first
    non-whitespace character; indentation deeper than ``width`` comes back
    as padding instead of staying in the line. Tabs past the baseline are
    therefore restored as spaces.

    Example:
        >>> dedent_position("      x", 0, 2)
        (6, 4)
        >>> dedent_position("    $$", 0, 2)
        (4, 2)

    Returns:
        (pos, padding); ``(0, 0)`` when ``width`` is zero.
    """
    if width == 0:
        return 0, 0
    w, pos = indent_width(line, column)
    return pos, max(w - width, 0)
