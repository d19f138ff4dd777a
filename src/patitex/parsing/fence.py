"""Dollar fence scanning.

A fence is a run of two or more ``$`` characters that is followed by nothing
but whitespace up to the end of the line. Both the opening and the
continuation side of the math block parser use ``find_fence`` so the two
agree on every edge case.

Example:
    >>> find_fence("x+y$$\\n")
    FenceRun(pos=3, length=2)
    >>> find_fence("$$x") is None
    True
"""

from __future__ import annotations

from typing import NamedTuple

from patitex.utils.text import is_blank

FENCE_CHAR = "$"
MIN_FENCE_LENGTH = 2


class FenceRun(NamedTuple):
    """Position and length of a fence run within a line."""

    pos: int
    length: int

    @property
    def end(self) -> int:
        return self.pos + self.length


def count_run(line: str, pos: int, char: str = FENCE_CHAR) -> int:
    """Length of the run of ``char`` starting at ``pos``."""
    end = pos
    line_len = len(line)
    while end < line_len and line[end] == char:
        end += 1
    return end - pos


def find_fence(line: str, start: int = 0) -> FenceRun | None:
    """Find the first blank-terminated fence at or after ``start``.

    Every run of ``$`` is consumed greedily. A run shorter than two, or one
    followed by non-blank text, is skipped as a whole and the scan resumes
    after it, so the loop always advances and terminates.

    Args:
        line: Line text, with or without its terminator
        start: Index to start scanning from

    Returns:
        FenceRun for the first valid fence, or None.
    """
    pos = line.find(FENCE_CHAR, start)
    while pos != -1:
        length = count_run(line, pos)
        end = pos + length
        if length >= MIN_FENCE_LENGTH and is_blank(line[end:]):
            return FenceRun(pos, length)
        pos = line.find(FENCE_CHAR, end)
    return None
