"""StringBuilder for O(n) string accumulation.

Renderers append fragments to a list and join once at the end instead of
concatenating strings repeatedly.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("\\\\[").append("x+y").append("\\\\]").build()
        '\\\\[x+y\\\\]'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append ``s``; empty strings are skipped."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of parts, not characters."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
