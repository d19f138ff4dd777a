"""Zero-copy source segments.

A Segment points into the original source buffer instead of holding a copy
of the text. Block parsers that capture raw content (math blocks) append one
Segment per source line to a SegmentList while the block is open; the text is
only materialized when a renderer asks for it.

Example:
    >>> source = "$$\\n  a+b\\n$$\\n"
    >>> lines = SegmentList()
    >>> lines.append(Segment(5, 9))
    >>> lines.value(source)
    'a+b\\n'

Thread Safety:
Segment is frozen. SegmentList is owned by a single open block during a
parse and is frozen into a tuple when the block closes.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Segment:
    """Region ``source[start:stop]`` plus ``padding`` synthetic leading spaces.

    Padding is reinserted when a tab straddles the dedent baseline of a
    block: the part of the tab's width beyond the baseline survives as
    literal spaces.

    """

    start: int
    stop: int
    padding: int = 0

    def __post_init__(self) -> None:
        if self.start > self.stop:
            raise ValueError(f"Segment start {self.start} is after stop {self.stop}")
        if self.padding < 0:
            raise ValueError(f"Segment padding must be non-negative, got {self.padding}")

    def __len__(self) -> int:
        return self.stop - self.start + self.padding

    @property
    def is_empty(self) -> bool:
        return self.start == self.stop and self.padding == 0

    def value(self, source: str) -> str:
        """Materialize the segment text."""
        text = source[self.start : self.stop]
        if self.padding:
            return " " * self.padding + text
        return text


class SegmentList:
    """Append-only, ordered collection of segments.

    Insertion order is document order. Segments are never edited once
    appended; ``freeze()`` hands the finished sequence to an AST node.

    """

    __slots__ = ("_segments",)

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def append(self, segment: Segment) -> None:
        self._segments.append(segment)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def freeze(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def value(self, source: str) -> str:
        """Concatenate the text of every segment."""
        return "".join(seg.value(source) for seg in self._segments)
