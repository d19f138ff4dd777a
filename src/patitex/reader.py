"""Line reader driving block parsing.

BlockReader walks the source one line at a time. Block parsers peek at the
current line, inspect it, and consume it with ``advance``; the engine moves
to the next line with ``advance_line``. Lines are returned with their
terminator so captured segments keep the original line structure.

Example:
    >>> reader = BlockReader("$$\\nx\\n$$")
    >>> reader.peek_line()
    ('$$\\n', Segment(start=0, stop=3, padding=0))
    >>> reader.advance_line()
    >>> reader.peek_line()[0]
    'x\\n'

Thread Safety:
Readers are single-use and belong to one parse.

"""

from __future__ import annotations

from patitex.location import SourceLocation
from patitex.segments import Segment
from patitex.utils.text import indent_width, is_blank

# Indentation at which a line stops being a block start and becomes code
CODE_INDENT = 4


class BlockReader:
    """Cursor over the lines of a source buffer."""

    __slots__ = (
        "_source",
        "_source_file",
        "_pos",
        "_line_start",
        "_line_end",
        "_lineno",
        "_padding",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_file = source_file
        self._lineno = 1
        self._padding = 0
        self._pos = 0
        self._line_start = 0
        self._line_end = self._find_line_end(0)

    def _find_line_end(self, start: int) -> int:
        newline = self._source.find("\n", start)
        if newline == -1:
            return len(self._source)
        return newline + 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def at_end(self) -> bool:
        return self._line_start >= len(self._source)

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def line_start(self) -> int:
        """Absolute offset where the current line begins."""
        return self._line_start

    @property
    def offset(self) -> int:
        """Absolute offset of the cursor."""
        return self._pos

    @property
    def padding(self) -> int:
        return self._padding

    def peek_line(self) -> tuple[str, Segment]:
        """Return the rest of the current line without consuming it."""
        seg = Segment(self._pos, self._line_end, self._padding)
        return self._source[self._pos : self._line_end], seg

    def advance(self, n: int) -> None:
        """Consume ``n`` characters of the current line."""
        self._pos = min(self._pos + n, self._line_end)
        self._padding = 0

    def advance_and_set_padding(self, n: int, padding: int) -> None:
        """Consume ``n`` characters, recording virtual leading padding."""
        self._pos = min(self._pos + n, self._line_end)
        self._padding = padding

    def advance_line(self) -> None:
        """Move to the start of the next line."""
        if self.at_end:
            return
        self._line_start = self._line_end
        self._pos = self._line_end
        self._line_end = self._find_line_end(self._line_end)
        self._padding = 0
        self._lineno += 1

    def is_blank_line(self) -> bool:
        line, _ = self.peek_line()
        return is_blank(line)

    def indent_width(self) -> tuple[int, int]:
        """Indentation of the unconsumed part of the line."""
        line, _ = self.peek_line()
        return indent_width(line, self._pos - self._line_start)

    def block_offset(self) -> int | None:
        """Index in the peeked line where a block construct may begin.

        None when the line is blank or indented by four or more columns; in
        the latter case only parsers that accept indented lines apply.
        """
        line, _ = self.peek_line()
        if is_blank(line):
            return None
        width, pos = indent_width(line, self._pos - self._line_start)
        if width >= CODE_INDENT:
            return None
        return pos

    def location(self) -> SourceLocation:
        """Location of the cursor."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._pos - self._line_start + 1,
            offset=self._pos,
            source_file=self._source_file,
        )
