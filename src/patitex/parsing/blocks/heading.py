"""ATX heading block parser.

Markdown: ``## Title ##``. One to six ``#`` followed by whitespace or the
end of the line; an optional closing sequence of ``#`` is dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, cast

from patitex.nodes import Heading
from patitex.parsing.blocks.protocol import BlockState
from patitex.parsing.fence import count_run

if TYPE_CHECKING:
    from patitex.context import ParseContext
    from patitex.location import SourceLocation
    from patitex.parsing.inline.core import InlineParser
    from patitex.reader import BlockReader

# Closing sequence: whitespace, then only #s, at the end of the content
_CLOSING_SEQUENCE = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")


@dataclass(slots=True)
class HeadingBuilder:
    location: SourceLocation
    level: int
    content: str


class HeadingParser:
    """Block parser for ATX headings."""

    __slots__ = ("_inline",)

    trigger: frozenset[str] | None = frozenset("#")
    can_interrupt_paragraph = True
    can_accept_indented_line = False
    is_paragraph = False

    def __init__(self, inline: InlineParser) -> None:
        self._inline = inline

    def open(
        self, reader: BlockReader, context: ParseContext
    ) -> tuple[HeadingBuilder, BlockState] | None:
        line, _ = reader.peek_line()
        pos = reader.block_offset()
        if pos is None or line[pos] != "#":
            return None

        level = count_run(line, pos, "#")
        if level > 6:
            return None
        after = pos + level
        if after < len(line) and line[after] not in " \t\r\n":
            return None

        content = line[after:].strip(" \t\r\n")
        content = _CLOSING_SEQUENCE.sub("", content)
        builder = HeadingBuilder(location=reader.location(), level=level, content=content)
        reader.advance(len(line))
        return builder, BlockState.CLOSE

    def continue_(
        self, builder: HeadingBuilder, reader: BlockReader, context: ParseContext
    ) -> BlockState:
        return BlockState.CLOSE

    def close(
        self, builder: HeadingBuilder, reader: BlockReader, context: ParseContext
    ) -> Heading:
        return Heading(
            location=builder.location,
            level=cast(Literal[1, 2, 3, 4, 5, 6], builder.level),
            children=self._inline.parse(builder.content, builder.location),
        )
