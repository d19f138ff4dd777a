"""Paragraph block parser.

Any non-blank line that no other parser claims starts a paragraph. Lines
keep joining it until a blank line or a block that may interrupt a
paragraph (heading, display math).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from patitex.nodes import Paragraph
from patitex.parsing.blocks.protocol import BlockState
from patitex.utils.text import is_blank

if TYPE_CHECKING:
    from patitex.context import ParseContext
    from patitex.location import SourceLocation
    from patitex.parsing.inline.core import InlineParser
    from patitex.reader import BlockReader


@dataclass(slots=True)
class ParagraphBuilder:
    location: SourceLocation
    lines: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> None:
        self.lines.append(line.strip(" \t\r\n"))


class ParagraphParser:
    """Block parser for paragraphs.

    Args:
        inline: Parser applied to the paragraph text when it closes

    """

    __slots__ = ("_inline",)

    trigger: frozenset[str] | None = None
    can_interrupt_paragraph = False
    can_accept_indented_line = False
    is_paragraph = True

    def __init__(self, inline: InlineParser) -> None:
        self._inline = inline

    def open(
        self, reader: BlockReader, context: ParseContext
    ) -> tuple[ParagraphBuilder, BlockState] | None:
        line, _ = reader.peek_line()
        if is_blank(line):
            return None
        builder = ParagraphBuilder(location=reader.location())
        builder.add_line(line)
        reader.advance(len(line))
        return builder, BlockState.CONTINUE | BlockState.HAS_CHILDREN

    def continue_(
        self, builder: ParagraphBuilder, reader: BlockReader, context: ParseContext
    ) -> BlockState:
        line, _ = reader.peek_line()
        if is_blank(line):
            return BlockState.CLOSE
        # Lazy continuation: indentation does not matter here
        builder.add_line(line)
        reader.advance(len(line))
        return BlockState.CONTINUE | BlockState.HAS_CHILDREN

    def close(
        self, builder: ParagraphBuilder, reader: BlockReader, context: ParseContext
    ) -> Paragraph:
        text = "\n".join(builder.lines)
        return Paragraph(
            location=builder.location,
            children=self._inline.parse(text, builder.location),
        )
