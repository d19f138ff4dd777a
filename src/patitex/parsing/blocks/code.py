"""Indented code block parser.

Lines indented four or more columns, outside a paragraph, form a code
block. This is also why a ``$$`` fence indented four columns never opens a
math block: the line belongs here instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from patitex.nodes import IndentedCode
from patitex.parsing.blocks.protocol import BlockState
from patitex.reader import CODE_INDENT
from patitex.utils.text import indent_position, indent_width, is_blank

if TYPE_CHECKING:
    from patitex.context import ParseContext
    from patitex.location import SourceLocation
    from patitex.reader import BlockReader


@dataclass(slots=True)
class IndentedCodeBuilder:
    location: SourceLocation
    lines: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> None:
        pos, padding = indent_position(line, 0, CODE_INDENT)
        self.lines.append(" " * padding + line[pos:])


class IndentedCodeParser:
    """Block parser for indented code."""

    __slots__ = ()

    trigger: frozenset[str] | None = None
    can_interrupt_paragraph = False
    can_accept_indented_line = True
    is_paragraph = False

    def open(
        self, reader: BlockReader, context: ParseContext
    ) -> tuple[IndentedCodeBuilder, BlockState] | None:
        line, _ = reader.peek_line()
        if is_blank(line) or indent_width(line)[0] < CODE_INDENT:
            return None
        builder = IndentedCodeBuilder(location=reader.location())
        builder.add_line(line)
        reader.advance(len(line))
        return builder, BlockState.CONTINUE | BlockState.NO_CHILDREN

    def continue_(
        self, builder: IndentedCodeBuilder, reader: BlockReader, context: ParseContext
    ) -> BlockState:
        line, _ = reader.peek_line()
        if not is_blank(line) and indent_width(line)[0] < CODE_INDENT:
            return BlockState.CLOSE
        builder.add_line(line)
        reader.advance(len(line))
        return BlockState.CONTINUE | BlockState.NO_CHILDREN

    def close(
        self, builder: IndentedCodeBuilder, reader: BlockReader, context: ParseContext
    ) -> IndentedCode:
        lines = builder.lines
        while lines and is_blank(lines[-1]):
            lines.pop()
        code = "".join(lines)
        if code and not code.endswith("\n"):
            code += "\n"
        return IndentedCode(location=builder.location, code=code)
