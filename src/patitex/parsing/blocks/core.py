"""Block engine: the line loop behind every parse.

The engine owns the reader and the per-parse context and drives block
parsers through the open/continue/close protocol:

1. While a block is open, each line goes to its ``continue_``. A paragraph
   is first checked for interruption by parsers that allow it.
2. When a block reports CLOSE without consuming the line, the line is
   offered again to the openers. A consumed line is done.
3. With no block open, blank lines are skipped and every other line is
   offered to the parsers in priority order.
4. End of input force-closes whatever is still open. An unterminated block
   is not an error.

Thread Safety:
Each ``parse()`` call creates its own reader and context.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from patitex.context import ParseContext
from patitex.errors import ParseError
from patitex.nodes import Block
from patitex.parsing.blocks.protocol import BlockParser, BlockState
from patitex.reader import BlockReader
from patitex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class OpenBlock:
    """A block whose parser is still consuming lines."""

    parser: BlockParser
    builder: Any


class BlockEngine:
    """Run block parsers over a source buffer.

    Usage:
        >>> engine = BlockEngine("text\\n$$x$$", parsers)
        >>> blocks = engine.parse()

    Args:
        source: Markdown source text
        parsers: Block parsers in priority order
        source_file: Optional source file path for locations and errors

    """

    __slots__ = ("_source", "_source_file", "_parsers", "_interrupters")

    def __init__(
        self,
        source: str,
        parsers: Sequence[BlockParser],
        *,
        source_file: str | None = None,
    ) -> None:
        self._source = source
        self._source_file = source_file
        self._parsers = tuple(parsers)
        self._interrupters = tuple(p for p in self._parsers if p.can_interrupt_paragraph)

    def parse(self) -> list[Block]:
        """Parse the whole source into top-level blocks."""
        reader = BlockReader(self._source, self._source_file)
        context = ParseContext()
        blocks: list[Block] = []
        current: OpenBlock | None = None

        while not reader.at_end:
            line_start = reader.offset

            if current is not None:
                if current.parser.is_paragraph and not reader.is_blank_line():
                    opened = self._try_open(reader, context, self._interrupters)
                    if opened is not None:
                        blocks.append(current.parser.close(current.builder, reader, context))
                        current = self._accept(opened, reader, context, blocks)
                        reader.advance_line()
                        continue

                state = current.parser.continue_(current.builder, reader, context)
                self._check_state(state, current.parser, reader)
                if BlockState.CLOSE in state:
                    blocks.append(current.parser.close(current.builder, reader, context))
                    current = None
                    if reader.offset == line_start:
                        continue
                reader.advance_line()
                continue

            if reader.is_blank_line():
                reader.advance_line()
                continue

            opened = self._try_open(reader, context, self._parsers)
            if opened is None:
                logger.debug("No block parser accepted line %d; skipping", reader.lineno)
            else:
                current = self._accept(opened, reader, context, blocks)
            reader.advance_line()

        if current is not None:
            logger.debug(
                "Closing %s at end of input", type(current.parser).__name__
            )
            blocks.append(current.parser.close(current.builder, reader, context))

        return blocks

    def _try_open(
        self,
        reader: BlockReader,
        context: ParseContext,
        parsers: Sequence[BlockParser],
    ) -> tuple[BlockParser, Any, BlockState] | None:
        """Offer the current line to ``parsers``; first match wins."""
        offset = reader.block_offset()
        first_char: str | None = None
        if offset is not None:
            line, _ = reader.peek_line()
            first_char = line[offset]

        for parser in parsers:
            if offset is None and not parser.can_accept_indented_line:
                continue
            if parser.trigger is not None and (
                first_char is None or first_char not in parser.trigger
            ):
                continue
            result = parser.open(reader, context)
            if result is not None:
                builder, state = result
                self._check_state(state, parser, reader)
                return parser, builder, state
        return None

    def _accept(
        self,
        opened: tuple[BlockParser, Any, BlockState],
        reader: BlockReader,
        context: ParseContext,
        blocks: list[Block],
    ) -> OpenBlock | None:
        """Keep a newly opened block, or finish it at once on CLOSE."""
        parser, builder, state = opened
        if BlockState.CLOSE in state:
            blocks.append(parser.close(builder, reader, context))
            return None
        return OpenBlock(parser=parser, builder=builder)

    def _check_state(self, state: BlockState, parser: BlockParser, reader: BlockReader) -> None:
        if not state & (BlockState.CONTINUE | BlockState.CLOSE):
            raise ParseError(
                f"{type(parser).__name__} returned {state!r}, expected CONTINUE or CLOSE",
                lineno=reader.lineno,
                source_file=self._source_file,
            )
