"""Open/continue/close protocol between the block engine and block parsers.

A block parser is a shared, stateless object. The engine offers each line
to ``open``; a parser that recognizes the line returns a mutable builder
and a BlockState. While the block is open, every following line goes to
``continue_`` with that builder. When the block ends, by the parser's own
decision or because the engine forces it (end of input, interruption),
``close`` turns the builder into a frozen AST node.

Thread Safety:
Parsers keep no per-parse state on themselves. Anything that must live
across lines goes in the builder or in the ParseContext.

"""

from __future__ import annotations

from enum import Flag, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from patitex.context import ParseContext
    from patitex.nodes import Block
    from patitex.reader import BlockReader


class BlockState(Flag):
    """Outcome of an open or continue step."""

    CONTINUE = auto()  # Block stays open for the next line
    CLOSE = auto()  # Block is complete
    HAS_CHILDREN = auto()  # Nested blocks may start inside
    NO_CHILDREN = auto()  # Raw content only


@runtime_checkable
class BlockParser(Protocol):
    """Contract every block parser implements.

    Attributes:
        trigger: Characters that may start the block (first non-blank
            character of the line), or None to be offered every line.
        can_interrupt_paragraph: Whether the block may start while a
            paragraph is open.
        can_accept_indented_line: Whether the block may start on a line
            indented four or more columns.
        is_paragraph: Whether this is the paragraph parser, which other
            blocks may interrupt.

    """

    trigger: frozenset[str] | None
    can_interrupt_paragraph: bool
    can_accept_indented_line: bool
    is_paragraph: bool

    def open(
        self, reader: BlockReader, context: ParseContext
    ) -> tuple[Any, BlockState] | None:
        """Try to start a block on the current line.

        Returns:
            (builder, state), or None when the line does not start this block.
        """
        ...

    def continue_(self, builder: Any, reader: BlockReader, context: ParseContext) -> BlockState:
        """Feed the next line to an open block."""
        ...

    def close(self, builder: Any, reader: BlockReader, context: ParseContext) -> Block:
        """Finish the block and return its node."""
        ...
