"""Display math blocks delimited by ``$$`` fences.

Two forms are recognized:

Same-line::

    $$x+y$$

Multi-line::

    $$
    \\begin{pmatrix}
    1 & 2
    \\end{pmatrix}
    $$

Content may also follow the opening fence or precede the closing fence
(``$$\\begin{vmatrix}`` ... ``\\end{vmatrix}$$``). A block with no closing
fence runs to the end of the document and keeps everything it captured.

The indentation baseline of an open block lives in the ParseContext as a
FenceState. Continuation lines are dedented by that baseline. A context
that reads FenceClosed while the engine still holds the block means it was
closed behind our back; the block then ends without taking the line.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from patitex.context import ContextKey
from patitex.nodes import MathBlock
from patitex.parsing.blocks.protocol import BlockState
from patitex.parsing.fence import FENCE_CHAR, MIN_FENCE_LENGTH, count_run, find_fence
from patitex.reader import CODE_INDENT
from patitex.segments import Segment, SegmentList
from patitex.utils.logger import get_logger
from patitex.utils.text import dedent_position, indent_width, is_blank

if TYPE_CHECKING:
    from patitex.context import ParseContext
    from patitex.location import SourceLocation
    from patitex.reader import BlockReader

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FenceClosed:
    """No math block is open."""


@dataclass(frozen=True, slots=True)
class FenceOpen:
    """A multi-line math block is open.

    Attributes:
        indent: Column of the opening fence, stripped from every
            continuation line.

    """

    indent: int


type FenceState = FenceClosed | FenceOpen

FENCE_CLOSED = FenceClosed()

MATH_FENCE_KEY = ContextKey("math_fence")


def get_fence_state(context: ParseContext) -> FenceState:
    """Current fence state; an absent entry reads as closed."""
    return context.get(MATH_FENCE_KEY, FENCE_CLOSED)


@dataclass(slots=True)
class MathBlockBuilder:
    """Mutable accumulator for a math block that is being parsed."""

    location: SourceLocation
    segments: SegmentList = field(default_factory=SegmentList)
    same_line: bool = False

    def build(self) -> MathBlock:
        return MathBlock(
            location=self.location,
            segments=self.segments.freeze(),
            same_line=self.same_line,
        )


class MathBlockParser:
    """Block parser for ``$$`` display math."""

    __slots__ = ()

    trigger: frozenset[str] | None = None
    can_interrupt_paragraph = True
    can_accept_indented_line = False
    is_paragraph = False

    def open(
        self, reader: BlockReader, context: ParseContext
    ) -> tuple[MathBlockBuilder, BlockState] | None:
        line, segment = reader.peek_line()
        pos = reader.block_offset()
        if pos is None or pos >= len(line) or line[pos] != FENCE_CHAR:
            return None

        run = count_run(line, pos)
        if run < MIN_FENCE_LENGTH:
            return None

        content_start = pos + run
        builder = MathBlockBuilder(location=reader.location())
        rest = line[content_start:]

        # $$$$ on its own: the run is both fences
        if run >= 2 * MIN_FENCE_LENGTH and is_blank(rest):
            builder.same_line = True
            return builder, BlockState.CLOSE

        closing = find_fence(line, content_start)
        if closing is not None:
            builder.same_line = True
            if closing.pos > content_start:
                builder.segments.append(
                    Segment(segment.start + content_start, segment.start + closing.pos)
                )
            return builder, BlockState.CLOSE

        context.set(MATH_FENCE_KEY, FenceOpen(indent=pos))
        if not is_blank(rest):
            builder.segments.append(Segment(segment.start + content_start, segment.stop))
        logger.debug("Opened math block at %s", builder.location)
        return builder, BlockState.CONTINUE | BlockState.NO_CHILDREN

    def continue_(
        self, builder: MathBlockBuilder, reader: BlockReader, context: ParseContext
    ) -> BlockState:
        match get_fence_state(context):
            case FenceOpen(indent=indent):
                pass
            case _:
                logger.debug("Math block at %s lost its fence state; closing", builder.location)
                return BlockState.CLOSE

        line, segment = reader.peek_line()

        # Closing fence at the start of the line
        width, first = indent_width(line)
        if width < CODE_INDENT:
            run = count_run(line, first)
            if run >= MIN_FENCE_LENGTH and is_blank(line[first + run :]):
                reader.advance(len(line))
                return BlockState.CLOSE

        # Closing fence after content: \end{pmatrix}$$
        closing = find_fence(line)
        if closing is not None:
            pos, padding = dedent_position(line, 0, indent)
            if closing.pos > pos:
                builder.segments.append(
                    Segment(segment.start + pos, segment.start + closing.pos, padding)
                )
            reader.advance(len(line))
            return BlockState.CLOSE

        pos, padding = dedent_position(line, 0, indent)
        builder.segments.append(Segment(segment.start + pos, segment.stop, padding))
        reader.advance_and_set_padding(len(line), padding)
        return BlockState.CONTINUE | BlockState.NO_CHILDREN

    def close(
        self, builder: MathBlockBuilder, reader: BlockReader, context: ParseContext
    ) -> MathBlock:
        context.delete(MATH_FENCE_KEY)
        return builder.build()
