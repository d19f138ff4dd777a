"""Block parsers and the engine that drives them."""

from patitex.parsing.blocks.code import IndentedCodeParser
from patitex.parsing.blocks.core import BlockEngine
from patitex.parsing.blocks.heading import HeadingParser
from patitex.parsing.blocks.math import FenceClosed, FenceOpen, MathBlockParser
from patitex.parsing.blocks.paragraph import ParagraphParser
from patitex.parsing.blocks.protocol import BlockParser, BlockState

__all__ = [
    "BlockEngine",
    "BlockParser",
    "BlockState",
    "FenceClosed",
    "FenceOpen",
    "HeadingParser",
    "IndentedCodeParser",
    "MathBlockParser",
    "ParagraphParser",
]
