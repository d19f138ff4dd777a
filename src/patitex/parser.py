"""Parser front end.

Assembles the block parsers for the active ParseConfig and runs the block
engine over a source buffer.

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Parser instances are single-use

"""

from __future__ import annotations

from patitex.config import ParseConfig, get_parse_config
from patitex.nodes import Block
from patitex.parsing.blocks.code import IndentedCodeParser
from patitex.parsing.blocks.core import BlockEngine
from patitex.parsing.blocks.heading import HeadingParser
from patitex.parsing.blocks.paragraph import ParagraphParser
from patitex.parsing.blocks.protocol import BlockParser
from patitex.parsing.inline.core import InlineParser


def build_block_parsers(config: ParseConfig) -> tuple[BlockParser, ...]:
    """Block parsers for ``config`` in priority order.

    Indented code comes first so a line indented four columns can never
    start anything else; paragraphs come last and take whatever is left.
    """
    inline = InlineParser(math_enabled=config.math_enabled)
    return (
        IndentedCodeParser(),
        HeadingParser(inline),
        *config.block_parsers,
        ParagraphParser(inline),
    )


class Parser:
    """Parse Markdown source into a list of blocks.

    Usage:
        >>> with parse_config_context(ParseConfig(math_enabled=True)):
        ...     blocks = Parser("$$x+y$$").parse()

    Configuration:
        Read from ContextVar when the Parser is created; use
        set_parse_config() or parse_config_context() beforehand.

    """

    __slots__ = ("_source", "_source_file", "_config")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_file = source_file
        self._config = get_parse_config()

    def parse(self) -> list[Block]:
        engine = BlockEngine(
            self._source,
            build_block_parsers(self._config),
            source_file=self._source_file,
        )
        return engine.parse()
