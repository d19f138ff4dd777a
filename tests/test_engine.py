"""Tests for the block engine and the host block parsers."""

from dataclasses import dataclass

import pytest

from patitex import Markdown, parse
from patitex.errors import ParseError
from patitex.location import SourceLocation
from patitex.nodes import Heading, IndentedCode, MathBlock, Paragraph, Text
from patitex.parser import build_block_parsers
from patitex.config import ParseConfig
from patitex.parsing.blocks import (
    BlockEngine,
    BlockParser,
    BlockState,
    HeadingParser,
    IndentedCodeParser,
    MathBlockParser,
    ParagraphParser,
)
from patitex.parsing.inline import InlineParser

MD = Markdown(plugins=["math"])


@dataclass
class _Builder:
    location: SourceLocation


class BrokenParser:
    """Returns a state with neither CONTINUE nor CLOSE."""

    trigger = frozenset("!")
    can_interrupt_paragraph = False
    can_accept_indented_line = False
    is_paragraph = False

    def open(self, reader, context):
        return _Builder(reader.location()), BlockState.NO_CHILDREN

    def continue_(self, builder, reader, context):
        return BlockState.NO_CHILDREN

    def close(self, builder, reader, context):
        return Paragraph(location=builder.location, children=())


class TestBuildBlockParsers:
    def test_default_order(self) -> None:
        parsers = build_block_parsers(ParseConfig())
        assert [type(p) for p in parsers] == [IndentedCodeParser, HeadingParser, ParagraphParser]

    def test_plugin_parsers_before_paragraph(self) -> None:
        parsers = build_block_parsers(MD.config)
        assert isinstance(parsers[2], MathBlockParser)
        assert isinstance(parsers[-1], ParagraphParser)

    def test_parsers_satisfy_protocol(self) -> None:
        for parser in build_block_parsers(MD.config):
            assert isinstance(parser, BlockParser)


class TestParagraphs:
    def test_blank_line_separates(self) -> None:
        doc = parse("a\n\nb")
        assert [type(b) for b in doc.children] == [Paragraph, Paragraph]

    def test_lazy_continuation(self) -> None:
        doc = parse("a\n      b")
        assert len(doc.children) == 1
        assert doc.children[0].children[-1] == Text(location=doc.children[0].location, content="b")

    def test_empty_source(self) -> None:
        assert parse("").children == ()

    def test_only_blank_lines(self) -> None:
        assert parse("\n  \n\t\n").children == ()

    def test_crlf_lines(self) -> None:
        assert MD("a\r\nb\r\n") == "<p>a\nb</p>\n"


class TestHeadings:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels(self, level: int) -> None:
        heading = parse("#" * level + " Title").children[0]
        assert isinstance(heading, Heading)
        assert heading.level == level

    def test_seven_hashes_is_paragraph(self) -> None:
        assert isinstance(parse("####### x").children[0], Paragraph)

    def test_hash_without_space_is_paragraph(self) -> None:
        assert isinstance(parse("#hashtag").children[0], Paragraph)

    def test_empty_heading(self) -> None:
        heading = parse("#").children[0]
        assert isinstance(heading, Heading)
        assert heading.children == ()

    def test_interrupts_paragraph(self) -> None:
        doc = parse("text\n# Title")
        assert [type(b) for b in doc.children] == [Paragraph, Heading]

    def test_location(self) -> None:
        heading = parse("a\n\n## B").children[1]
        assert heading.location.lineno == 3


class TestIndentedCode:
    def test_basic(self) -> None:
        code = parse("    x = 1\n    y = 2").children[0]
        assert isinstance(code, IndentedCode)
        assert code.code == "x = 1\ny = 2\n"

    def test_cannot_interrupt_paragraph(self) -> None:
        doc = parse("text\n    more")
        assert [type(b) for b in doc.children] == [Paragraph]

    def test_trailing_blank_lines_dropped(self) -> None:
        code = parse("    x\n\n\n").children[0]
        assert code.code == "x\n"

    def test_tab_indent(self) -> None:
        assert parse("\tx").children[0].code == "x\n"

    def test_tab_inside_code_is_kept(self) -> None:
        assert parse("    \tx").children[0].code == "\tx\n"

    def test_ends_at_shallow_line(self) -> None:
        doc = parse("    x\ny")
        assert [type(b) for b in doc.children] == [IndentedCode, Paragraph]


class TestMathInterplay:
    def test_math_interrupts_paragraph(self) -> None:
        doc = MD.parse("text\n$$\nx\n$$\nmore")
        assert [type(b) for b in doc.children] == [Paragraph, MathBlock, Paragraph]

    def test_math_inside_code_stays_code(self) -> None:
        doc = MD.parse("    $$\n    x\n    $$")
        assert [type(b) for b in doc.children] == [IndentedCode]

    def test_math_disabled_fence_is_paragraph(self) -> None:
        doc = parse("$$\nx\n$$")
        assert [type(b) for b in doc.children] == [Paragraph]


class TestProtocolViolations:
    def _engine(self, source: str, **kwargs) -> BlockEngine:
        inline = InlineParser()
        return BlockEngine(source, [BrokenParser(), ParagraphParser(inline)], **kwargs)

    def test_bad_open_state_raises(self) -> None:
        with pytest.raises(ParseError, match="BrokenParser"):
            self._engine("!x").parse()

    def test_error_carries_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            self._engine("a\n\n!x", source_file="doc.md").parse()
        assert exc_info.value.lineno == 3
        assert exc_info.value.source_file == "doc.md"
        assert str(exc_info.value).startswith("doc.md:3 ")

    def test_trigger_filters_lines(self) -> None:
        blocks = self._engine("x!").parse()
        assert [type(b) for b in blocks] == [Paragraph]
