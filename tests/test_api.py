"""Tests for the public API: parse, render and Markdown."""

import patitex
from patitex import Markdown, MathBlock, Paragraph, parse, parse_config_context, render
from patitex.location import SourceLocation


class TestParse:
    def test_returns_document(self) -> None:
        doc = parse("hello")
        assert isinstance(doc, patitex.Document)
        assert isinstance(doc.children[0], Paragraph)

    def test_document_location_spans_source(self) -> None:
        doc = parse("a\nb", source_file="x.md")
        assert doc.location == SourceLocation(
            lineno=1, col_offset=1, offset=0, end_offset=3, source_file="x.md"
        )

    def test_uses_active_config(self) -> None:
        with parse_config_context(patitex.apply_plugins(["math"])):
            doc = parse("$$x$$")
        assert isinstance(doc.children[0], MathBlock)

    def test_render_round(self) -> None:
        assert render(parse("**a**")) == "<p><strong>a</strong></p>\n"


class TestMarkdown:
    def test_call(self) -> None:
        md = Markdown(plugins=["math"])
        assert md("$$\n1+2\n$$") == '<p><span class="math display">\\[1+2\n\\]</span></p>\n'

    def test_without_plugins(self) -> None:
        md = Markdown()
        assert md.plugins == []
        assert md("$$x$$") == "<p>$$x$$</p>\n"

    def test_parse_keeps_source_file(self) -> None:
        doc = Markdown(plugins=["math"]).parse("$$x$$", source_file="m.md")
        assert doc.children[0].location.source_file == "m.md"

    def test_parse_many(self) -> None:
        md = Markdown(plugins=["math"])
        docs = md.parse_many(["$$a$$", "text", "$b$"])
        assert [type(d.children[0]) for d in docs] == [MathBlock, Paragraph, Paragraph]
        assert docs[0].children[0].get_content("$$a$$") == "a"

    def test_parse_many_accepts_generator(self) -> None:
        md = Markdown(plugins=["math"])
        docs = md.parse_many(f"$${i}$$" for i in range(3))
        assert len(docs) == 3

    def test_math_block_lines(self) -> None:
        source = "$$\r\na\r\nb\r\n$$"
        block = Markdown(plugins=["math"]).parse(source).children[0]
        assert block.get_lines(source) == ("a", "b")

    def test_instances_are_independent(self) -> None:
        with_math = Markdown(plugins=["math"])
        without = Markdown()
        assert "math display" in with_math("$$x$$")
        assert "math display" not in without("$$x$$")


def test_version() -> None:
    assert patitex.__version__ == "0.1.0"


def test_all_exports_exist() -> None:
    for name in patitex.__all__:
        assert hasattr(patitex, name), name
