"""Error-path and malformed input tests.

Malformed math never raises; it degrades to text. Errors are reserved for
broken parser plugins, unrenderable nodes and unknown plugins.
"""

import pytest

from patitex import Markdown, parse, render
from patitex.errors import ParseError, PatitexError, PluginError, RenderError
from patitex.location import SourceLocation
from patitex.nodes import Document, MathBlock
from patitex.segments import Segment

MD = Markdown(plugins=["math"])

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected state")
        assert str(err) == "unexpected state"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad state", lineno=42)
        assert str(err) == "42 bad state"

    def test_with_line_and_column(self) -> None:
        err = ParseError("bad state", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.md")
        assert str(err) == "test.md:1:1 error"

    def test_is_patitex_error(self) -> None:
        assert isinstance(ParseError("x"), PatitexError)
        assert isinstance(RenderError("x"), PatitexError)
        assert isinstance(PluginError("p", "x"), PatitexError)


# =========================================================================
# Malformed math degrades to text
# =========================================================================


class TestMalformedMath:
    @pytest.mark.parametrize(
        "source",
        [
            "$",
            "$$",
            "$$$",
            "$$\n",
            "$ $",
            "$$x$",
            "x $$ y",
            "\\$$x$$",
            "$$\n$",
            "$$\n\n\n",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        assert isinstance(MD(source), str)

    def test_unterminated_block_runs_to_end(self) -> None:
        doc = MD.parse("$$\na\n\nb")
        assert len(doc.children) == 1
        assert doc.children[0].get_content("$$\na\n\nb") == "a\n\nb"

    def test_lone_fence_is_empty_block(self) -> None:
        doc = MD.parse("$$")
        block = doc.children[0]
        assert isinstance(block, MathBlock)
        assert block.segments == ()
        assert not block.same_line


# =========================================================================
# Rendering errors
# =========================================================================


class TestRenderErrors:
    def test_math_block_without_source(self) -> None:
        doc = MD.parse("$$x+y$$")
        with pytest.raises(RenderError, match="points past the end of the source"):
            render(doc)

    def test_math_block_with_wrong_source(self) -> None:
        loc = SourceLocation(lineno=1, col_offset=1)
        doc = Document(
            location=loc,
            children=(MathBlock(location=loc, segments=(Segment(0, 40),)),),
        )
        with pytest.raises(RenderError):
            render(doc, source="short")

    def test_document_without_math_needs_no_source(self) -> None:
        assert render(parse("# Title")) == "<h1>Title</h1>\n"


# =========================================================================
# Invalid segments
# =========================================================================


class TestSegmentValidation:
    def test_start_after_stop(self) -> None:
        with pytest.raises(ValueError, match="after stop"):
            Segment(5, 2)

    def test_negative_padding(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Segment(0, 1, -1)
