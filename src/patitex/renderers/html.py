"""HTML renderer using the StringBuilder pattern.

Math is emitted for MathJax: the raw TeX is HTML-escaped and wrapped in the
configured delimiters inside a ``math inline`` or ``math display`` span.

Thread Safety:
The renderer holds configuration only. Multiple threads can share one
HtmlRenderer and call render() concurrently.

"""

from __future__ import annotations

import html

from patitex.errors import RenderError
from patitex.nodes import (
    Block,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    IndentedCode,
    Inline,
    Math,
    MathBlock,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
)
from patitex.stringbuilder import StringBuilder

DEFAULT_INLINE_DELIMITERS = ("\\(", "\\)")
DEFAULT_DISPLAY_DELIMITERS = ("\\[", "\\]")


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but not single quotes.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
        >>> renderer = HtmlRenderer(source)
        >>> renderer.render(doc)
        '<p><span class="math display">\\\\[x+y\\\\]</span></p>\\n'

    Args:
        source: Original source buffer; math blocks hold offsets into it
        inline_delimiters: Opening and closing markers for inline math
        display_delimiters: Opening and closing markers for display math

    """

    __slots__ = ("_source", "_inline_delimiters", "_display_delimiters")

    def __init__(
        self,
        source: str = "",
        *,
        inline_delimiters: tuple[str, str] = DEFAULT_INLINE_DELIMITERS,
        display_delimiters: tuple[str, str] = DEFAULT_DISPLAY_DELIMITERS,
    ) -> None:
        self._source = source
        self._inline_delimiters = inline_delimiters
        self._display_delimiters = display_delimiters

    def render(self, node: Document) -> str:
        """Render document AST to an HTML string."""
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb)
                sb.append("</p>\n")
            case MathBlock():
                self._render_math_block(block, sb)
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.children, sb)
                sb.append(f"</h{block.level}>\n")
            case IndentedCode():
                sb.append("<pre><code>").append(html_escape(block.code)).append("</code></pre>\n")
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case _:
                raise RenderError(f"Cannot render block node {type(block).__name__}")

    def _render_math_block(self, math: MathBlock, sb: StringBuilder) -> None:
        """Render display math wrapped for MathJax."""
        source_len = len(self._source)
        if any(seg.stop > source_len for seg in math.segments):
            raise RenderError(
                f"MathBlock at {math.location} points past the end of the source; "
                "pass the parsed source to the renderer"
            )
        opening, closing = self._display_delimiters
        sb.append('<p><span class="math display">')
        sb.append(opening)
        sb.append(html_escape(math.get_content(self._source)))
        sb.append(closing)
        sb.append("</span></p>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        match inline:
            case Text():
                sb.append(html_escape(inline.content))
            case Math():
                opening, closing = self._inline_delimiters
                sb.append('<span class="math inline">')
                sb.append(opening).append(html_escape(inline.content)).append(closing)
                sb.append("</span>")
            case Emphasis():
                sb.append("<em>")
                self._render_inlines(inline.children, sb)
                sb.append("</em>")
            case Strong():
                sb.append("<strong>")
                self._render_inlines(inline.children, sb)
                sb.append("</strong>")
            case CodeSpan():
                sb.append("<code>").append(html_escape(inline.code)).append("</code>")
            case SoftBreak():
                sb.append("\n")
            case _:
                raise RenderError(f"Cannot render inline node {type(inline).__name__}")
