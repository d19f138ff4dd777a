"""Typed AST nodes for patitex.

All AST nodes are frozen dataclasses with slots, so a parsed Document can be
shared between threads and compared structurally.

Node Hierarchy:
Node (base)
├── Block
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── IndentedCode
│   └── MathBlock
└── Inline
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── CodeSpan
    ├── SoftBreak
    └── Math

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from patitex.location import SourceLocation
from patitex.segments import Segment

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Line break inside a paragraph that renders as a newline."""


@dataclass(frozen=True, slots=True)
class Math(Node):
    """Inline math expression.

    Markdown: $E = mc^2$
    HTML: <span class="math inline">\\(E = mc^2\\)</span>

    """

    content: str


# PEP 695 type alias for inline elements
type Inline = Text | Emphasis | Strong | CodeSpan | SoftBreak | Math


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: ## Title
    HTML: <h2>Title</h2>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline content."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class IndentedCode(Node):
    """Indented code block (4+ columns).

    Markdown: ····code
    HTML: <pre><code>code</code></pre>

    """

    code: str


@dataclass(frozen=True, slots=True)
class MathBlock(Node):
    """Display math with zero-copy source segments.

    Markdown:
        $$x+y$$

        $$
        \\begin{pmatrix} 1 & 2 \\end{pmatrix}
        $$

    HTML: <p><span class="math display">\\[x+y\\]</span></p>

    The fences themselves are never part of a segment. For a multi-line
    block each captured line keeps its own terminator, so concatenating the
    segments reproduces the payload line structure. A same-line block holds
    at most one segment and no terminator.

    """

    segments: tuple[Segment, ...]
    same_line: bool = False

    def get_content(self, source: str) -> str:
        """Materialize the raw payload from the source buffer."""
        return "".join(seg.value(source) for seg in self.segments)

    def get_lines(self, source: str) -> tuple[str, ...]:
        """Payload split into lines, terminators removed."""
        content = self.get_content(source)
        if not content:
            return ()
        lines = content.split("\n")
        if not lines[-1]:
            lines.pop()
        return tuple(line.removesuffix("\r") for line in lines)


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node of a parsed document."""

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = Document | Heading | Paragraph | IndentedCode | MathBlock
