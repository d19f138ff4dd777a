"""
patitex: MathJax-ready math for a line-oriented Markdown parser

Recognizes ``$inline$`` and ``$$display$$`` math, including multi-line
display blocks, and hands the raw TeX to an HTML renderer that wraps it in
MathJax delimiters. Zero runtime dependencies.

Quick Start:
    >>> from patitex import Markdown
    >>> md = Markdown(plugins=["math"])
    >>> print(md("$$\\nx+y\\n$$"), end="")
    <p><span class="math display">\\[x+y
    \\]</span></p>

    >>> doc = md.parse("$$a+b$$")
    >>> doc.children[0].get_content("$$a+b$$")
    'a+b'
"""

from collections.abc import Iterable

from patitex.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from patitex.errors import ParseError, PatitexError, PluginError, RenderError
from patitex.location import SourceLocation
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
from patitex.parser import Parser
from patitex.plugins import apply_plugins, expand_plugin_names
from patitex.renderers.html import (
    DEFAULT_DISPLAY_DELIMITERS,
    DEFAULT_INLINE_DELIMITERS,
    HtmlRenderer,
)
from patitex.segments import Segment, SegmentList
from patitex.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def _build_document(source: str, source_file: str | None) -> Document:
    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse Markdown source into a typed AST using the active ParseConfig.

    Args:
        source: Markdown source text
        source_file: Optional source file path for locations and errors

    Returns:
        Document AST root node

    Example:
        >>> with parse_config_context(apply_plugins(["math"])):
        ...     doc = parse("$$x+y$$")
        >>> doc.children[0].same_line
        True
    """
    return _build_document(source, source_file)


def render(doc: Document, *, source: str = "") -> str:
    """Render a Document to HTML.

    Args:
        doc: Document AST to render
        source: Original source; math blocks are materialized from it

    Returns:
        HTML string
    """
    return HtmlRenderer(source=source).render(doc)


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown(plugins=["math"])
        >>> md("$1+2$")
        '<p><span class="math inline">\\\\(1+2\\\\)</span></p>\\n'

        >>> # KaTeX-style auto-render delimiters
        >>> md = Markdown(plugins=["math"], display_delimiters=("$$", "$$"))

    Thread Safety:
        Uses ContextVar for configuration. Safe to use multiple Markdown
        instances concurrently from different threads.

    """

    __slots__ = ("_config", "_plugins", "_inline_delimiters", "_display_delimiters")

    def __init__(
        self,
        plugins: list[str] | None = None,
        *,
        inline_delimiters: tuple[str, str] = DEFAULT_INLINE_DELIMITERS,
        display_delimiters: tuple[str, str] = DEFAULT_DISPLAY_DELIMITERS,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            plugins: Plugin names to enable (e.g. ["math"]); ["all"] enables
                every built-in plugin
            inline_delimiters: Markers wrapped around inline math
            display_delimiters: Markers wrapped around display math

        Raises:
            PluginError: If a plugin name is unknown
        """
        self._plugins = expand_plugin_names(plugins or [])
        self._config = apply_plugins(self._plugins)
        self._inline_delimiters = inline_delimiters
        self._display_delimiters = display_delimiters

    @property
    def plugins(self) -> list[str]:
        return list(self._plugins)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source), source=source)

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source into AST with this instance's config."""
        with parse_config_context(self._config):
            return _build_document(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse several sources, setting the config once for the batch."""
        with parse_config_context(self._config):
            return [_build_document(source, source_file) for source in sources]

    def render(self, doc: Document, *, source: str = "") -> str:
        """Render AST to HTML.

        Args:
            doc: Document AST to render
            source: The source ``doc`` was parsed from
        """
        renderer = HtmlRenderer(
            source=source,
            inline_delimiters=self._inline_delimiters,
            display_delimiters=self._display_delimiters,
        )
        return renderer.render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Markdown",
    # Block nodes
    "Block",
    "Document",
    "Heading",
    "IndentedCode",
    "MathBlock",
    "Paragraph",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "Math",
    "SoftBreak",
    "Strong",
    "Text",
    # Segments
    "Segment",
    "SegmentList",
    # Parser and renderer
    "Parser",
    "HtmlRenderer",
    # Plugins
    "apply_plugins",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "PatitexError",
    "ParseError",
    "PluginError",
    "RenderError",
    # Location
    "SourceLocation",
]
