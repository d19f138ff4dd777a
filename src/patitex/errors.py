"""Exception classes for patitex.

The math core never raises: malformed fences fall through as ordinary text.
These exceptions cover the surrounding host: misbehaving block parsers,
unrenderable nodes and unknown plugins.
"""

from __future__ import annotations


class PatitexError(Exception):
    """Base exception for all patitex errors."""

    pass


class ParseError(PatitexError):
    """Error during block parsing.

    Raised when a block parser breaks the open/continue/close protocol.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(PatitexError):
    """Error during HTML rendering.

    Raised when the renderer meets a node type it has no output for.
    """

    pass


class PluginError(PatitexError):
    """Error looking up or applying a plugin."""

    def __init__(self, plugin_name: str, message: str) -> None:
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
