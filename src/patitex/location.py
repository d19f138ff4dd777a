"""Source location tracking for AST nodes and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the source buffer.

    Line and column numbers are 1-indexed; offsets are 0-indexed positions
    into the source string.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the source buffer
        end_offset: Absolute end offset in the source buffer (set on the
            document root)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(3, 1, source_file="notes.md")
        >>> str(loc)
        'notes.md:3:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
