"""Inline parser.

Turns the text of a paragraph or heading into inline nodes: text, backslash
escapes, code spans, emphasis, strong, soft breaks and, when enabled, inline
math. Delimiters that find no partner stay literal text.

Example:
    >>> from patitex.location import SourceLocation
    >>> InlineParser(math_enabled=True).parse("a $x$", SourceLocation(1, 1))
    (Text(..., content='a '), Math(..., content='x'))

"""

from __future__ import annotations

from patitex.location import SourceLocation
from patitex.nodes import CodeSpan, Emphasis, Inline, SoftBreak, Strong, Text
from patitex.parsing.fence import count_run
from patitex.parsing.inline.math import try_parse_math

ASCII_PUNCTUATION = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

_EMPHASIS_CHARS = frozenset("*_")


class InlineParser:
    """Left-to-right inline scanner.

    Args:
        math_enabled: Recognize ``$...$`` as inline math

    Thread Safety:
        Holds configuration only; safe to share between parses.

    """

    __slots__ = ("_math_enabled",)

    def __init__(self, *, math_enabled: bool = False) -> None:
        self._math_enabled = math_enabled

    @property
    def math_enabled(self) -> bool:
        return self._math_enabled

    def parse(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        nodes: list[Inline] = []
        pending: list[str] = []
        pos = 0
        text_len = len(text)

        def flush() -> None:
            if pending:
                nodes.append(Text(location=location, content="".join(pending)))
                pending.clear()

        while pos < text_len:
            ch = text[pos]

            if ch == "\\" and pos + 1 < text_len and text[pos + 1] in ASCII_PUNCTUATION:
                pending.append(text[pos + 1])
                pos += 2
                continue

            if ch == "\n":
                flush()
                nodes.append(SoftBreak(location=location))
                pos += 1
                continue

            result: tuple[Inline, int] | None = None
            if ch == "`":
                result = self._try_parse_code_span(text, pos, location)
            elif ch == "$" and self._math_enabled:
                result = try_parse_math(text, pos, location)
            elif ch in _EMPHASIS_CHARS:
                result = self._try_parse_emphasis(text, pos, location)

            if result is not None:
                flush()
                node, pos = result
                nodes.append(node)
                continue

            if ch == "`" or ch == "$" or ch in _EMPHASIS_CHARS:
                # An unmatched delimiter run is literal as a whole
                run = count_run(text, pos, ch)
                pending.append(text[pos : pos + run])
                pos += run
                continue

            pending.append(ch)
            pos += 1

        flush()
        return tuple(nodes)

    def _try_parse_code_span(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[CodeSpan, int] | None:
        """Code span with a closing backtick run of the same length."""
        run = count_run(text, pos, "`")
        search = pos + run
        while True:
            close = text.find("`", search)
            if close == -1:
                return None
            close_run = count_run(text, close, "`")
            if close_run == run:
                break
            search = close + close_run

        code = text[pos + run : close].replace("\n", " ")
        if len(code) >= 2 and code[0] == " " and code[-1] == " " and code.strip():
            code = code[1:-1]
        return CodeSpan(location=location, code=code), close + run

    def _try_parse_emphasis(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Emphasis | Strong, int] | None:
        """Emphasis or strong emphasis opened at ``pos``."""
        ch = text[pos]
        text_len = len(text)

        # Intraword underscores (snake_case) never open emphasis
        if ch == "_" and pos > 0 and text[pos - 1].isalnum():
            return None

        delim = ch * 2 if count_run(text, pos, ch) >= 2 else ch
        start = pos + len(delim)
        if start >= text_len or text[start].isspace():
            return None

        close = text.find(delim, start)
        while close != -1:
            after = close + len(delim)
            if close > start and not text[close - 1].isspace():
                doubled = len(delim) == 1 and after < text_len and text[after] == ch
                intraword = ch == "_" and after < text_len and text[after].isalnum()
                if not doubled and not intraword:
                    children = self.parse(text[start:close], location)
                    if len(delim) == 2:
                        return Strong(location=location, children=children), after
                    return Emphasis(location=location, children=children), after
                if doubled:
                    close = text.find(delim, after + 1)
                    continue
            close = text.find(delim, close + 1)
        return None
