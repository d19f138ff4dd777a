"""Math plugin for patitex.

Adds MathJax-style math:

- Inline: ``$expression$``
- Display, same line: ``$$expression$$``
- Display, multi-line: ``$$`` on its own line, content, ``$$``

Usage:
    >>> md = Markdown(plugins=["math"])
    >>> md("$1+2$")
    '<p><span class="math inline">\\\\(1+2\\\\)</span></p>\\n'

The renderer only wraps the raw TeX in MathJax delimiters; typesetting
happens client-side.

"""

from __future__ import annotations

from dataclasses import replace

from patitex.config import ParseConfig
from patitex.parsing.blocks.math import MathBlockParser
from patitex.plugins import register_plugin


@register_plugin("math")
class MathPlugin:
    """Plugin adding $math$ and $$math$$ support."""

    @property
    def name(self) -> str:
        return "math"

    def extend_config(self, config: ParseConfig) -> ParseConfig:
        if any(isinstance(p, MathBlockParser) for p in config.block_parsers):
            return replace(config, math_enabled=True)
        return replace(
            config,
            math_enabled=True,
            block_parsers=(*config.block_parsers, MathBlockParser()),
        )
