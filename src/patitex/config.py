"""ContextVar-based parse configuration for patitex.

Config is set once per Markdown instance and read by the parser running in
the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(plugins=["math"])
    html = md("$$x+y$$")  # Sets config internally via ContextVar

    # Direct parser usage
    from patitex.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(math_enabled=True)):
        blocks = Parser(source).parse()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from patitex.parsing.blocks.protocol import BlockParser


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        math_enabled: Recognize $inline$ math in paragraph and heading text
        block_parsers: Extra block parsers contributed by plugins, tried after
            the built-in code and heading parsers and before paragraphs

    """

    math_enabled: bool = False
    block_parsers: tuple[BlockParser, ...] = ()

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored so framework settings can be passed through
        unfiltered.

        Example:
            >>> ParseConfig.from_dict({"math_enabled": True, "theme": "dark"}).math_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "block_parsers" in filtered:
            filtered["block_parsers"] = tuple(filtered["block_parsers"])
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "patitex_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the configuration active in this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Use ``config`` for the duration of the block.

    The previous config is restored even if the block raises.

    Example:
        >>> with parse_config_context(ParseConfig(math_enabled=True)):
        ...     get_parse_config().math_enabled
        True

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
