"""Plugin system for patitex.

A plugin turns a feature on by extending the immutable ParseConfig: it may
flip feature flags and contribute block parsers that the engine tries
before falling back to paragraphs.

Usage:
    >>> from patitex import Markdown
    >>> md = Markdown(plugins=["math"])
    >>> md("$$x+y$$")
    '<p><span class="math display">\\\\[x+y\\\\]</span></p>\\n'

Thread Safety:
Plugins are stateless; applying one returns a new ParseConfig.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from patitex.config import ParseConfig
from patitex.errors import PluginError

__all__ = [
    "PatitexPlugin",
    "BUILTIN_PLUGINS",
    "apply_plugins",
    "expand_plugin_names",
    "get_plugin",
    "register_plugin",
]


@runtime_checkable
class PatitexPlugin(Protocol):
    """Protocol for patitex plugins."""

    @property
    def name(self) -> str:
        """Plugin identifier."""
        ...

    def extend_config(self, config: ParseConfig) -> ParseConfig:
        """Return ``config`` with this plugin's features enabled."""
        ...


BUILTIN_PLUGINS: dict[str, type[PatitexPlugin]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[PatitexPlugin]], type[PatitexPlugin]]:
    """Decorator registering a plugin class under ``name``.

    Usage:
        @register_plugin("math")
        class MathPlugin:
            ...

    """

    def decorator(cls: type[PatitexPlugin]) -> type[PatitexPlugin]:
        BUILTIN_PLUGINS[name] = cls
        return cls

    return decorator


def get_plugin(name: str) -> PatitexPlugin:
    """Get a plugin instance by name.

    Raises:
        PluginError: If the name is not registered

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS))
        raise PluginError(name, f"unknown plugin. Available: {available}")
    return BUILTIN_PLUGINS[name]()


def expand_plugin_names(plugins: Iterable[str]) -> list[str]:
    """Resolve ``"all"`` and drop duplicates, keeping first-seen order."""
    names: list[str] = []
    for name in plugins:
        expanded = list(BUILTIN_PLUGINS) if name == "all" else [name]
        for item in expanded:
            if item not in names:
                names.append(item)
    return names


def apply_plugins(plugins: Iterable[str], config: ParseConfig | None = None) -> ParseConfig:
    """Apply plugins by name to ``config`` (default config when omitted)."""
    result = config or ParseConfig()
    for name in expand_plugin_names(plugins):
        result = get_plugin(name).extend_config(result)
    return result


# Import built-in plugins to register them
from patitex.plugins.math import MathPlugin  # noqa: E402

__all__ += ["MathPlugin"]
