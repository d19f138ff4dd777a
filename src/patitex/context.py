"""Per-parse key/value context.

Block parsers are shared, stateless objects. State that must survive from
one line to the next (such as the indentation baseline of an open math
block) is stored in the ParseContext of the running parse, under a
ContextKey owned by the parser module.

Example:
    >>> KEY = ContextKey("example")
    >>> ctx = ParseContext()
    >>> ctx.get(KEY) is None
    True
    >>> ctx.set(KEY, 3)
    >>> ctx.get(KEY)
    3

Thread Safety:
One ParseContext is created per parse and discarded with it, so concurrent
parses never share state.

"""

from __future__ import annotations

from itertools import count
from typing import Any

_key_ids = count(1)


class ContextKey:
    """Identity-based key into a ParseContext.

    Two keys created with the same name are still distinct.
    """

    __slots__ = ("_id", "name")

    def __init__(self, name: str) -> None:
        self.name = name
        self._id = next(_key_ids)

    def __repr__(self) -> str:
        return f"ContextKey({self.name!r}, id={self._id})"


class ParseContext:
    """Mutable store scoped to a single parse."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[ContextKey, Any] = {}

    def get(self, key: ContextKey, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: ContextKey, value: Any) -> None:
        self._values[key] = value

    def delete(self, key: ContextKey) -> None:
        """Remove ``key``; missing keys are ignored."""
        self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
