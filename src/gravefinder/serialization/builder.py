"""
Ordered fragment builder for the registry text format.

The stored document is hand-diffable JSON with a fixed key order and fixed
whitespace at every nesting level. Writers describe each node as a sequence
of literal fragments, keyed values and child lists; the builder only joins
them, so the layout lives in one readable place per node type.
"""

import json
import math
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")


def _plain(value: Any) -> Any:
    """Convert ``value`` into what json.dumps should see.

    Integral floats are written without a fractional part and non-finite
    numbers become null, matching how browser JSON writes numbers.
    """
    if hasattr(value, "to_dict"):
        return _plain(value.to_dict())
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """Compact JSON for one value, non-ASCII characters kept as is."""
    return json.dumps(_plain(value), ensure_ascii=False, separators=(",", ":"))


class TextBuilder:
    """Accumulates fragments in emission order."""

    def __init__(self):
        self._parts: List[str] = []

    def text(self, fragment: str) -> "TextBuilder":
        self._parts.append(fragment)
        return self

    def newline(self, padding: str = "") -> "TextBuilder":
        return self.text("\n" + padding)

    def field(self, key: str, value: Any, colon: str = ": ") -> "TextBuilder":
        """Emit ``"key"<colon><json value>``."""
        return self.text(to_json(key) + colon + to_json(value))

    def items(
        self,
        children: Iterable[T],
        render: Callable[[T], str],
        separator: str = ",",
        last: str = "",
    ) -> "TextBuilder":
        """Emit every child, ``separator`` between them and ``last`` after the final one."""
        children = list(children)
        for index, child in enumerate(children):
            self.text(render(child))
            self.text(last if index == len(children) - 1 else separator)
        return self

    def build(self) -> str:
        return "".join(self._parts)
