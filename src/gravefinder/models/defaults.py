"""
Structural repair helpers.

Incoming documents are hand-edited, so any field may be missing, null or of
the wrong type. These helpers pick the incoming value when it is usable and
fall back to the supplied default otherwise. They never raise.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar("T")


def as_mapping(data: Any) -> Optional[Mapping]:
    """Return ``data`` if it is a mapping, else None."""
    return data if isinstance(data, Mapping) else None


def as_list(data: Any) -> list:
    """Return ``data`` as a list, or an empty list for anything that is not a sequence."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        return []
    return list(data)


def item_at(items: list, index: int) -> Any:
    """Return ``items[index]`` or None when the list is too short."""
    return items[index] if index < len(items) else None


def text_or_default(data: Optional[Mapping], key: str, default: str) -> str:
    if data is None:
        return default
    value = data.get(key)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def count_or_default(data: Optional[Mapping], key: str, default: int) -> int:
    """Non-negative integer field; booleans and negatives are repaired."""
    if data is None:
        return default
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value < 0 or value != int(value):
        return default
    return int(value)


def number_or_default(data: Optional[Mapping], key: str, default: float) -> float:
    if data is None:
        return default
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def integer_or_default(data: Optional[Mapping], key: str, default: int) -> int:
    """Any integer (negative ids are legal); floats with a fraction are repaired."""
    if data is None:
        return default
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value != int(value):
        return default
    return int(value)


def build_fixed(items: list, count: int, build: Callable[[Any], T]) -> List[T]:
    """Build exactly ``count`` children, one per slot.

    Slots beyond the end of ``items`` are built from None, which every
    ``build`` treats as "use the defaults". Extra items are ignored.
    """
    return [build(item_at(items, index)) for index in range(count)]
