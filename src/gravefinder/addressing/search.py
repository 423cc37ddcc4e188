"""Grave record search and ordering over collected locators."""

from typing import Iterable, List, Optional

from ..models import GraveInfo, GraveState


def search_graves(infos: Iterable[GraveInfo], query: Optional[str], include_placeholders: bool = False) -> List[GraveInfo]:
    """Records whose grave name contains ``query``, in addressing order.

    Graves with neither name nor dates are left out unless
    ``include_placeholders`` is set.
    """
    return [
        info
        for info in infos
        if (include_placeholders or info.grave.valid) and info.grave.matches_text(query)
    ]


def sort_grave_infos(infos: Iterable[GraveInfo]) -> List[GraveInfo]:
    """Order by family name; equal keys keep their addressing order."""
    return sorted(infos, key=lambda info: info.grave.sort_key)


def filter_by_state(infos: Iterable[GraveInfo], state: Optional[GraveState]) -> List[GraveInfo]:
    if state is None:
        return list(infos)
    return [info for info in infos if info.grave.state == state]
