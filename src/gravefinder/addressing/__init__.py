"""
Addressing layer.

Stateless functions that flatten a registry into GraveInfo locators and use
locators to find, remove, set, move and search graves.
"""

from .resolver import (
    assign_to_niche,
    collect_grave_infos,
    collect_registry_grave_infos,
    delete_grave,
    move_to_unassigned,
    populate_niche_names,
    remove_niche,
    set_niche,
)
from .search import filter_by_state, search_graves, sort_grave_infos

__all__ = [
    "assign_to_niche",
    "collect_grave_infos",
    "collect_registry_grave_infos",
    "delete_grave",
    "filter_by_state",
    "move_to_unassigned",
    "populate_niche_names",
    "remove_niche",
    "search_graves",
    "set_niche",
    "sort_grave_infos",
]
