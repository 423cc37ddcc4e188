"""
Cemetery model.

A cemetery owns a list of unassigned graves and an ordered list of plots.
Every grave lives in exactly one place: the unassigned list or a niche.
Removing an unassigned grave shifts the index of every later one, so
locators collected before a delete must be collected again.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from ..exceptions.addressing import InvalidLocatorError
from .defaults import as_list, as_mapping
from .geo import LatLng
from .grave import Grave
from .locators import GraveInfo, check_index
from .plot import Plot
from .stats import NicheStats

logger = logging.getLogger(__name__)


@dataclass
class Cemetery:
    location: Optional[LatLng] = None
    name: Optional[str] = None
    town: Optional[str] = None
    description: Optional[str] = None
    boundary: List[LatLng] = field(default_factory=list)
    zoom: Any = None
    angle: Any = None
    graves: List[Grave] = field(default_factory=list)
    plots: List[Plot] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Cemetery":
        return cls().load(data)

    def load(self, data: Any) -> "Cemetery":
        """Replace this cemetery's contents with ``data``.

        Scalar fields are taken as stored. The grave and plot lists are
        rebuilt from scratch, so loading the same data twice leaves the
        same cemetery, never a doubled one.
        """
        data = as_mapping(data) or {}
        self.location = LatLng.from_optional(data.get("location"))
        self.name = data.get("name")
        self.town = data.get("town")
        self.description = data.get("description")
        self.boundary = [LatLng.from_dict(point) for point in as_list(data.get("boundary"))]
        self.zoom = data.get("zoom")
        self.angle = data.get("angle")
        self.graves = [Grave.from_dict(grave) for grave in as_list(data.get("graves"))]
        self.plots = [Plot.from_dict(plot) for plot in as_list(data.get("plots"))]
        return self

    def plot_at(self, plot_index: Optional[int]) -> Plot:
        reason = check_index(plot_index, len(self.plots))
        if reason:
            raise InvalidLocatorError("plot", plot_index, reason)
        return self.plots[plot_index]

    def add_graves(self, graves: Iterable[Grave]) -> int:
        """Append graves to the unassigned list; returns how many were added."""
        before = len(self.graves)
        self.graves.extend(graves)
        return len(self.graves) - before

    def delete_grave(self, locator: GraveInfo) -> Grave:
        """Remove the grave ``locator`` points at and return it.

        Unassigned graves are spliced out of the list. A grave in a niche is
        replaced by a placeholder because rows never change size.

        Raises:
            InvalidLocatorError: If the locator does not address a grave, or
                addresses a niche that is already empty
        """
        if locator.is_unassigned:
            reason = check_index(locator.grave_index, len(self.graves))
            if reason:
                raise InvalidLocatorError("grave", locator.grave_index, reason)
            removed = self.graves.pop(locator.grave_index)
            logger.debug(f"Deleted unassigned grave {locator.grave_index} '{removed.name}' from '{self.name}'")
            return removed

        plot = self.plot_at(locator.plot_index)
        plot.occupant(locator.niche)
        removed = plot.remove_niche(locator.niche)
        logger.debug(f"Cleared niche {locator.location_label()} of '{self.name}'")
        return removed

    def get_stats(self) -> NicheStats:
        """Niche counts of every plot plus the unassigned graves by their own state."""
        stats = NicheStats.of(self.graves)
        for plot in self.plots:
            stats = stats + plot.get_stats()
        return stats
