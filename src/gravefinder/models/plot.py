"""
Plot model.

A plot is a physical section of a cemetery. Its location is an offset from
the cemetery's reference point; it may own a columbarium.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import DEFAULT_PLOT_ANGLE, DEFAULT_PLOT_CAPACITY, DEFAULT_PLOT_ID
from ..exceptions.addressing import InvalidLocatorError
from .columbarium import Columbarium
from .defaults import as_mapping, count_or_default, integer_or_default, number_or_default
from .geo import LatLng
from .grave import Grave
from .locators import NicheInfo
from .stats import NicheStats


@dataclass
class Plot:
    id: int = DEFAULT_PLOT_ID
    location: LatLng = field(default_factory=LatLng)
    angle: float = DEFAULT_PLOT_ANGLE
    capacity: int = DEFAULT_PLOT_CAPACITY
    columbarium: Optional[Columbarium] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Plot":
        data = as_mapping(data)
        if data is None:
            return cls()

        columbarium = data.get("columbarium")
        return cls(
            id=integer_or_default(data, "id", DEFAULT_PLOT_ID),
            location=LatLng.from_dict(data.get("location")),
            angle=number_or_default(data, "angle", DEFAULT_PLOT_ANGLE),
            capacity=count_or_default(data, "capacity", DEFAULT_PLOT_CAPACITY),
            columbarium=Columbarium.from_dict(columbarium) if as_mapping(columbarium) is not None else None,
        )

    @property
    def has_columbarium(self) -> bool:
        return self.columbarium is not None

    def require_columbarium(self) -> Columbarium:
        if self.columbarium is None:
            raise InvalidLocatorError("columbarium", self.id, "plot has no columbarium")
        return self.columbarium

    def occupant(self, niche_info: NicheInfo) -> Grave:
        """The grave held by an occupied niche; an empty niche is not a valid target."""
        grave = self.require_columbarium().resolve(niche_info).raise_if_invalid().niche.grave
        if grave.is_placeholder:
            raise InvalidLocatorError("niche", niche_info.niche_index, "niche is empty")
        return grave

    def remove_niche(self, niche_info: NicheInfo) -> Grave:
        return self.require_columbarium().remove_niche(niche_info)

    def set_niche(self, niche_info: NicheInfo, grave: Grave) -> None:
        self.require_columbarium().set_niche(niche_info, grave)

    def get_stats(self) -> NicheStats:
        if self.columbarium is None:
            return NicheStats()
        return self.columbarium.get_stats()
