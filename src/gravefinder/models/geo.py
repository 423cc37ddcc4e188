"""Geographic point used for cemetery markers, boundaries and plot offsets."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import DEFAULT_LAT, DEFAULT_LNG
from .defaults import as_mapping, number_or_default


@dataclass
class LatLng:
    lat: float = DEFAULT_LAT
    lng: float = DEFAULT_LNG

    @classmethod
    def from_dict(cls, data: Any) -> "LatLng":
        """Build a point, repairing missing coordinates to the origin."""
        data = as_mapping(data)
        return cls(
            lat=number_or_default(data, "lat", DEFAULT_LAT),
            lng=number_or_default(data, "lng", DEFAULT_LNG),
        )

    @classmethod
    def from_optional(cls, data: Any) -> Optional["LatLng"]:
        """Like from_dict, but keeps an absent point absent."""
        if as_mapping(data) is None:
            return None
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}
