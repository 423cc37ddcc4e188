"""
Registry document root.

The stored document is ``{"referenceLocation": ..., "cemeteries": [...]}``.
Older files hold only the bare cemeteries array; both load the same way.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..exceptions.addressing import InvalidLocatorError
from .cemetery import Cemetery
from .defaults import as_list, as_mapping
from .geo import LatLng
from .locators import check_index
from .stats import NicheStats


@dataclass
class GraveRegistry:
    reference_location: Optional[LatLng] = None
    cemeteries: List[Cemetery] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "GraveRegistry":
        return cls().load(data)

    def load(self, data: Any) -> "GraveRegistry":
        mapping = as_mapping(data)
        if mapping is None:
            mapping = {"cemeteries": as_list(data)}
        self.reference_location = LatLng.from_optional(mapping.get("referenceLocation"))
        self.cemeteries = [Cemetery.from_dict(cemetery) for cemetery in as_list(mapping.get("cemeteries"))]
        return self

    def cemetery_at(self, cemetery_index: Optional[int]) -> Cemetery:
        reason = check_index(cemetery_index, len(self.cemeteries))
        if reason:
            raise InvalidLocatorError("cemetery", cemetery_index, reason)
        return self.cemeteries[cemetery_index]

    def get_stats(self) -> NicheStats:
        stats = NicheStats()
        for cemetery in self.cemeteries:
            stats = stats + cemetery.get_stats()
        return stats
