"""Niche occupancy counts by grave state."""

from dataclasses import dataclass
from typing import Dict, Iterable

from .grave import Grave, GraveState


@dataclass
class NicheStats:
    interred: int = 0
    reserved: int = 0
    unavailable: int = 0
    unassigned: int = 0

    def __add__(self, other: "NicheStats") -> "NicheStats":
        return NicheStats(
            interred=self.interred + other.interred,
            reserved=self.reserved + other.reserved,
            unavailable=self.unavailable + other.unavailable,
            unassigned=self.unassigned + other.unassigned,
        )

    @property
    def total(self) -> int:
        return self.interred + self.reserved + self.unavailable + self.unassigned

    def count(self, state: GraveState) -> int:
        return getattr(self, state.name.lower())

    def record(self, grave: Grave) -> None:
        field_name = grave.state.name.lower()
        setattr(self, field_name, getattr(self, field_name) + 1)

    @classmethod
    def of(cls, graves: Iterable[Grave]) -> "NicheStats":
        stats = cls()
        for grave in graves:
            stats.record(grave)
        return stats

    def to_dict(self) -> Dict[str, int]:
        return {str(state): self.count(state) for state in GraveState}
