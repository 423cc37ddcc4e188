"""
Columbarium row model.

A row is a fixed number of niches. Each niche holds exactly one grave (a
placeholder when nobody is assigned to it) and an urn count, typically one
or two. The number of niches never changes after construction: graves are
replaced in place, never removed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from ..constants import DEFAULT_NUM_NICHES, DEFAULT_ROW_NAME, DEFAULT_URNS
from .defaults import as_list, as_mapping, build_fixed, count_or_default, item_at, text_or_default
from .grave import Grave

logger = logging.getLogger(__name__)

_GRAVE_FIELDS = ("name", "dates", "state")


@dataclass
class Niche:
    grave: Grave = field(default_factory=Grave.placeholder)
    urns: int = DEFAULT_URNS


def grave_from_slot(data: Any) -> Grave:
    """Stored graves arrays use ``{}`` for empty niches."""
    data = as_mapping(data)
    if data is None or not any(key in data for key in _GRAVE_FIELDS):
        return Grave.placeholder()
    return Grave.from_dict(data)


def urns_from_slot(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_URNS
    return value


@dataclass
class Row:
    name: str = DEFAULT_ROW_NAME
    num_niches: int = DEFAULT_NUM_NICHES
    niches: List[Niche] = field(default_factory=list)

    def __post_init__(self):
        if len(self.niches) != self.num_niches:
            self.niches = build_fixed(self.niches, self.num_niches, lambda niche: niche or Niche())

    @classmethod
    def from_dict(cls, data: Any) -> "Row":
        data = as_mapping(data)
        if data is None:
            return cls()

        name = text_or_default(data, "name", DEFAULT_ROW_NAME)
        num_niches = count_or_default(data, "numNiches", DEFAULT_NUM_NICHES)
        graves = as_list(data.get("graves"))
        urns = as_list(data.get("urns"))

        if len(graves) > num_niches or len(urns) > num_niches:
            logger.debug(
                f"Row '{name}' declares {num_niches} niches but holds "
                f"{len(graves)} graves and {len(urns)} urn counts; extra entries dropped"
            )

        niches = [
            Niche(grave_from_slot(item_at(graves, index)), urns_from_slot(item_at(urns, index)))
            for index in range(num_niches)
        ]
        return cls(name=name, num_niches=num_niches, niches=niches)

    @property
    def graves(self) -> List[Grave]:
        return [niche.grave for niche in self.niches]

    @property
    def urns(self) -> List[int]:
        return [niche.urns for niche in self.niches]

    def replace_grave(self, index: int, grave: Grave) -> Grave:
        """Put ``grave`` in niche ``index`` and hand back the previous occupant."""
        previous = self.niches[index].grave
        self.niches[index].grave = grave
        return previous
