"""
Locator records.

A GraveInfo says where a grave lives in a cemetery: either in the cemetery's
unassigned graves (``plot_index`` is None and ``grave_index`` is meaningful)
or in a columbarium niche of a plot (``niche`` is filled in). Indices that do
not apply are None rather than a magic integer, so no sentinel can ever be
mistaken for a real position.

Locators are snapshots: any structural change (for example a delete from the
unassigned graves) may invalidate them.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ..constants import INVALID_FACE_NAME, INVALID_ROW_NAME, INVALID_URN_COUNT
from ..exceptions.addressing import InvalidLocatorError
from .grave import Grave

if TYPE_CHECKING:
    from .face import Face
    from .row import Niche, Row

UNASSIGNED = None


@dataclass
class NicheInfo:
    face_index: Optional[int] = None
    row_index: Optional[int] = None
    niche_index: Optional[int] = None
    face_name: str = INVALID_FACE_NAME
    row_name: str = INVALID_ROW_NAME
    urn_count: int = INVALID_URN_COUNT

    @property
    def is_complete(self) -> bool:
        return None not in (self.face_index, self.row_index, self.niche_index)

    def reset_names(self) -> "NicheInfo":
        self.face_name = INVALID_FACE_NAME
        self.row_name = INVALID_ROW_NAME
        self.urn_count = INVALID_URN_COUNT
        return self

    def breadcrumb(self) -> str:
        niche = "Invalid Niche" if self.niche_index is None else f"Niche {self.niche_index + 1}"
        return f"{self.face_name} / {self.row_name} / {niche}"


@dataclass
class GraveInfo:
    cemetery_index: int
    grave: Grave
    plot_index: Optional[int] = UNASSIGNED
    grave_index: Optional[int] = None
    niche: Optional[NicheInfo] = None

    @property
    def is_unassigned(self) -> bool:
        return self.plot_index is UNASSIGNED

    def location_label(self) -> str:
        """Human readable location used in search results."""
        if self.is_unassigned:
            return "Unassigned"
        label = f"Plot {self.plot_index + 1}"
        if self.niche is not None:
            label += f" / {self.niche.breadcrumb()}"
        return label


def check_index(index: Optional[int], size: int) -> Optional[str]:
    """Return why ``index`` cannot address a sequence of ``size`` items, or None."""
    if index is None:
        return "not applicable"
    if isinstance(index, bool) or not isinstance(index, int):
        return "not an integer"
    if index < 0 or index >= size:
        return f"out of range 0..{size - 1}" if size else "container is empty"
    return None


@dataclass
class NicheResolution:
    """Outcome of walking a NicheInfo down a columbarium.

    Either ``found`` is true and ``face``/``row``/``niche_index`` point at the
    slot, or ``segment``/``index``/``reason`` say where the walk stopped.
    """

    face: Optional["Face"] = None
    row: Optional["Row"] = None
    niche_index: Optional[int] = None
    segment: Optional[str] = None
    index: Any = None
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.segment is None and self.row is not None

    @property
    def niche(self) -> "Niche":
        self.raise_if_invalid()
        return self.row.niches[self.niche_index]

    def raise_if_invalid(self) -> "NicheResolution":
        if not self.found:
            raise InvalidLocatorError(self.segment or "niche", self.index, self.reason)
        return self

    @classmethod
    def failure(cls, segment: str, index: Any, reason: str) -> "NicheResolution":
        return cls(segment=segment, index=index, reason=reason)
