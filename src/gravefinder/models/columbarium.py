"""
Columbarium model and niche resolution.

Even when a plot holds several physical columbaria it is modelled as a
single columbarium with several faces. Niches are addressed by a NicheInfo
whose face, row and niche indices are walked down the tree one segment at a
time; the walk stops at the first index that does not fit.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from ..constants import DEFAULT_NUM_FACES
from .defaults import as_list, as_mapping, build_fixed, count_or_default
from .face import Face
from .grave import Grave
from .locators import NicheInfo, NicheResolution, check_index
from .row import Niche, Row
from .stats import NicheStats

logger = logging.getLogger(__name__)


@dataclass
class Columbarium:
    num_faces: int = DEFAULT_NUM_FACES
    faces: List[Face] = field(default_factory=list)

    def __post_init__(self):
        if len(self.faces) != self.num_faces:
            self.faces = build_fixed(self.faces, self.num_faces, lambda face: face or Face())

    @classmethod
    def from_dict(cls, data: Any) -> "Columbarium":
        data = as_mapping(data)
        if data is None:
            return cls()

        num_faces = count_or_default(data, "numFaces", DEFAULT_NUM_FACES)
        faces = as_list(data.get("faces"))
        if len(faces) > num_faces:
            logger.debug(f"Columbarium declares {num_faces} faces but holds {len(faces)}; extra faces dropped")

        return cls(num_faces=num_faces, faces=build_fixed(faces, num_faces, Face.from_dict))

    def face_names(self) -> List[str]:
        return [face.full_name for face in self.faces]

    def iter_niches(self) -> Iterator[Tuple[NicheInfo, Niche]]:
        """Yield every niche in face, row, niche order with its populated locator."""
        for face_index, face in enumerate(self.faces):
            for row_index, row in enumerate(face.rows):
                for niche_index, niche in enumerate(row.niches):
                    info = NicheInfo(
                        face_index=face_index,
                        row_index=row_index,
                        niche_index=niche_index,
                        face_name=face.face_name,
                        row_name=row.name,
                        urn_count=niche.urns,
                    )
                    yield info, niche

    def resolve(self, niche_info: Optional[NicheInfo]) -> NicheResolution:
        """Walk ``niche_info`` down faces, rows and niches.

        Never raises; the returned resolution says where the walk stopped.
        """
        if niche_info is None:
            return NicheResolution.failure("niche", None, "no niche locator")

        face = self._step("face", niche_info.face_index, self.faces)
        if isinstance(face, NicheResolution):
            return face
        row = self._step("row", niche_info.row_index, face.rows)
        if isinstance(row, NicheResolution):
            return row
        reason = check_index(niche_info.niche_index, len(row.niches))
        if reason:
            return NicheResolution.failure("niche", niche_info.niche_index, reason)
        return NicheResolution(face=face, row=row, niche_index=niche_info.niche_index)

    @staticmethod
    def _step(segment: str, index: Optional[int], children: list):
        reason = check_index(index, len(children))
        if reason:
            return NicheResolution.failure(segment, index, reason)
        return children[index]

    def remove_niche(self, niche_info: NicheInfo) -> Grave:
        """Empty the addressed niche and return the grave that was in it.

        Raises:
            InvalidLocatorError: If any index is missing or out of range
        """
        resolution = self.resolve(niche_info).raise_if_invalid()
        return resolution.row.replace_grave(resolution.niche_index, Grave.placeholder())

    def set_niche(self, niche_info: NicheInfo, grave: Grave) -> None:
        """Overwrite the addressed niche with ``grave``; whatever was there is discarded.

        Raises:
            InvalidLocatorError: If any index is missing or out of range
        """
        resolution = self.resolve(niche_info).raise_if_invalid()
        resolution.row.replace_grave(resolution.niche_index, grave)

    def populate_niche_names(self, niche_info: NicheInfo) -> NicheInfo:
        """Fill in face name, row name and urn count from the indices.

        Names below the first unusable index keep their "Invalid" values.
        """
        niche_info.reset_names()
        if check_index(niche_info.face_index, len(self.faces)):
            return niche_info
        face = self.faces[niche_info.face_index]
        niche_info.face_name = face.face_name

        if check_index(niche_info.row_index, len(face.rows)):
            return niche_info
        row: Row = face.rows[niche_info.row_index]
        niche_info.row_name = row.name

        if check_index(niche_info.niche_index, len(row.niches)):
            return niche_info
        niche_info.urn_count = row.niches[niche_info.niche_index].urns
        return niche_info

    def get_stats(self) -> NicheStats:
        """Count every niche once by the state of its grave; empty niches count as Unassigned."""
        return NicheStats.of(niche.grave for _, niche in self.iter_niches())
