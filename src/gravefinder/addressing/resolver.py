"""
Locator-based access to graves anywhere in a registry.

Locators are resolved one path segment at a time (cemetery, plot, then the
face/row/niche walk inside the columbarium). Any segment that does not
resolve raises InvalidLocatorError naming that segment; nothing is ever
silently skipped. Locators are snapshots, so collect them again after any
delete or move.
"""

import logging
from typing import List, Optional

from ..exceptions import InvalidLocatorError, NicheOccupiedError
from ..models import UNASSIGNED, Cemetery, Grave, GraveInfo, GraveRegistry, NicheInfo, Plot
from ..models.locators import check_index

logger = logging.getLogger(__name__)


def collect_grave_infos(cemetery: Cemetery, cemetery_index: int) -> List[GraveInfo]:
    """Flatten one cemetery into locators.

    Unassigned graves come first in stored order, then every occupied niche
    of every plot in plot, face, row and niche order. Empty niches are not
    graves and are left out.
    """
    infos = [
        GraveInfo(cemetery_index=cemetery_index, grave=grave, plot_index=UNASSIGNED, grave_index=grave_index)
        for grave_index, grave in enumerate(cemetery.graves)
    ]
    for plot_index, plot in enumerate(cemetery.plots):
        if plot.columbarium is None:
            continue
        for niche_info, niche in plot.columbarium.iter_niches():
            if niche.grave.is_placeholder:
                continue
            infos.append(
                GraveInfo(
                    cemetery_index=cemetery_index,
                    grave=niche.grave,
                    plot_index=plot_index,
                    niche=niche_info,
                )
            )
    return infos


def collect_registry_grave_infos(registry: GraveRegistry, cemetery_index: Optional[int] = None) -> List[GraveInfo]:
    """Locators for one cemetery, or for all of them when ``cemetery_index`` is None.

    Raises:
        InvalidLocatorError: ``cemetery_index`` does not name a cemetery.
    """
    if cemetery_index is not None:
        return collect_grave_infos(registry.cemetery_at(cemetery_index), cemetery_index)

    infos: List[GraveInfo] = []
    for index, cemetery in enumerate(registry.cemeteries):
        infos.extend(collect_grave_infos(cemetery, index))
    return infos


def _niche_plot(registry: GraveRegistry, locator: GraveInfo) -> Plot:
    cemetery = registry.cemetery_at(locator.cemetery_index)
    if locator.is_unassigned:
        raise InvalidLocatorError("plot", locator.plot_index, "not applicable")
    return cemetery.plot_at(locator.plot_index)


def remove_niche(registry: GraveRegistry, locator: GraveInfo) -> Grave:
    """Empty the niche ``locator`` points at and hand its grave to the caller."""
    return _niche_plot(registry, locator).remove_niche(locator.niche)


def set_niche(registry: GraveRegistry, locator: GraveInfo, grave: Optional[Grave] = None) -> None:
    """Write ``grave`` (default: ``locator.grave``) into the addressed niche.

    The previous occupant is overwritten; relocate it first if it matters.
    """
    _niche_plot(registry, locator).set_niche(locator.niche, grave if grave is not None else locator.grave)


def delete_grave(registry: GraveRegistry, locator: GraveInfo) -> Grave:
    """Remove a grave from wherever ``locator`` says it is and return it."""
    return registry.cemetery_at(locator.cemetery_index).delete_grave(locator)


def populate_niche_names(registry: GraveRegistry, locator: GraveInfo) -> NicheInfo:
    """Fill the face name, row name and urn count of ``locator.niche``.

    A locator without a niche gets a fresh one holding the "Invalid" names.
    """
    niche_info = locator.niche if locator.niche is not None else NicheInfo()
    locator.niche = niche_info
    try:
        plot = _niche_plot(registry, locator)
    except InvalidLocatorError:
        plot = None
    if plot is None or plot.columbarium is None:
        return niche_info.reset_names()
    return plot.columbarium.populate_niche_names(niche_info)


def move_to_unassigned(registry: GraveRegistry, locator: GraveInfo) -> GraveInfo:
    """Take the grave out of its niche and append it to the unassigned graves.

    Returns the locator of the moved grave.
    """
    cemetery = registry.cemetery_at(locator.cemetery_index)
    plot = _niche_plot(registry, locator)
    plot.occupant(locator.niche)
    grave = plot.remove_niche(locator.niche)
    cemetery.graves.append(grave)
    logger.debug(f"Moved '{grave.name}' from {locator.location_label()} to unassigned")
    return GraveInfo(
        cemetery_index=locator.cemetery_index,
        grave=grave,
        plot_index=UNASSIGNED,
        grave_index=len(cemetery.graves) - 1,
    )


def assign_to_niche(registry: GraveRegistry, locator: GraveInfo, plot_index: int, niche_info: NicheInfo) -> GraveInfo:
    """Move an unassigned grave into an empty niche.

    The target is checked before anything changes, so a bad target or an
    occupied niche leaves the registry untouched.

    Raises:
        InvalidLocatorError: If the source is not an unassigned grave or the target does not resolve
        NicheOccupiedError: If the target niche already holds a grave
    """
    cemetery = registry.cemetery_at(locator.cemetery_index)
    if not locator.is_unassigned:
        raise InvalidLocatorError("grave", locator.grave_index, "not an unassigned grave")
    reason = check_index(locator.grave_index, len(cemetery.graves))
    if reason:
        raise InvalidLocatorError("grave", locator.grave_index, reason)

    plot = cemetery.plot_at(plot_index)
    occupant = plot.require_columbarium().resolve(niche_info).raise_if_invalid().niche.grave
    if not occupant.is_placeholder:
        raise NicheOccupiedError(occupant.name, niche_info.face_index, niche_info.row_index, niche_info.niche_index)

    grave = cemetery.graves.pop(locator.grave_index)
    plot.set_niche(niche_info, grave)
    logger.debug(f"Assigned '{grave.name}' to plot {plot_index} niche {niche_info.breadcrumb()}")
    return GraveInfo(
        cemetery_index=locator.cemetery_index,
        grave=grave,
        plot_index=plot_index,
        niche=plot.columbarium.populate_niche_names(niche_info),
    )
