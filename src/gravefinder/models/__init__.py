"""
Registry domain models.

The tree is Cemetery -> Plot -> Columbarium -> Face -> Row -> Niche -> Grave,
rooted in a GraveRegistry. Every container is built with ``from_dict``,
which repairs missing or malformed input instead of rejecting it.
"""

from .cemetery import Cemetery
from .columbarium import Columbarium
from .face import Face
from .geo import LatLng
from .grave import Grave, GraveState
from .locators import UNASSIGNED, GraveInfo, NicheInfo, NicheResolution
from .plot import Plot
from .registry import GraveRegistry
from .row import Niche, Row
from .stats import NicheStats

__all__ = [
    "Cemetery",
    "Columbarium",
    "Face",
    "Grave",
    "GraveInfo",
    "GraveRegistry",
    "GraveState",
    "LatLng",
    "Niche",
    "NicheInfo",
    "NicheResolution",
    "NicheStats",
    "Plot",
    "Row",
    "UNASSIGNED",
]
