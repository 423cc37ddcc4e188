"""
Addressing exceptions.

Raised when a GraveInfo/NicheInfo locator does not point at a real slot in
the cemetery tree. These always indicate a caller bug (stale or hand-built
indices) and are never silently ignored.
"""

from typing import Any, Optional

from .base import ExceptionContext, GraveFinderError


class AddressingError(GraveFinderError):
    """Base class for locator resolution errors."""


class InvalidLocatorError(AddressingError):
    """Raised when a locator index is not applicable or out of bounds."""

    def __init__(self, segment: str, index: Any, reason: Optional[str] = None):
        self.segment = segment
        self.index = index
        self.reason = reason

        message = f"Invalid locator: {segment} index {index!r}"
        if reason:
            message += f" ({reason})"

        help_text = (
            "Locators are invalidated by structural changes; "
            "collect fresh grave records before retrying"
        )
        context = ExceptionContext(
            help_text=help_text,
            error_code="INVALID_LOCATOR",
            location={segment: index},
        )
        super().__init__(message, context)


class NicheOccupiedError(AddressingError):
    """Raised when a grave is assigned to a niche that already holds one."""

    def __init__(self, occupant: str, face_index: int, row_index: int, niche_index: int):
        self.occupant = occupant

        message = (
            f"Niche {niche_index} of row {row_index} on face {face_index} "
            f"is already occupied by '{occupant}'"
        )
        context = ExceptionContext(
            help_text="Move the current occupant to the unassigned graves first",
            error_code="NICHE_OCCUPIED",
            location={"face": face_index, "row": row_index, "niche": niche_index},
        )
        super().__init__(message, context)
