"""
Base exception classes for Grave Finder.

Every error can carry a ``location``: the locator segments (cemetery, plot,
grave, face, row, niche) that were being resolved when it was raised, so the
CLI and the JSON logs can say where in the tree things went wrong.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..constants import LOCATION_SEGMENTS


@dataclass
class ExceptionContext:
    """Context information for Grave Finder exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    user_action: Optional[str] = None
    location: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None


def order_location(location: Dict[str, Any]) -> Dict[str, Any]:
    """Locator segments from the outermost container inwards; unknown keys last."""
    ordered = {segment: location[segment] for segment in LOCATION_SEGMENTS if segment in location}
    ordered.update((key, value) for key, value in location.items() if key not in ordered)
    return ordered


class GraveFinderError(Exception):
    """Base exception for all Grave Finder errors.

    Attributes:
        message: The error message
        help_text: Optional actionable guidance for the user
        error_code: Optional error code for programmatic handling
        user_action: Suggested user action to resolve the issue
        location: Locator segments naming the slot involved, outermost first
        correlation_id: Unique ID for tracking this error across logs
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        self.message = message

        context = context or ExceptionContext()
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.user_action = context.user_action
        self.location = order_location(context.location)
        self.correlation_id = context.correlation_id or str(uuid.uuid4())[:8]

        self.timestamp = datetime.now()
        super().__init__(message)

    @property
    def location_text(self) -> str:
        """``"plot 1, niche 4"`` style rendering of :attr:`location`."""
        return ", ".join(f"{segment} {index}" for segment, index in self.location.items() if index is not None)

    def __str__(self) -> str:
        result = self.message

        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        if self.user_action:
            result += f"\n\nAction: {self.user_action}"

        if self.location_text:
            result += f"\n\nLocation: {self.location_text}"

        result += f"\n\nError ID: {self.correlation_id}"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "location": self.location,
            "help_text": self.help_text,
            "user_action": self.user_action,
        }
