"""
Registry document exceptions.

Raised when text handed to the core cannot be treated as a registry document
at all. Incomplete documents are repaired instead and never raise.
"""

from typing import Optional

from .base import ExceptionContext, GraveFinderError


class DocumentError(GraveFinderError):
    """Base class for registry document errors."""


class DocumentFormatError(DocumentError):
    """Raised when the document is not a JSON object with a cemeteries array."""

    def __init__(self, reason: str, source: Optional[str] = None):
        self.reason = reason
        self.source = source

        message = f"Invalid registry document: {reason}"
        if source:
            message += f" [{source}]"

        help_text = (
            "The document must be a JSON object with a 'cemeteries' array; "
            "run 'gravefinder validate' to inspect it"
        )
        context = ExceptionContext(help_text=help_text, error_code="INVALID_DOCUMENT")
        super().__init__(message, context)
