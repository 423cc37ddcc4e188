"""
Data storage-related exceptions.

All exceptions related to reading and writing registry documents on disk.
"""

from pathlib import Path
from typing import Optional

from .base import ExceptionContext, GraveFinderError


class DataStorageError(GraveFinderError):
    """Base class for data storage-related errors."""


class FileStorageError(DataStorageError):
    """Raised when file storage operations fail."""

    def __init__(self, operation: str, file_path: Path, details: Optional[str] = None):
        self.operation = operation
        self.file_path = file_path

        message = f"File {operation} failed: {file_path}"
        if details:
            message += f" - {details}"

        help_text = (
            f"Check file permissions and available disk space for {file_path.parent}"
        )
        context = ExceptionContext(help_text=help_text, error_code="FILE_STORAGE_ERROR")
        super().__init__(message, context)


class GraveFinderPermissionError(DataStorageError):
    """Raised when file system permissions prevent operations."""

    def __init__(self, path: Path, operation: str = "access"):
        message = f"Permission denied: cannot {operation} {path}"
        help_text = f"Check file/directory permissions for {path}"
        context = ExceptionContext(help_text=help_text, error_code="PERMISSION_DENIED")
        super().__init__(message, context)
