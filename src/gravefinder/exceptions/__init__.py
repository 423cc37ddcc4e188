"""
Grave Finder Exception Hierarchy

Every exception carries an actionable message and, where one applies, the
locator segments it was raised for, so that the CLI and any other
collaborator can report problems consistently.

Exception Hierarchy:
    GraveFinderError (base)
    ├── AddressingError
    │   ├── InvalidLocatorError
    │   └── NicheOccupiedError
    ├── DocumentError
    │   └── DocumentFormatError
    ├── DataStorageError
    │   ├── FileStorageError
    │   └── GraveFinderPermissionError
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   ├── MissingConfigurationError
    │   └── ConfigurationValidationError
    └── CLIError
        ├── InvalidCommandError
        ├── MissingArgumentError
        └── UserAbortError
"""

from .addressing import AddressingError, InvalidLocatorError, NicheOccupiedError
from .base import ExceptionContext, GraveFinderError
from .cli import CLIError, InvalidCommandError, MissingArgumentError, UserAbortError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .document import DocumentError, DocumentFormatError
from .storage import DataStorageError, FileStorageError, GraveFinderPermissionError

__all__ = [
    # Base
    "GraveFinderError",
    "ExceptionContext",
    # Addressing
    "AddressingError",
    "InvalidLocatorError",
    "NicheOccupiedError",
    # Documents
    "DocumentError",
    "DocumentFormatError",
    # Storage
    "DataStorageError",
    "FileStorageError",
    "GraveFinderPermissionError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
    # CLI
    "CLIError",
    "InvalidCommandError",
    "MissingArgumentError",
    "UserAbortError",
]
