"""
Shared error handling for file operations.

Maps the OS errors raised while reading or writing support files
(configuration, exports) onto the configuration exception family with
consistent messages.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from ..exceptions.base import ExceptionContext
from ..exceptions.config import ConfigurationError, InvalidConfigurationError

T = TypeVar("T")

logger = logging.getLogger(__name__)

ERROR_TEMPLATES = {
    "file_permission": "Cannot {operation} {file_type}: {error}. Check file permissions for {file_path}",
    "file_not_found": "Cannot {operation} {file_type}: file not found at {file_path}",
}


class FileOperationHandler:
    """Runs an operation on an open file and translates OS errors."""

    @staticmethod
    def safe_file_operation(
        file_path: Union[str, Path],
        operation: Callable[[Any], T],
        mode: str = "rb",
        file_type: str = "file",
        operation_name: str = "access",
        default_on_missing: Optional[T] = None,
    ) -> T:
        """
        Open ``file_path`` and hand the file object to ``operation``.

        Args:
            file_path: Path to the file
            operation: Function called with the open file
            mode: File open mode
            file_type: Description used in error messages
            operation_name: Verb used in error messages
            default_on_missing: Returned instead of raising when a file opened for reading is missing

        Raises:
            ConfigurationError: For missing files and permission errors
            InvalidConfigurationError: For other OS errors
        """
        try:
            with open(file_path, mode) as f:
                return operation(f)
        except FileNotFoundError:
            if "r" in mode and default_on_missing is not None:
                return default_on_missing
            context = ExceptionContext(help_text=f"Create the {file_type} or check the file path")
            raise ConfigurationError(
                format_error_message(
                    "file_not_found", operation=operation_name, file_type=file_type, file_path=file_path
                ),
                context,
            )
        except PermissionError as e:
            context = ExceptionContext(help_text=f"Check file permissions for {file_path}")
            raise ConfigurationError(
                format_error_message(
                    "file_permission",
                    operation=operation_name,
                    file_type=file_type,
                    error=e,
                    file_path=file_path,
                ),
                context,
            )
        except OSError as e:
            logger.debug(f"Failed to {operation_name} {file_path}: {e}")
            raise InvalidConfigurationError("file_operation", str(file_path), f"valid {file_type}") from e


def format_error_message(template_key: str, **kwargs) -> str:
    """
    Format an error message from ERROR_TEMPLATES.

    Raises:
        KeyError: If template_key is unknown
    """
    if template_key not in ERROR_TEMPLATES:
        raise KeyError(f"Unknown error template '{template_key}'. Available: {list(ERROR_TEMPLATES)}")
    return ERROR_TEMPLATES[template_key].format(**kwargs)
