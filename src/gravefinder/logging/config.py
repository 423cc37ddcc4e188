"""
Logging configuration.

Plain settings object consumed by the LoggingManager; the application's
pydantic configuration is converted into one of these at startup.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES

SERVICE_NAME = "gravefinder"
DEFAULT_LOG_FILE = Path("logs/gravefinder.log")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file" or both
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = SERVICE_NAME,
        version: str = "unknown",
    ):
        self.level = level if isinstance(level, int) else logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            raise ValueError(f"Unknown log level: {level}")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version
