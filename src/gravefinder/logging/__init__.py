"""
Grave Finder logging package.

- config: LoggingConfig settings object
- formatters: JSON, console and rich output
- loggers: GraveFinderLogger with correlation ids and context
- performance: timing helpers
- manager: the LoggingManager singleton that installs handlers
- context: entry/success/failure messages around a block
"""

from .config import LoggingConfig
from .context import LoggingConfiguration, LoggingContext
from .formatters import StructuredFormatter
from .loggers import GraveFinderLogger
from .manager import LoggingManager, configure_logging, logging_manager
from .performance import TimedOperation, timed

get_logger = logging_manager.get_logger

__all__ = [
    "GraveFinderLogger",
    "LoggingConfig",
    "LoggingConfiguration",
    "LoggingContext",
    "LoggingManager",
    "StructuredFormatter",
    "TimedOperation",
    "configure_logging",
    "get_logger",
    "logging_manager",
    "timed",
]
