"""
Configuration management for Grave Finder.

Usage:
    from gravefinder.core.config import ConfigManager

    config = ConfigManager().load_config()
    data_file = config.general.data_file
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .manager import ConfigManager
from .models import (
    GeneralConfig,
    GraveFinderConfig,
    GraveFinderSettings,
    LoggingConfig,
    LogLevel,
    SearchConfig,
)


__all__ = [
    "ConfigManager",
    "ConfigurationError",
    "ConfigurationValidationError",
    "GeneralConfig",
    "GraveFinderConfig",
    "GraveFinderSettings",
    "InvalidConfigurationError",
    "LogLevel",
    "LoggingConfig",
    "MissingConfigurationError",
    "SearchConfig",
]
