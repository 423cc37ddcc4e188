"""
Integration between the configuration system and logging.

Turns the pydantic logging section into a LoggingConfig and installs it,
and hands out structured loggers that make sure logging is set up.
"""

from typing import Optional

from . import __version__
from .core.config import GraveFinderConfig
from .logging import GraveFinderLogger
from .logging import LoggingConfig as LogConfig
from .logging import configure_logging
from .logging import get_logger as _get_logger
from .logging.config import SERVICE_NAME

_logging_configured = False


def configure_logging_from_config(config: GraveFinderConfig, level_override: Optional[str] = None):
    """Install handlers described by ``config.general.logging``.

    ``level_override`` wins over the configured level (used by ``--verbose``).
    """
    global _logging_configured

    logging_config = config.general.logging
    log_config = LogConfig(
        level=level_override or logging_config.level.value,
        format_type=logging_config.format,
        output=logging_config.output,
        file_path=logging_config.file_path,
        max_file_size=logging_config.max_file_size,
        backup_count=logging_config.backup_count,
        service_name=SERVICE_NAME,
        version=__version__,
    )
    configure_logging(log_config)
    _logging_configured = True


def ensure_logging_configured():
    """Install a console configuration if nothing has been configured yet."""
    global _logging_configured

    if not _logging_configured:
        configure_logging(LogConfig(level="WARNING", format_type="console", output=["console"], version=__version__))
        _logging_configured = True


def get_logger(name: str, correlation_id: Optional[str] = None) -> GraveFinderLogger:
    ensure_logging_configured()
    return _get_logger(name, correlation_id)
