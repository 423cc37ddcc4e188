"""
Centralized logging setup.

The LoggingManager is a process-wide singleton; ``configure`` replaces
whatever handlers the root logger had, so it is safe to call again when the
configuration changes.
"""

import logging
import logging.handlers
import sys
from typing import Optional

from .config import DEFAULT_LOG_FILE, LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .loggers import GraveFinderLogger


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config = None
            self.handlers = []
            self._initialized = True

    @property
    def is_configured(self) -> bool:
        return self.config is not None

    def configure(self, config: LoggingConfig):
        self.config = config

        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.level)

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)

        for name in list(logging.Logger.manager.loggerDict):
            if name.startswith(config.service_name):
                logging.getLogger(name).setLevel(config.level)

    def _add_console_handler(self, config: LoggingConfig):
        if config.format_type == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format_type == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(StructuredFormatter(config.service_name, config.version))
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())
        self._install(handler, config)

    def _add_file_handler(self, config: LoggingConfig):
        """Rotating file handler; the log directory is created when missing."""
        file_path = config.file_path or DEFAULT_LOG_FILE
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        if config.format_type == "json":
            handler.setFormatter(StructuredFormatter(config.service_name, config.version))
        else:
            handler.setFormatter(create_console_formatter())
        self._install(handler, config)

    def _install(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> GraveFinderLogger:
        return GraveFinderLogger(name, correlation_id)


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
