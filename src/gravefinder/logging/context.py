"""
Entry/success/failure logging around a block of work.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .loggers import GraveFinderLogger
from .manager import logging_manager


@dataclass
class LoggingConfiguration:
    """Messages and levels for one LoggingContext."""

    entry_msg: Optional[str] = None
    success_msg: Optional[str] = None
    failure_msg: Optional[str] = None
    entry_level: int = logging.DEBUG
    success_level: int = logging.INFO
    failure_level: int = logging.ERROR


class LoggingContext:
    """Log a message on entry, and another on success or failure of the block.

    Exceptions are logged, never swallowed.
    """

    def __init__(
        self,
        config: LoggingConfiguration,
        logger: Union[GraveFinderLogger, logging.Logger, None] = None,
    ):
        self.config = config
        if isinstance(logger, GraveFinderLogger):
            self.logger = logger
        else:
            self.logger = logging_manager.get_logger(logger.name if logger else __name__)

    def _emit(self, level: int, msg: Optional[str], **kwargs):
        if msg:
            self.logger._log(level, msg, **kwargs)

    def __enter__(self):
        self._emit(self.config.entry_level, self.config.entry_msg)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self._emit(self.config.success_level, self.config.success_msg)
        else:
            self._emit(self.config.failure_level, self.config.failure_msg, error=str(exc_value))
        return False
