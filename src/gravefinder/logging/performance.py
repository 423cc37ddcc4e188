"""
Timing helpers for load, save and serialization.

Durations are logged at DEBUG level so they only show up with ``--verbose``.
"""

import logging
import time
from functools import wraps
from typing import Any, Dict, Optional

from .loggers import GraveFinderLogger, get_logger


class TimedOperation:
    """Context manager that logs how long its body took."""

    def __init__(
        self,
        operation: str,
        logger: Optional[GraveFinderLogger] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger(f"performance.{operation}")
        self.context = context or {}
        self.start_time = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting operation: {self.operation}", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return

        self.duration_ms = (time.perf_counter() - self.start_time) * 1000
        if exc_type is None:
            self.logger.debug(
                f"Completed operation: {self.operation} in {self.duration_ms:.2f}ms",
                operation=self.operation,
                duration=self.duration_ms,
                status="success",
                **self.context,
            )
        else:
            self.logger.error(
                f"Failed operation: {self.operation} after {self.duration_ms:.2f}ms: {exc_val}",
                operation=self.operation,
                duration=self.duration_ms,
                status="failed",
                error_type=exc_type.__name__,
                **self.context,
            )


def timed(operation: Optional[str] = None, logger: Optional[GraveFinderLogger] = None):
    """Decorator logging the duration of every call."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            op_name = operation or f"{func.__module__}.{func.__name__}"
            perf_logger = logger or get_logger(f"{func.__module__}.performance")
            if not perf_logger.logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                perf_logger.error(
                    f"Function '{op_name}' failed after {duration_ms:.2f}ms: {e}",
                    operation=op_name,
                    duration=duration_ms,
                    status="failed",
                    error_type=type(e).__name__,
                )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            perf_logger.debug(
                f"Function '{op_name}' completed in {duration_ms:.2f}ms",
                operation=op_name,
                duration=duration_ms,
                status="success",
            )
            return result

        return wrapper

    return decorator
