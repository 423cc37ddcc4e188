"""
Log formatters: JSON lines, plain console and rich terminal output.

JSON records gather locator segments (``cemetery``, ``plot``, ``niche`` ...)
from the record's context into one ``location`` object, the same shape
``GraveFinderError.to_dict`` uses, so log processors can filter on where in
the tree an event happened.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler

from ..constants import LOCATION_SEGMENTS
from .config import SERVICE_NAME


def split_location(context: Dict[str, Any]):
    """Separate locator segments from the rest of a record's context."""
    rest = dict(context)
    location = dict(rest.pop("location", None) or {})
    for segment in LOCATION_SEGMENTS:
        if segment in rest:
            location[segment] = rest.pop(segment)
    return location, rest


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = SERVICE_NAME, version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "correlation_id"):
            log_entry["correlation_id"] = record.correlation_id

        if hasattr(record, "extra_context"):
            location, rest = split_location(record.extra_context)
            # Timings from TimedOperation and @timed
            if "duration" in rest:
                log_entry["duration_ms"] = rest.pop("duration")
            for key, value in rest.items():
                log_entry.setdefault(key, value)
            if location:
                log_entry["location"] = location

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


def create_console_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_rich_handler() -> logging.Handler:
    """Rich handler writing to stderr so command output on stdout stays clean."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
