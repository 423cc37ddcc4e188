"""
Centralized error handling for the CLI.

Every exception family maps to its own exit code and is rendered through
rich with its help text, suggested action and error id.
"""

import logging
import sys
from functools import wraps

from rich.console import Console

from ..constants import (
    EXIT_ADDRESSING_ERROR,
    EXIT_CANCELLED,
    EXIT_CLI_ERROR,
    EXIT_CONFIGURATION_ERROR,
    EXIT_DOCUMENT_ERROR,
    EXIT_GENERAL_ERROR,
    EXIT_PERMISSION_ERROR,
    EXIT_STORAGE_ERROR,
    EXIT_UNEXPECTED_ERROR,
)
from ..exceptions import (
    AddressingError,
    CLIError,
    ConfigurationError,
    DataStorageError,
    DocumentError,
    GraveFinderError,
    GraveFinderPermissionError,
    UserAbortError,
)

console = Console(stderr=True)
logger = logging.getLogger("gravefinder.cli.error")

# Checked in order, so subclasses come before their bases
_ERROR_FAMILIES = [
    (UserAbortError, "Cancelled", "yellow", EXIT_CANCELLED),
    (AddressingError, "Locator Error", "red", EXIT_ADDRESSING_ERROR),
    (ConfigurationError, "Configuration Error", "red", EXIT_CONFIGURATION_ERROR),
    (DocumentError, "Document Error", "red", EXIT_DOCUMENT_ERROR),
    (GraveFinderPermissionError, "Permission Error", "red", EXIT_PERMISSION_ERROR),
    (DataStorageError, "Storage Error", "red", EXIT_STORAGE_ERROR),
    (CLIError, "Command Error", "red", EXIT_CLI_ERROR),
    (GraveFinderError, "Error", "red", EXIT_GENERAL_ERROR),
]


def handle_cli_errors(func):
    """Decorator turning exceptions into formatted messages and exit codes."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            sys.exit(EXIT_CANCELLED)
        except GraveFinderError as e:
            sys.exit(report_error(e))
        except OSError as e:
            console.print(f"[red]System Error: {e}[/red]")
            console.print("[blue]Check file permissions and disk space[/blue]")
            logger.error(f"System error: {e}")
            sys.exit(EXIT_STORAGE_ERROR)
        except Exception as e:
            console.print(f"[red]Unexpected Error: {e}[/red]")
            console.print("[yellow]This may be a bug; rerun with -vv for details[/yellow]")
            logger.exception("Unexpected error occurred")
            sys.exit(EXIT_UNEXPECTED_ERROR)

    return wrapper


def report_error(e: GraveFinderError) -> int:
    """Print ``e`` and return the exit code of its family."""
    for error_type, title, style, exit_code in _ERROR_FAMILIES:
        if isinstance(e, error_type):
            break

    console.print(f"[{style}]{title}: {e.message}[/{style}]", markup=True, highlight=False)
    if e.help_text:
        console.print(f"[blue]Help: {e.help_text}[/blue]")
    if e.user_action:
        console.print(f"[green]Action: {e.user_action}[/green]")
    if e.location_text:
        console.print(f"[dim]Location: {e.location_text}[/dim]")
    console.print(f"[dim]Error ID: {e.correlation_id}[/dim]")

    logger.error(f"{type(e).__name__} ({e.error_code}): {e.message}", extra={"extra_context": e.to_dict()})
    return exit_code
