"""
Fixtures for invoking CLI commands against a temporary registry.
"""

import io
import logging
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from rich.console import Console

from gravefinder.cli.commands import config, edit, search, stats, validate
from gravefinder.cli.main import cli
from gravefinder.logging import logging_manager


@pytest.fixture
def console():
    """One wide, colourless console standing in for every command's console."""
    wide = Console(file=io.StringIO(), width=200, color_system=None)
    with patch.object(config, "console", wide), patch.object(edit, "console", wide), patch.object(
        search, "console", wide
    ), patch.object(stats, "console", wide), patch.object(validate, "console", wide):
        yield wide


@pytest.fixture
def output(console):
    return lambda: console.file.getvalue()


@pytest.fixture
def invoke(config_file, registry_file, monkeypatch, console):
    """Run the CLI with a temporary config file and registry document."""
    for name in list(os.environ):
        if name.upper().startswith("GRAVEFINDER_"):
            monkeypatch.delenv(name)
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(
            cli,
            ["--config", str(config_file), "--data", str(registry_file), *args],
            input=input,
            obj={},
        )

    yield _invoke

    root_logger = logging.getLogger()
    for handler in logging_manager.handlers:
        root_logger.removeHandler(handler)
        handler.close()
    logging_manager.handlers.clear()
