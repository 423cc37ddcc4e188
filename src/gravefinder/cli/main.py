"""Grave Finder CLI main entry point."""

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import ConfigManager, GraveFinderConfig
from ..logging_integration import configure_logging_from_config, get_logger
from .commands import config, edit, search, stats, validate
from .error_handlers import handle_cli_errors


def setup_logging(config: GraveFinderConfig, verbose: int = 0) -> None:
    """Configure logging from the loaded configuration; -v/-vv raise the level."""
    level_override = "DEBUG" if verbose > 1 else "INFO" if verbose else None
    configure_logging_from_config(config, level_override=level_override)
    get_logger("gravefinder.cli").debug("Grave Finder CLI started", version=__version__, verbose_level=verbose)


@click.group()
@click.version_option(version=__version__, prog_name="gravefinder")
@click.option(
    "--config",
    "-C",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--data",
    "-d",
    "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Registry document (overrides general.data_file)",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path], data_file: Optional[Path], verbose: int) -> None:
    """Grave Finder: cemetery and columbarium grave registry.

    \b
    Examples:
        gravefinder stats
        gravefinder search smith --sorted
        gravefinder import names.txt --cemetery 1
        gravefinder move -c 1 --plot 2 --face 1 --row 1 --niche 3
        gravefinder validate --check-roundtrip
    """
    config_manager = ConfigManager(config_file)
    loaded = config_manager.load_config()
    setup_logging(loaded, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = config_manager
    ctx.obj["config"] = loaded
    ctx.obj["data_file"] = data_file or loaded.general.data_file
    ctx.obj["verbose"] = verbose
    logging.getLogger(__name__).debug(f"Using registry document {ctx.obj['data_file']}")


def _register_commands():
    cli.add_command(stats.stats)
    cli.add_command(search.search)
    cli.add_command(search.list_graves)
    cli.add_command(edit.import_command)
    cli.add_command(edit.delete)
    cli.add_command(edit.move)
    cli.add_command(edit.assign)
    cli.add_command(validate.validate)
    cli.add_command(validate.format_command)
    cli.add_command(config.config)


_register_commands()


@handle_cli_errors
def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
