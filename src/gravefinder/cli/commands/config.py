"""Configuration management command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.config import ConfigManager
from ...exceptions import UserAbortError

console = Console()


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--export", type=click.Path(dir_okay=False, path_type=Path), help="Export configuration to file")
@click.option("--reset", is_flag=True, help="Reset configuration to defaults")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def config(ctx: click.Context, show: bool, export: Optional[Path], reset: bool, yes: bool) -> None:
    """Show, export or reset the configuration.

    \b
    Examples:
        gravefinder config --show
        gravefinder config --export gravefinder.toml
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]

    if reset:
        if not yes and not click.confirm("Reset all configuration to defaults?"):
            raise UserAbortError("reset not confirmed")
        config_manager.reset_config()
        console.print(f"[green]✓ Configuration reset to defaults ({config_manager.config_file})[/green]")
        return

    if export:
        config_manager.export_config(export)
        console.print(f"[green]✓ Configuration exported to {export}[/green]")
        return

    show_configuration(config_manager, ctx.obj["data_file"])


def show_configuration(config_manager: ConfigManager, data_file: Path) -> None:
    current = config_manager.load_config()
    logging_config = current.general.logging

    table = Table(title="Grave Finder Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Config File", str(config_manager.config_file))
    table.add_row("Data File", str(data_file))
    table.add_row("Backup On Save", str(current.general.backup_enabled))
    table.add_row("Log Level", logging_config.level.value)
    table.add_row("Log Format", logging_config.format)
    table.add_row("Log Output", ", ".join(logging_config.output))
    default_cemetery = current.search.default_cemetery
    table.add_row("Default Cemetery", "all" if default_cemetery is None else str(default_cemetery + 1))
    table.add_row("Include Placeholders", str(current.search.include_placeholders))

    console.print(table)
