"""Grave search and listing commands."""

import logging
from typing import Optional

import click
from rich.console import Console

from ...addressing import collect_registry_grave_infos, filter_by_state, search_graves, sort_grave_infos
from ...models import GraveState
from ..utils import get_config, grave_table, load_registry, to_index

console = Console()
logger = logging.getLogger(__name__)

STATE_CHOICES = [str(state) for state in GraveState]


@click.command()
@click.argument("query", required=False, default="")
@click.option("--cemetery", "-c", type=click.IntRange(min=1), help="Cemetery number (default: all)")
@click.option("--state", type=click.Choice(STATE_CHOICES, case_sensitive=False), help="Only graves in this state")
@click.option("--sorted", "sort_by_name", is_flag=True, help="Sort by family name")
@click.option("--include-placeholders", is_flag=True, default=None, help="Show graves with no name and no dates")
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    cemetery: Optional[int],
    state: Optional[str],
    sort_by_name: bool,
    include_placeholders: Optional[bool],
) -> None:
    """Find graves whose name contains QUERY (case-insensitive).

    \b
    Examples:
        gravefinder search smith
        gravefinder search --cemetery 1 --state reserved --sorted
    """
    search_config = get_config(ctx).search
    if include_placeholders is None:
        include_placeholders = search_config.include_placeholders
    cemetery_index = to_index(cemetery) if cemetery is not None else search_config.default_cemetery

    _, registry = load_registry(ctx)
    infos = collect_registry_grave_infos(registry, cemetery_index)
    matches = search_graves(infos, query, include_placeholders=include_placeholders)
    matches = filter_by_state(matches, GraveState.parse(state) if state else None)
    if sort_by_name:
        matches = sort_grave_infos(matches)

    logger.debug(f"Search '{query}' matched {len(matches)} of {len(infos)} graves")
    if not matches:
        console.print(f"[yellow]No graves match '{query}'[/yellow]")
        return
    console.print(grave_table(matches, registry, f"{len(matches)} graves"))


@click.command(name="list")
@click.option("--cemetery", "-c", type=click.IntRange(min=1), help="Cemetery number (default: all)")
@click.pass_context
def list_graves(ctx: click.Context, cemetery: Optional[int]) -> None:
    """List every grave: unassigned graves first, then niches in order."""
    _, registry = load_registry(ctx)
    infos = collect_registry_grave_infos(registry, to_index(cemetery))
    console.print(grave_table(infos, registry, f"{len(infos)} graves"))
