"""Niche occupancy statistics command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...models import GraveState
from ..utils import load_registry, to_index

console = Console()


@click.command()
@click.option("--cemetery", "-c", type=click.IntRange(min=1), help="Cemetery number (default: all)")
@click.pass_context
def stats(ctx: click.Context, cemetery: Optional[int]) -> None:
    """Show grave counts by state for each cemetery.

    Empty niches count as Unassigned.

    \b
    Examples:
        gravefinder stats
        gravefinder stats --cemetery 2
    """
    _, registry = load_registry(ctx)

    if cemetery is None:
        selected = list(enumerate(registry.cemeteries))
    else:
        selected = [(to_index(cemetery), registry.cemetery_at(to_index(cemetery)))]

    table = Table(title="Grave Statistics")
    table.add_column("#", style="dim")
    table.add_column("Cemetery", style="cyan")
    for state in GraveState:
        table.add_column(str(state), justify="right")
    table.add_column("Total", justify="right", style="bold")

    for index, item in selected:
        counts = item.get_stats()
        table.add_row(
            str(index + 1),
            item.name or "",
            *(str(counts.count(state)) for state in GraveState),
            str(counts.total),
        )

    console.print(table)
