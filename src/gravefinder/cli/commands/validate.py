"""Document validation and canonical formatting commands."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...models import GraveRegistry
from ...serialization import dumps, loads
from ..utils import get_storage, save_registry

console = Console()


def _count(registry: GraveRegistry) -> dict:
    plots = [plot for cemetery in registry.cemeteries for plot in cemetery.plots]
    return {
        "Cemeteries": len(registry.cemeteries),
        "Plots": len(plots),
        "Columbaria": sum(1 for plot in plots if plot.columbarium is not None),
        "Unassigned graves": sum(len(cemetery.graves) for cemetery in registry.cemeteries),
        "Niches": sum(plot.get_stats().total for plot in plots),
    }


@click.command()
@click.option("--check-roundtrip", is_flag=True, help="Verify that writing and re-reading reproduces the text")
@click.pass_context
def validate(ctx: click.Context, check_roundtrip: bool) -> None:
    """Load the registry document and report what it holds.

    Missing or malformed fields are repaired on load; if the repaired,
    canonical text differs from the stored text, run 'gravefinder format'.
    """
    storage = get_storage(ctx)
    text = storage.load_text()
    registry = loads(text, source=str(storage.file_path))
    canonical = dumps(registry)

    table = Table(title=f"Registry {storage.file_path}")
    table.add_column("Item", style="cyan")
    table.add_column("Count", justify="right")
    for item, count in _count(registry).items():
        table.add_row(item, str(count))
    console.print(table)

    if canonical == text:
        console.print("[green]✓ Document is in canonical form[/green]")
    else:
        console.print("[yellow]Document differs from its canonical form (repairs or formatting)[/yellow]")

    if check_roundtrip:
        if dumps(loads(canonical)) == canonical:
            console.print("[green]✓ Round trip reproduces the canonical text[/green]")
        else:
            raise click.ClickException("round trip changed the canonical text")


@click.command(name="format")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write here instead of in place")
@click.pass_context
def format_command(ctx: click.Context, output: Optional[Path]) -> None:
    """Rewrite the document in canonical form, repairing missing fields."""
    storage = get_storage(ctx)
    registry = storage.load()

    target = get_storage(ctx, output) if output else storage
    save_registry(target, registry)
    console.print(f"[green]✓ Wrote canonical document to {target.file_path}[/green]")
