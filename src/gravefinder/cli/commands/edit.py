"""Commands that change the registry: import, delete, move and assign."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ...addressing import assign_to_niche, delete_grave, move_to_unassigned
from ...exceptions import UserAbortError
from ...logging_integration import get_logger
from ...services import import_graves
from ..utils import build_locator, load_registry, niche_info, require_niche_options, save_registry, to_index

console = Console()

cemetery_option = click.option(
    "--cemetery", "-c", type=click.IntRange(min=1), required=True, help="Cemetery number"
)
grave_option = click.option("--grave", "-g", type=click.IntRange(min=1), help="Unassigned grave number")


def niche_options(func):
    for option in reversed(
        [
            click.option("--plot", type=click.IntRange(min=1), help="Plot number"),
            click.option("--face", type=click.IntRange(min=1), help="Columbarium face number"),
            click.option("--row", type=click.IntRange(min=1), help="Row number on the face"),
            click.option("--niche", type=click.IntRange(min=1), help="Niche number in the row"),
        ]
    ):
        func = option(func)
    return func


@click.command(name="import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@cemetery_option
@click.pass_context
def import_command(ctx: click.Context, source: Path, cemetery: int) -> None:
    """Import name/dates line pairs from SOURCE as unassigned graves.

    Line one of each pair is the full name, line two the dates. Pairs with
    both lines blank are skipped.
    """
    storage, registry = load_registry(ctx)
    target = registry.cemetery_at(to_index(cemetery))

    result = import_graves(target, source.read_text(encoding="utf-8"))
    save_registry(storage, registry)

    get_logger(__name__).info(
        "Imported graves", cemetery=cemetery, imported=result.imported, skipped=result.skipped, source=str(source)
    )
    console.print(f"[green]✓ {result} into '{target.name}'[/green]")


@click.command()
@cemetery_option
@grave_option
@niche_options
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx, cemetery, grave, plot, face, row, niche, yes) -> None:
    """Delete an unassigned grave, or empty a niche.

    Deleting an unassigned grave renumbers the graves after it.

    \b
    Examples:
        gravefinder delete -c 1 --grave 3
        gravefinder delete -c 1 --plot 2 --face 1 --row 3 --niche 4
    """
    locator = build_locator("delete", cemetery, grave, plot, face, row, niche)
    storage, registry = load_registry(ctx)

    if not yes and not click.confirm("Delete this grave?"):
        raise UserAbortError("delete not confirmed")

    removed = delete_grave(registry, locator)
    save_registry(storage, registry)
    console.print(f"[green]✓ Deleted '{removed}'[/green]")


@click.command()
@cemetery_option
@niche_options
@click.pass_context
def move(ctx, cemetery, plot, face, row, niche) -> None:
    """Move the grave in a niche to the unassigned graves."""
    locator = build_locator("move", cemetery, None, plot, face, row, niche)
    storage, registry = load_registry(ctx)

    moved = move_to_unassigned(registry, locator)
    save_registry(storage, registry)
    console.print(f"[green]✓ Moved '{moved.grave}' to unassigned grave {moved.grave_index + 1}[/green]")


@click.command()
@cemetery_option
@click.option("--grave", "-g", type=click.IntRange(min=1), required=True, help="Unassigned grave number")
@niche_options
@click.pass_context
def assign(ctx, cemetery, grave, plot, face, row, niche) -> None:
    """Put an unassigned grave into an empty niche."""
    require_niche_options("assign", plot, face, row, niche)
    locator = build_locator("assign", cemetery, grave)
    storage, registry = load_registry(ctx)

    assigned = assign_to_niche(registry, locator, to_index(plot), niche_info(face, row, niche))
    save_registry(storage, registry)
    console.print(f"[green]✓ Assigned '{assigned.grave}' to {assigned.location_label()}[/green]")
