"""
Helpers shared by the CLI commands.

Positions on the command line and in tables are 1-based; they are turned
into 0-based locator indices here and nowhere else.
"""

from pathlib import Path
from typing import Iterable, Optional, Tuple

import click
from rich.table import Table

from ..core.config import GraveFinderConfig
from ..exceptions import FileStorageError, InvalidCommandError, MissingArgumentError
from ..infrastructure.storage import RegistryFileStorage
from ..models import UNASSIGNED, GraveInfo, GraveRegistry, NicheInfo

NICHE_OPTIONS = ("--plot", "--face", "--row", "--niche")


def to_index(number: Optional[int]) -> Optional[int]:
    return None if number is None else number - 1


def get_config(ctx: click.Context) -> GraveFinderConfig:
    return ctx.obj["config"]


def get_storage(ctx: click.Context, path: Optional[Path] = None) -> RegistryFileStorage:
    config = get_config(ctx)
    return RegistryFileStorage(path or ctx.obj["data_file"], backup_enabled=config.general.backup_enabled)


def load_registry(ctx: click.Context) -> Tuple[RegistryFileStorage, GraveRegistry]:
    storage = get_storage(ctx)
    return storage, storage.load()


def save_registry(storage: RegistryFileStorage, registry: GraveRegistry) -> None:
    result = storage.save(registry)
    if not result.success:
        raise FileStorageError("save", storage.file_path, result.message)


def niche_info(face: Optional[int], row: Optional[int], niche: Optional[int]) -> NicheInfo:
    return NicheInfo(face_index=to_index(face), row_index=to_index(row), niche_index=to_index(niche))


def require_niche_options(command: str, plot, face, row, niche) -> None:
    for option, value in zip(NICHE_OPTIONS, (plot, face, row, niche)):
        if value is None:
            raise MissingArgumentError(option, command)


def build_locator(
    command: str,
    cemetery: int,
    grave: Optional[int] = None,
    plot: Optional[int] = None,
    face: Optional[int] = None,
    row: Optional[int] = None,
    niche: Optional[int] = None,
) -> GraveInfo:
    """Locator for an unassigned grave (``grave``) or for a niche (the other four)."""
    has_niche = any(value is not None for value in (plot, face, row, niche))
    if grave is not None and has_niche:
        raise InvalidCommandError(command, "use either --grave or the niche options, not both")
    if grave is not None:
        return GraveInfo(cemetery_index=to_index(cemetery), grave=None, plot_index=UNASSIGNED, grave_index=to_index(grave))
    if not has_niche:
        raise MissingArgumentError("--grave or " + "/".join(NICHE_OPTIONS), command)
    require_niche_options(command, plot, face, row, niche)
    return GraveInfo(
        cemetery_index=to_index(cemetery),
        grave=None,
        plot_index=to_index(plot),
        niche=niche_info(face, row, niche),
    )


def position_label(info: GraveInfo) -> str:
    """Compact 1-based position usable as command options."""
    if info.is_unassigned:
        return f"G{info.grave_index + 1}"
    niche = info.niche
    return f"P{info.plot_index + 1} F{niche.face_index + 1} R{niche.row_index + 1} N{niche.niche_index + 1}"


def grave_table(infos: Iterable[GraveInfo], registry: GraveRegistry, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Cemetery", style="cyan")
    table.add_column("Position", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Dates")
    table.add_column("State")
    table.add_column("Location", style="green")

    for info in infos:
        cemetery = registry.cemeteries[info.cemetery_index]
        table.add_row(
            f"{info.cemetery_index + 1}. {cemetery.name or ''}",
            position_label(info),
            info.grave.name,
            info.grave.dates,
            str(info.grave.state),
            info.location_label(),
        )
    return table
