"""
Plain-text grave import.

The import text is a list of name/dates line pairs: the first line of a
pair is the full name, the second any free-form dates. Dates are kept as
text and never parsed. Pairs with neither a name nor dates are skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..logging import LoggingConfiguration, LoggingContext
from ..models import Cemetery, Grave, GraveState


@dataclass
class ImportResult:
    graves: List[Grave] = field(default_factory=list)
    skipped: int = 0

    @property
    def imported(self) -> int:
        return len(self.graves)

    def __str__(self):
        return f"{self.imported} graves imported, {self.skipped} blank pairs skipped"


def parse_grave_pairs(text: str) -> ImportResult:
    """Turn name/dates line pairs into interred graves."""
    lines = [line.strip() for line in text.splitlines()]
    result = ImportResult()
    for index in range(0, len(lines), 2):
        name = lines[index]
        dates = lines[index + 1] if index + 1 < len(lines) else ""
        grave = Grave(name=name, dates=dates, state=GraveState.INTERRED)
        if grave.valid:
            result.graves.append(grave)
        else:
            result.skipped += 1
    return result


def import_graves(cemetery: Cemetery, text: str) -> ImportResult:
    """Append the graves described by ``text`` to the cemetery's unassigned graves."""
    config = LoggingConfiguration(
        entry_msg=f"Importing graves into '{cemetery.name}'",
        success_msg=f"Imported graves into '{cemetery.name}'",
        failure_msg=f"Failed to import graves into '{cemetery.name}'",
        success_level=logging.DEBUG,
    )
    with LoggingContext(config, logging.getLogger(__name__)):
        result = parse_grave_pairs(text)
        cemetery.add_graves(result.graves)
    return result
