"""
Grave model.

A grave is the leaf of the registry tree. It only stores what the document
stores (name, dates, state); its validity and sort key are derived from those
fields every time they are read, so they can never go stale.
"""

import enum
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..constants import DEFAULT_GRAVE_DATES, DEFAULT_GRAVE_NAME, GENERATIONAL_SUFFIXES
from .defaults import as_mapping, text_or_default

_TRAILING_PUNCTUATION = re.compile(r"[^\w]$")


class GraveState(enum.IntEnum):
    INTERRED = 0
    RESERVED = 1
    UNAVAILABLE = 2
    UNASSIGNED = 3

    def __str__(self):
        return self.name.capitalize()

    @staticmethod
    def parse(value: Union[int, str, "GraveState", None], default: "GraveState" = None) -> "GraveState":
        """Parse a stored integer or a state name; unknown values give ``default``.

        Raises ValueError only when no default is supplied.
        """
        if isinstance(value, GraveState):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in GraveState.__members__:
                return GraveState[key]
            if key.isdigit():
                value = int(key)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return GraveState(value)
            except ValueError:
                pass
        if default is None:
            valid = ", ".join(str(state) for state in GraveState)
            raise ValueError(f"Invalid grave state {value!r}. Valid states are: {valid}")
        return default


@dataclass
class Grave:
    name: str = DEFAULT_GRAVE_NAME
    dates: str = DEFAULT_GRAVE_DATES
    state: GraveState = GraveState.INTERRED

    def __str__(self) -> str:
        return f"{self.name} ({self.dates})" if self.dates else self.name

    @classmethod
    def from_dict(cls, data: Any) -> "Grave":
        """Build a grave from its stored form, defaulting every missing field."""
        data = as_mapping(data)
        state = data.get("state") if data is not None else None
        return cls(
            name=text_or_default(data, "name", DEFAULT_GRAVE_NAME),
            dates=text_or_default(data, "dates", DEFAULT_GRAVE_DATES),
            state=GraveState.parse(state, default=GraveState.INTERRED),
        )

    @classmethod
    def placeholder(cls) -> "Grave":
        """An empty, unassigned grave filling a niche nobody occupies."""
        return cls(state=GraveState.UNASSIGNED)

    @property
    def valid(self) -> bool:
        return bool(self.name or self.dates)

    @property
    def is_placeholder(self) -> bool:
        return not self.valid and self.state == GraveState.UNASSIGNED

    @property
    def sort_key(self) -> str:
        """Family name first, then the full name, both upper case.

        A trailing "Jr"/"Sr" token is skipped when picking the family name,
        and a single trailing punctuation mark ("Smith,") is dropped from it.
        """
        return f"{self.last_name.upper()} {self.name.upper()}"

    @property
    def last_name(self) -> str:
        tokens = self.name.split()
        if not tokens:
            return ""
        if len(tokens) >= 2 and tokens[-1].upper().rstrip(".") in GENERATIONAL_SUFFIXES:
            return _TRAILING_PUNCTUATION.sub("", tokens[-2])
        return tokens[-1]

    def matches_text(self, query: Optional[str]) -> bool:
        """Case-insensitive substring match against the name."""
        if not query:
            return True
        return query.lower() in self.name.lower()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "dates": self.dates, "state": int(self.state)}
