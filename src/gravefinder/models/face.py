"""
Columbarium face model.

A face is one side of a columbarium, made up of a fixed number of rows.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from ..constants import (
    DEFAULT_COLUMBARIUM_NAME,
    DEFAULT_FACE_NAME,
    DEFAULT_NUM_ROWS,
    DEFAULT_SHORT_NAME,
)
from .defaults import as_list, as_mapping, build_fixed, count_or_default, text_or_default
from .row import Row

logger = logging.getLogger(__name__)


@dataclass
class Face:
    columbarium_name: str = DEFAULT_COLUMBARIUM_NAME
    face_name: str = DEFAULT_FACE_NAME
    short_name: str = DEFAULT_SHORT_NAME
    num_rows: int = DEFAULT_NUM_ROWS
    rows: List[Row] = field(default_factory=list)

    def __post_init__(self):
        if len(self.rows) != self.num_rows:
            self.rows = build_fixed(self.rows, self.num_rows, lambda row: row or Row())

    @classmethod
    def from_dict(cls, data: Any) -> "Face":
        data = as_mapping(data)
        if data is None:
            return cls()

        num_rows = count_or_default(data, "numRows", DEFAULT_NUM_ROWS)
        rows = as_list(data.get("rows"))
        if len(rows) > num_rows:
            logger.debug(f"Face declares {num_rows} rows but holds {len(rows)}; extra rows dropped")

        return cls(
            columbarium_name=text_or_default(data, "columbariumName", DEFAULT_COLUMBARIUM_NAME),
            face_name=text_or_default(data, "faceName", DEFAULT_FACE_NAME),
            short_name=text_or_default(data, "shortName", DEFAULT_SHORT_NAME),
            num_rows=num_rows,
            rows=build_fixed(rows, num_rows, Row.from_dict),
        )

    @property
    def full_name(self) -> str:
        return f"{self.columbarium_name}, {self.face_name}"
