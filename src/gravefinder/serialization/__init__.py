"""Registry text format."""

from .builder import TextBuilder, to_json
from .codec import dumps, loads, parse_document, validate_document
from .writer import (
    serialize_cemetery,
    serialize_columbarium,
    serialize_face,
    serialize_grave,
    serialize_plot,
    serialize_registry,
    serialize_row,
)

__all__ = [
    "TextBuilder",
    "dumps",
    "loads",
    "parse_document",
    "serialize_cemetery",
    "serialize_columbarium",
    "serialize_face",
    "serialize_grave",
    "serialize_plot",
    "serialize_registry",
    "serialize_row",
    "to_json",
    "validate_document",
]
