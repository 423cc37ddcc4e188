"""Application services built on the registry model."""

from .importer import ImportResult, import_graves, parse_grave_pairs

__all__ = ["ImportResult", "import_graves", "parse_grave_pairs"]
