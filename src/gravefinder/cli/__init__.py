"""Command-line interface for Grave Finder."""
