"""
Grave Finder: a cemetery and columbarium grave registry.

The registry is a tree of cemeteries, plots, columbarium faces, rows and
niches, stored as a hand-diffable JSON text document.
"""

__version__ = "1.0.0"
