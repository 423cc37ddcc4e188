"""
Infrastructure layer for Grave Finder.

Adapters between the registry model and the outside world. The model never
performs I/O itself; everything that touches the file system lives here.

Packages:
- storage: file-backed registry documents with validated, atomic saves
"""
