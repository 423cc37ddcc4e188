"""
Registry document storage.
"""

from .file_storage import RegistryFileStorage, SaveResult

__all__ = ["RegistryFileStorage", "SaveResult"]
