"""
File-backed registry document storage.

Documents are read and written as UTF-8 text. A save only replaces the
current file after the new text has been checked to be a JSON object with a
cemeteries array, and the replacement is atomic: the text goes to a
temporary sibling first, which is then renamed over the target.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ...constants import BACKUP_SUFFIX, DOCUMENT_ENCODING
from ...exceptions import DocumentFormatError, FileStorageError, GraveFinderPermissionError
from ...logging import LoggingConfiguration, LoggingContext, TimedOperation, get_logger
from ...models import GraveRegistry
from ...serialization import dumps, loads, validate_document

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    success: bool
    message: str

    def __bool__(self):
        return self.success


class RegistryFileStorage:
    def __init__(self, file_path: Union[str, Path], backup_enabled: bool = True):
        self.file_path = Path(file_path)
        self.backup_enabled = backup_enabled

    @property
    def backup_path(self) -> Path:
        return self.file_path.with_name(self.file_path.name + BACKUP_SUFFIX)

    def exists(self) -> bool:
        return self.file_path.is_file()

    def load_text(self) -> str:
        if not self.file_path.exists():
            raise FileStorageError("load", self.file_path, "file not found")
        if not self.file_path.is_file():
            raise FileStorageError("load", self.file_path, "path exists but is not a file")
        try:
            return self.file_path.read_text(encoding=DOCUMENT_ENCODING)
        except PermissionError as e:
            raise GraveFinderPermissionError(self.file_path, "read") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FileStorageError("load", self.file_path, str(e)) from e

    def load(self) -> GraveRegistry:
        config = LoggingConfiguration(
            entry_msg=f"Loading registry from '{self.file_path}'",
            success_msg=f"Loaded registry from '{self.file_path}'",
            failure_msg=f"Failed to load registry from '{self.file_path}'",
            success_level=logging.DEBUG,
        )
        with LoggingContext(config, logger):
            return loads(self.load_text(), source=str(self.file_path))

    def save(self, registry: GraveRegistry) -> SaveResult:
        return self.save_text(dumps(registry))

    def save_text(self, text: str) -> SaveResult:
        """Validate and store ``text``.

        An invalid document is reported in the result and leaves the file
        untouched. Failures writing a valid document raise.
        """
        try:
            validate_document(text, source=str(self.file_path))
        except DocumentFormatError as e:
            logger.warning(f"Refusing to save '{self.file_path}': {e.reason}")
            return SaveResult(False, f"Invalid JSON: {e.reason}")

        config = LoggingConfiguration(
            entry_msg=f"Saving registry to '{self.file_path}'",
            success_msg=f"Saved registry to '{self.file_path}'",
            failure_msg=f"Failed to save registry to '{self.file_path}'",
        )
        with LoggingContext(config, logger), TimedOperation(
            "storage.save", get_logger(__name__), {"bytes": len(text.encode(DOCUMENT_ENCODING))}
        ):
            self._write_atomic(text)
        return SaveResult(True, "File saved.")

    def _write_atomic(self, text: str) -> None:
        temp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(text, encoding=DOCUMENT_ENCODING)
            if self.backup_enabled and self.file_path.exists():
                shutil.copy2(self.file_path, self.backup_path)
            os.replace(temp_path, self.file_path)
        except PermissionError as e:
            raise GraveFinderPermissionError(self.file_path, "write") from e
        except OSError as e:
            raise FileStorageError("save", self.file_path, str(e)) from e
        finally:
            if temp_path.exists():
                temp_path.unlink()
