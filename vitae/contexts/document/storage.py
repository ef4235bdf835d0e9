"""
Durable Local Storage

Key-value string storage used by the Record Store. Two backends:
- FileStorage: one file per key under a directory (default: VITAE_STORAGE_PATH)
- MemoryStorage: in-process dict, for tests and throwaway sessions

Writes are synchronous and unbatched; each set() replaces the whole value.
"""

import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from vitae.contexts.document.exceptions import PersistedStateCorrupt

load_dotenv()
STORAGE_PATH = Path(os.getenv("VITAE_STORAGE_PATH", "outs/storage"))


class LocalStorage(ABC):
    """
    Abstract string store keyed by fixed names.

    Subclasses must implement get(), set() and remove(). remove() on a missing
    key is a no-op.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present."""
        pass

    def describe(self) -> str:
        """Human-readable storage location for log messages."""
        return type(self).__name__


class MemoryStorage(LocalStorage):
    """Dict-backed storage."""

    def __init__(self, initial: Dict[str, str] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return self._data.keys()

    def describe(self) -> str:
        return "memory"


class FileStorage(LocalStorage):
    """
    Directory-backed storage: key "resume_builder_data" lives in
    <directory>/resume_builder_data.
    """

    def __init__(self, directory: Path = None):
        """
        Initialize file storage.

        Args:
            directory: Storage directory. Defaults to VITAE_STORAGE_PATH
                       from environment (created on first write)
        """
        if directory is None:
            directory = STORAGE_PATH
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / key

    def get(self, key: str) -> Optional[str]:
        """
        Read the stored string.

        Raises:
            PersistedStateCorrupt: If the file is not valid UTF-8
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PersistedStateCorrupt(f"Stored value is not valid UTF-8 ({e.reason})", key) from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        # Write to temp file first (atomic write pattern)
        temp_fd, temp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(value)

            # Only overwrite original if write succeeded
            shutil.move(temp_path, path)
        except Exception:
            # Clean up temp file if write failed
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def describe(self) -> str:
        return str(self.directory)
