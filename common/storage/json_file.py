"""
JSON file key-value store.

All keys live in one JSON object on disk. Every write rewrites the whole
file through a temporary file and `os.replace`, so a reader never sees a
half-written file.

Example:
    store = JsonFileKeyValueStore("data/lostfound.json")
    store.set("lostFoundItems", "[]")
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from common.storage.base import KeyValueStore
from common.utils.exceptions import StorageException

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Key-value store persisted as a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store.

        Args:
            path: Location of the JSON file (created on first write)
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read storage file {self._path}: {e}")
            raise StorageException(
                message="Storage file could not be read",
                code="STORAGE_READ_FAILED",
                details={"path": str(self._path)},
            ) from e

        if not isinstance(data, dict):
            raise StorageException(
                message="Storage file is not a JSON object",
                code="STORAGE_CORRUPT",
                details={"path": str(self._path)},
            )
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self._path.parent), prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as e:
            logger.error(f"Failed to write storage file {self._path}: {e}")
            Path(tmp_path).unlink(missing_ok=True)
            raise StorageException(
                message="Storage file could not be written",
                code="STORAGE_WRITE_FAILED",
                details={"path": str(self._path)},
            ) from e

        logger.debug(f"Storage file written: {self._path} ({len(data)} keys)")
