"""
In-process key-value store.

Used in tests and when no persistent storage is configured.
"""

from typing import Dict, Optional

from common.storage.base import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store; contents live as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
