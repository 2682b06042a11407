"""
Abstract key-value store interface.

Defines the contract the persistence layer relies on. Values are opaque
text snapshots; each key holds one complete snapshot that is read and
written as a whole.

Example:
    from common.storage import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore

    def get_store(settings) -> KeyValueStore:
        if settings.STORAGE_BACKEND == "file":
            return JsonFileKeyValueStore(settings.STORAGE_PATH)
        return MemoryKeyValueStore()
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract key-value store.

    Implementations must be synchronous; a `set` is complete when it returns.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored text, or None if the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the value stored under a key.

        Args:
            key: Storage key
            value: Text snapshot to store
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.

        Args:
            key: Storage key
        """
        pass
