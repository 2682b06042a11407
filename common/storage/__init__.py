"""
Storage module - Synchronous key-value stores holding text snapshots.

Usage:
    from common.storage import MemoryKeyValueStore

    store = MemoryKeyValueStore()
    store.set("lostFoundUsers", "[]")
"""

from common.storage.base import KeyValueStore
from common.storage.memory import MemoryKeyValueStore
from common.storage.json_file import JsonFileKeyValueStore

__all__ = ["KeyValueStore", "MemoryKeyValueStore", "JsonFileKeyValueStore"]
