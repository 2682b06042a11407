"""
Lost & Found persistence.

Provides the registry store and its storage keys.
"""

from lostfound.database.collections import (
    USERS_KEY,
    ITEMS_KEY,
    NOTIFICATIONS_KEY,
    SESSION_KEY,
)
from lostfound.database.store import RegistryStore

__all__ = [
    "USERS_KEY",
    "ITEMS_KEY",
    "NOTIFICATIONS_KEY",
    "SESSION_KEY",
    "RegistryStore",
]
