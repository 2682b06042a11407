"""
Lost & Found Schemas.

Pydantic models for the persisted records.
"""

from lostfound.schemas.base import SnapshotModel, coerce_enum, require_text
from lostfound.schemas.user import UserRole, UserProfile, User
from lostfound.schemas.item import ItemType, ItemStatus, ItemFilter, Item
from lostfound.schemas.notification import Notification

__all__ = [
    "SnapshotModel",
    "coerce_enum",
    "require_text",
    "UserRole",
    "UserProfile",
    "User",
    "ItemType",
    "ItemStatus",
    "ItemFilter",
    "Item",
    "Notification",
]
