"""
Pydantic models for lost/found item reports.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from lostfound.schemas.base import SnapshotModel


class ItemType(str, Enum):
    LOST = "lost"
    FOUND = "found"

    @property
    def opposite(self) -> "ItemType":
        return ItemType.FOUND if self is ItemType.LOST else ItemType.LOST


class ItemStatus(str, Enum):
    ACTIVE = "active"
    CLAIMED = "claimed"


class ItemFilter(str, Enum):
    """Browse filter values. `lost`/`found` select unclaimed items of that type."""
    ACTIVE = "active"
    CLAIMED = "claimed"
    LOST = "lost"
    FOUND = "found"


class Item(SnapshotModel):
    """A lost or found report."""

    id: int
    type: ItemType
    name: str
    location: str
    description: Optional[str] = None
    date: dt.date
    reporter_name: str
    reporter_user_id: str
    status: ItemStatus = ItemStatus.ACTIVE
    image: Optional[str] = None  # data URL

    @property
    def is_claimed(self) -> bool:
        return self.status is ItemStatus.CLAIMED

    def matches_filter(self, item_filter: ItemFilter) -> bool:
        if self.status.value == item_filter.value:
            return True
        if item_filter in (ItemFilter.LOST, ItemFilter.FOUND):
            return self.type.value == item_filter.value and not self.is_claimed
        return False

    def matches_search(self, text: str) -> bool:
        needle = text.lower()
        return needle in self.name.lower() or needle in self.location.lower()
