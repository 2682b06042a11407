"""
Pydantic models for per-user notifications.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from lostfound.schemas.base import SnapshotModel


class Notification(SnapshotModel):
    """Alert addressed to one user, referencing one or more items."""

    id: int
    for_user_id: str
    created_at: datetime
    seen: bool = False
    title: str
    message: str
    matched_item_ids: List[int] = Field(..., min_length=1)

    def is_for(self, user_id: str) -> bool:
        return bool(user_id) and self.for_user_id.lower() == user_id.lower()
