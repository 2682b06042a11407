"""
Item registry for lost/found reports.

Handles report submission, the active -> claimed transition and browse queries.
"""

import datetime as dt
import logging
from typing import Optional, List, Union

from common.utils import TimestampIdGenerator
from common.utils.exceptions import (
    ForbiddenException,
    NotFoundException,
    ValidationException,
)
from lostfound.database import RegistryStore
from lostfound.schemas import (
    Item,
    ItemFilter,
    ItemStatus,
    ItemType,
    UserProfile,
    coerce_enum,
    require_text,
)

logger = logging.getLogger(__name__)


class ItemRegistry:
    """
    Holds lost/found reports.

    Items are never deleted; the only mutation is status active -> claimed.
    """

    def __init__(
        self,
        store: RegistryStore,
        id_generator: Optional[TimestampIdGenerator] = None,
    ):
        """
        Initialize ItemRegistry.

        Args:
            store: Registry store holding the items collection
            id_generator: Item id source (defaults to a timestamp generator)
        """
        self._store = store
        self._ids = id_generator or TimestampIdGenerator()
        self._ids.observe(item.id for item in store.items)

    def submit_item(
        self,
        item_type: Union[ItemType, str],
        name: str,
        location: str,
        description: Optional[str],
        date: Union[dt.date, str, None],
        reporter: UserProfile,
        image: Optional[str] = None,
    ) -> Item:
        """
        Create a new active report.

        Args:
            item_type: lost | found
            name: What the item is
            location: Where it was lost or found
            description: Optional free text
            date: ISO date (YYYY-MM-DD) or date
            reporter: Submitting user
            image: Optional data URL, already resolved

        Returns:
            Created item

        Raises:
            ValidationException: Unknown type, blank name/location/date or bad date
        """
        item_type = coerce_enum(ItemType, item_type, "type")
        name = require_text(name, "name")
        location = require_text(location, "location")
        item_date = self._parse_date(date)
        description = (description or "").strip() or None

        item = Item(
            id=self._ids.next_id(),
            type=item_type,
            name=name,
            location=location,
            description=description,
            date=item_date,
            reporter_name=reporter.name,
            reporter_user_id=reporter.id,
            status=ItemStatus.ACTIVE,
            image=image,
        )
        self._store.commit_items([*self._store.items, item])

        logger.info(f"Item {item.id} reported as {item.type.value} by {reporter.id}")
        return item

    def get(self, item_id: int) -> Optional[Item]:
        return next((it for it in self._store.items if it.id == item_id), None)

    def mark_claimed(self, item_id: int, acting_user: Optional[UserProfile]) -> Item:
        """
        Finalize an item as claimed.

        Args:
            item_id: Item to update
            acting_user: Current user; must be the reporter or an admin

        Returns:
            The claimed item

        Raises:
            NotFoundException: Unknown item
            ForbiddenException: No session, or not the reporter and not an admin
        """
        item = self.get(item_id)
        if not item:
            raise NotFoundException(
                message="Item not found",
                code="ITEM_NOT_FOUND",
                details={"itemId": item_id},
            )

        if acting_user is None or not (
            acting_user.same_user(item.reporter_user_id) or acting_user.is_admin
        ):
            raise ForbiddenException(
                message="Only the reporter or an admin can mark this item as claimed",
                code="NOT_ITEM_OWNER",
                details={"itemId": item_id},
            )

        if item.is_claimed:
            return item

        claimed = item.model_copy(update={"status": ItemStatus.CLAIMED})
        self._store.commit_items(
            [claimed if it.id == item_id else it for it in self._store.items]
        )

        logger.info(f"Item {item_id} marked as claimed by {acting_user.id}")
        return claimed

    def query(
        self,
        filter_status: Union[ItemFilter, str, None] = None,
        search_text: Optional[str] = None,
    ) -> List[Item]:
        """
        Browse items, most recent first.

        Args:
            filter_status: active | claimed | lost | found. `lost`/`found`
                match unclaimed items of that type as well as items whose
                status equals the filter.
            search_text: Case-insensitive substring of name or location

        Returns:
            Matching items, descending by id

        Raises:
            ValidationException: Unknown filter value
        """
        if isinstance(filter_status, str):
            filter_status = filter_status.strip() or None
        item_filter = coerce_enum(ItemFilter, filter_status, "filter") if filter_status else None
        search = (search_text or "").strip()

        results = [
            it for it in self._store.items
            if (item_filter is None or it.matches_filter(item_filter))
            and (not search or it.matches_search(search))
        ]
        return sorted(results, key=lambda it: it.id, reverse=True)

    def items_by_owner(self, user_id: str) -> List[Item]:
        """Reports submitted by a user, most recent first."""
        if not user_id:
            return []
        wanted = user_id.lower()
        owned = [it for it in self._store.items if it.reporter_user_id.lower() == wanted]
        return sorted(owned, key=lambda it: it.id, reverse=True)

    @staticmethod
    def _parse_date(value: Union[dt.date, str, None]) -> dt.date:
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value

        text = require_text(value, "date")
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            raise ValidationException(
                message=f"Invalid date: {text!r}",
                code="INVALID_DATE",
                details={"field": "date", "expected": "YYYY-MM-DD"},
            )
