"""
Name-based matcher between lost and found reports.

A match is an exact substring relationship between lowercased names of two
opposite-type, unclaimed items. There is no tokenizing, fuzziness or ranking.
"""

import logging
from typing import Optional, Iterator

from lostfound.database import RegistryStore
from lostfound.schemas import Item, Notification
from lostfound.services.notifications.notification_service import NotificationService

logger = logging.getLogger(__name__)


def names_match(a: str, b: str) -> bool:
    """True when either lowercased name contains the other."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


class Matcher:
    """
    Finds an existing report similar to a new one and alerts its reporter.

    Only the first eligible candidate in insertion order is notified, and the
    notification references the new item only.
    """

    def __init__(
        self,
        store: RegistryStore,
        notification_service: NotificationService,
        exclude_own_reports: bool = True,
    ):
        """
        Initialize Matcher.

        Args:
            store: Registry store holding the items collection
            notification_service: Where match notifications are created
            exclude_own_reports: Skip candidates reported by the new item's reporter
        """
        self._store = store
        self._notification_service = notification_service
        self._exclude_own_reports = exclude_own_reports

    def candidates_for(self, new_item: Item) -> Iterator[Item]:
        """Yield eligible candidates in registry insertion order."""
        opposite = new_item.type.opposite
        for it in self._store.items:
            if it.type is not opposite or it.is_claimed or it.id == new_item.id:
                continue
            if not names_match(it.name, new_item.name):
                continue
            if self._exclude_own_reports and it.reporter_user_id.lower() == new_item.reporter_user_id.lower():
                logger.debug(f"Skipping own report {it.id} as match for item {new_item.id}")
                continue
            yield it

    def find_and_notify(self, new_item: Item) -> Optional[Notification]:
        """
        Scan for a match and notify the first candidate's reporter.

        Args:
            new_item: Freshly submitted item

        Returns:
            The created notification, or None when nothing matched or the
            candidate has no reporter id
        """
        candidate = next(self.candidates_for(new_item), None)
        if candidate is None:
            logger.debug(f"No match for item {new_item.id}")
            return None

        if not candidate.reporter_user_id:
            logger.debug(f"Match {candidate.id} has no reporter; not notifying")
            return None

        notification = self._notification_service.create_match_notification(candidate, new_item)
        logger.info(f"Item {new_item.id} matched existing item {candidate.id}")
        return notification
