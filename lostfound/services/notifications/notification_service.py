"""
Notification service for in-app alerts.

Handles creation, retrieval, and management of per-user notifications.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, List, Sequence, TYPE_CHECKING

from common.utils import TimestampIdGenerator
from common.utils.exceptions import ValidationException
from lostfound.database import RegistryStore
from lostfound.schemas import Item, Notification, UserProfile, require_text

if TYPE_CHECKING:
    from lostfound.services.user.identity_store import IdentityStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationService:
    """
    Handles in-app notification management.

    Notification kinds:
    - match: an opposite-type report with a similar name was submitted
    - claim: another user wants to claim one of the recipient's items

    A notification is only ever visible to its recipient. `seen` only goes
    from False to True; dismissing deletes the record.
    """

    def __init__(
        self,
        store: RegistryStore,
        identity_store: Optional["IdentityStore"] = None,
        id_generator: Optional[TimestampIdGenerator] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize NotificationService.

        Args:
            store: Registry store holding the notifications collection
            identity_store: Used to warn about recipients that don't resolve
            id_generator: Notification id source
            clock: Returns the creation timestamp
        """
        self._store = store
        self._identity_store = identity_store
        self._ids = id_generator or TimestampIdGenerator()
        self._ids.observe(n.id for n in store.notifications)
        self._clock = clock

    def create(
        self,
        for_user_id: str,
        title: str,
        message: str,
        matched_item_ids: Sequence[int],
    ) -> Notification:
        """
        Create a new notification for a user.

        Args:
            for_user_id: Recipient user id
            title: Short notification title
            message: Full notification message
            matched_item_ids: Referenced items, at least one

        Returns:
            Created notification

        Raises:
            ValidationException: Blank recipient/title or no item ids
        """
        for_user_id = require_text(for_user_id, "forUserId")
        title = require_text(title, "title")
        if not matched_item_ids:
            raise ValidationException(
                message="A notification must reference at least one item",
                code="MISSING_FIELD",
                details={"field": "matchedItemIds"},
            )

        if self._identity_store is not None and self._identity_store.get_by_id(for_user_id) is None:
            logger.warning(f"Creating notification for unknown user {for_user_id}")

        notification = Notification(
            id=self._ids.next_id(),
            for_user_id=for_user_id,
            created_at=self._clock(),
            seen=False,
            title=title,
            message=message or "",
            matched_item_ids=list(matched_item_ids),
        )
        self._store.commit_notifications([*self._store.notifications, notification])

        logger.info(f"Created notification {notification.id} for user {for_user_id}")
        return notification

    def get(self, notification_id: int) -> Optional[Notification]:
        return next((n for n in self._store.notifications if n.id == notification_id), None)

    def list_for(self, user_id: str) -> List[Notification]:
        """
        Get notifications for a user, newest first.

        Args:
            user_id: Recipient user id

        Returns:
            Notifications sorted by createdAt descending (id breaks ties)
        """
        mine = [n for n in self._store.notifications if n.is_for(user_id)]
        return sorted(mine, key=lambda n: (n.created_at, n.id), reverse=True)

    def unseen_count(self, user_id: str) -> int:
        return sum(1 for n in self._store.notifications if n.is_for(user_id) and not n.seen)

    def mark_seen(self, notification_id: int) -> None:
        """
        Mark a notification as seen.

        Unknown ids and already-seen notifications are a no-op.
        """
        notification = self.get(notification_id)
        if notification is None or notification.seen:
            return

        seen = notification.model_copy(update={"seen": True})
        self._store.commit_notifications(
            [seen if n.id == notification_id else n for n in self._store.notifications]
        )
        logger.info(f"Notification {notification_id} marked as seen")

    def mark_all_seen(self, user_id: str) -> int:
        """
        Mark all unseen notifications of a user as seen.

        Returns:
            Number of notifications changed
        """
        changed = 0
        updated = []
        for n in self._store.notifications:
            if n.is_for(user_id) and not n.seen:
                n = n.model_copy(update={"seen": True})
                changed += 1
            updated.append(n)

        if changed:
            self._store.commit_notifications(updated)
        logger.info(f"Marked {changed} notifications as seen for user {user_id}")
        return changed

    def dismiss(self, notification_id: int) -> None:
        """
        Delete a notification.

        Unknown ids are a no-op.
        """
        if self.get(notification_id) is None:
            return

        self._store.commit_notifications(
            [n for n in self._store.notifications if n.id != notification_id]
        )
        logger.info(f"Notification {notification_id} dismissed")

    def create_match_notification(self, candidate: Item, new_item: Item) -> Notification:
        """
        Tell a candidate's reporter that a similar item was just reported.

        Args:
            candidate: Existing item whose reporter is notified
            new_item: The newly submitted item (the one referenced)

        Returns:
            Created notification
        """
        return self.create(
            for_user_id=candidate.reporter_user_id,
            title=f'Possible match for your item "{candidate.name}"',
            message=f'A similar item was just reported: "{new_item.name}".',
            matched_item_ids=[new_item.id],
        )

    def create_claim_notification(self, item: Item, claimant: UserProfile) -> Notification:
        """
        Tell an item's reporter that someone wants to claim it.

        Args:
            item: Item being claimed
            claimant: User asking to claim it

        Returns:
            Created notification
        """
        return self.create(
            for_user_id=item.reporter_user_id,
            title=f'Claim attempt for "{item.name}"',
            message=f"{claimant.name} (ID: {claimant.id}) wants to claim this item.",
            matched_item_ids=[item.id],
        )
