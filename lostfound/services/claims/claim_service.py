"""
Claim service.

A claim is advisory: it notifies the item's reporter and never changes the
item. Only ItemRegistry.mark_claimed finalizes an item.
"""

import logging
from typing import Optional

from common.utils.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
)
from lostfound.schemas import Notification, UserProfile
from lostfound.services.items.item_registry import ItemRegistry
from lostfound.services.notifications.notification_service import NotificationService

logger = logging.getLogger(__name__)


class ClaimService:
    """
    Turns claim requests into notifications for the reporter.
    """

    def __init__(
        self,
        item_registry: ItemRegistry,
        notification_service: NotificationService,
        allow_claims_on_claimed_items: bool = True,
    ):
        """
        Initialize ClaimService.

        Args:
            item_registry: For item lookup
            notification_service: Where claim notifications are created
            allow_claims_on_claimed_items: Accept claims on items already marked claimed
        """
        self._item_registry = item_registry
        self._notification_service = notification_service
        self._allow_claims_on_claimed_items = allow_claims_on_claimed_items

    def create_claim(
        self,
        item_id: int,
        acting_user: Optional[UserProfile],
    ) -> Optional[Notification]:
        """
        Ask to claim another user's item.

        Args:
            item_id: Item being claimed
            acting_user: Current user; None means no session

        Returns:
            Notification sent to the reporter, or None without a session

        Raises:
            NotFoundException: Unknown item
            ForbiddenException: The acting user reported the item
            ConflictException: Item already claimed and such claims are disabled
        """
        item = self._item_registry.get(item_id)
        if not item:
            raise NotFoundException(
                message="Item not found",
                code="ITEM_NOT_FOUND",
                details={"itemId": item_id},
            )

        if acting_user is None:
            logger.debug(f"Claim on item {item_id} ignored: no session")
            return None

        if acting_user.same_user(item.reporter_user_id):
            raise ForbiddenException(
                message="You cannot claim your own item",
                code="OWN_ITEM_CLAIM",
                details={"itemId": item_id},
            )

        if item.is_claimed and not self._allow_claims_on_claimed_items:
            raise ConflictException(
                message="This item has already been claimed",
                code="ITEM_ALREADY_CLAIMED",
                details={"itemId": item_id},
            )

        notification = self._notification_service.create_claim_notification(item, acting_user)
        logger.info(f"User {acting_user.id} claimed item {item_id}")
        return notification
