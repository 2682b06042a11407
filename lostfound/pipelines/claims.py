"""
Claim pipeline functions.
"""

import logging
from typing import Dict, Any

from common.utils import success_response
from lostfound.events import RenderEvent, RenderHooks
from lostfound.services.auth.session_controller import SessionController
from lostfound.services.claims.claim_service import ClaimService

logger = logging.getLogger(__name__)


def create_claim_pipeline(
    session_controller: SessionController,
    claim_service: ClaimService,
    render_hooks: RenderHooks,
    item_id: int,
) -> Dict[str, Any]:
    """
    Orchestrates a claim request by the current user.

    Without a session nothing is sent and `notification` is None.

    Args:
        session_controller: For the claiming user
        claim_service: Creates the claim notification
        render_hooks: UI refresh triggers
        item_id: Item being claimed

    Returns:
        Response dict with the notification sent to the reporter

    Raises:
        NotFoundException: Unknown item
        ForbiddenException: Claiming your own item
        ConflictException: Item already claimed and such claims are disabled
    """
    notification = claim_service.create_claim(item_id, session_controller.current_user)
    if notification is None:
        return success_response({"notification": None})

    render_hooks.fire(RenderEvent.NOTIFICATIONS_CHANGED, RenderEvent.BADGE_CHANGED)
    return success_response(
        {"notification": notification},
        message="Your claim has been sent to the reporter. They will be notified.",
    )
