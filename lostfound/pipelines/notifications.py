"""
Notification pipeline functions.

Every operation acts on the current user's notifications only; ids that
belong to someone else are treated like unknown ids.
"""

import logging
from typing import Dict, Any

from common.utils import success_response, list_response
from lostfound.events import RenderEvent, RenderHooks
from lostfound.services.auth.session_controller import SessionController
from lostfound.services.notifications.notification_service import NotificationService

logger = logging.getLogger(__name__)


def _owned_by_current_user(
    session_controller: SessionController,
    notification_service: NotificationService,
    notification_id: int,
) -> bool:
    user = session_controller.current_user
    notification = notification_service.get(notification_id)
    if user is None or notification is None:
        return False
    if not notification.is_for(user.id):
        logger.warning(f"User {user.id} touched notification {notification_id} of another user")
        return False
    return True


def my_notifications_pipeline(
    session_controller: SessionController,
    notification_service: NotificationService,
) -> Dict[str, Any]:
    """Notifications of the current user, newest first."""
    user = session_controller.current_user
    notifications = notification_service.list_for(user.id) if user else []
    return list_response(notifications)


def badge_count_pipeline(
    session_controller: SessionController,
    notification_service: NotificationService,
) -> Dict[str, Any]:
    """Unseen notification count for the header badge; 0 without a session."""
    user = session_controller.current_user
    count = notification_service.unseen_count(user.id) if user else 0
    return success_response({"unseen": count})


def mark_notification_seen_pipeline(
    session_controller: SessionController,
    notification_service: NotificationService,
    render_hooks: RenderHooks,
    notification_id: int,
) -> Dict[str, Any]:
    if _owned_by_current_user(session_controller, notification_service, notification_id):
        notification_service.mark_seen(notification_id)

    render_hooks.fire(RenderEvent.NOTIFICATIONS_CHANGED, RenderEvent.BADGE_CHANGED)
    return success_response()


def mark_all_notifications_seen_pipeline(
    session_controller: SessionController,
    notification_service: NotificationService,
    render_hooks: RenderHooks,
) -> Dict[str, Any]:
    """
    Mark every notification of the current user as seen.

    Raises:
        UnauthorizedException: Nobody is logged in
    """
    user = session_controller.require_user()
    changed = notification_service.mark_all_seen(user.id)

    render_hooks.fire(RenderEvent.NOTIFICATIONS_CHANGED, RenderEvent.BADGE_CHANGED)
    return success_response({"updated": changed})


def dismiss_notification_pipeline(
    session_controller: SessionController,
    notification_service: NotificationService,
    render_hooks: RenderHooks,
    notification_id: int,
) -> Dict[str, Any]:
    if _owned_by_current_user(session_controller, notification_service, notification_id):
        notification_service.dismiss(notification_id)

    render_hooks.fire(RenderEvent.NOTIFICATIONS_CHANGED, RenderEvent.BADGE_CHANGED)
    return success_response()
