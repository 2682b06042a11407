"""Notification services."""

from lostfound.services.notifications.notification_service import NotificationService

__all__ = [
    "NotificationService",
]
