"""
Lost & Found Services.

All service classes organized by feature.
"""

# User services
from lostfound.services.user.identity_store import IdentityStore
from lostfound.services.auth.session_controller import SessionController

# Item services
from lostfound.services.items.item_registry import ItemRegistry
from lostfound.services.matching.matcher import Matcher
from lostfound.services.claims.claim_service import ClaimService

# Notification services
from lostfound.services.notifications.notification_service import NotificationService

# Media services
from lostfound.services.media.image_reader import ImageReader

__all__ = [
    "IdentityStore",
    "SessionController",
    "ItemRegistry",
    "Matcher",
    "ClaimService",
    "NotificationService",
    "ImageReader",
]
