"""
Service wiring for the Lost & Found registry.

Builds every service from settings. The registry store is created once and
passed explicitly to each constructor; there are no module-level service
singletons.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from common.auth import PasswordHasher
from common.storage import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore
from lostfound.config import Settings
from lostfound.database import RegistryStore
from lostfound.events import RenderHooks
from lostfound.services.auth.session_controller import SessionController
from lostfound.services.claims.claim_service import ClaimService
from lostfound.services.items.item_registry import ItemRegistry
from lostfound.services.matching.matcher import Matcher
from lostfound.services.media.image_reader import ImageReader
from lostfound.services.notifications.notification_service import NotificationService
from lostfound.services.user.identity_store import IdentityStore

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """All services sharing one registry store."""

    settings: Settings
    store: RegistryStore
    identity_store: IdentityStore
    session_controller: SessionController
    item_registry: ItemRegistry
    notification_service: NotificationService
    matcher: Matcher
    claim_service: ClaimService
    image_reader: ImageReader
    render_hooks: RenderHooks


def create_kv_store(settings: Settings) -> KeyValueStore:
    """Build the storage backend named by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "file":
        logger.info(f"Using JSON file storage: {settings.STORAGE_PATH}")
        return JsonFileKeyValueStore(settings.STORAGE_PATH)
    logger.info("Using in-memory storage")
    return MemoryKeyValueStore()


def init_all_services(
    settings: Settings,
    kv_store: Optional[KeyValueStore] = None,
    render_hooks: Optional[RenderHooks] = None,
) -> ServiceContainer:
    """
    Initialize all services.

    Args:
        settings: Application settings
        kv_store: Storage backend; built from settings when omitted
        render_hooks: UI listener registry; a fresh one when omitted

    Returns:
        The wired service container
    """
    settings.validate_required()

    store = RegistryStore(kv_store if kv_store is not None else create_kv_store(settings))

    identity_store = IdentityStore(
        store,
        PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        require_strong_secrets=settings.REQUIRE_STRONG_SECRETS,
    )
    session_controller = SessionController(store, identity_store)
    item_registry = ItemRegistry(store)
    notification_service = NotificationService(store, identity_store=identity_store)
    matcher = Matcher(
        store,
        notification_service,
        exclude_own_reports=settings.MATCH_EXCLUDE_OWN_REPORTS,
    )
    claim_service = ClaimService(
        item_registry,
        notification_service,
        allow_claims_on_claimed_items=settings.ALLOW_CLAIMS_ON_CLAIMED_ITEMS,
    )
    image_reader = ImageReader(
        max_bytes=settings.MAX_IMAGE_BYTES,
        allowed_extensions=settings.get_allowed_image_extensions(),
    )

    logger.info("All services initialized")
    return ServiceContainer(
        settings=settings,
        store=store,
        identity_store=identity_store,
        session_controller=session_controller,
        item_registry=item_registry,
        notification_service=notification_service,
        matcher=matcher,
        claim_service=claim_service,
        image_reader=image_reader,
        render_hooks=render_hooks or RenderHooks(),
    )
