"""
Lost & Found registry bootstrap.

Main entry point for embedding the registry in a UI: configures logging,
wires the services, seeds the demo accounts and restores the last session.
"""

import logging
from typing import Optional

from common.storage import KeyValueStore
from lostfound.config import Settings, settings as default_settings
from lostfound.dependencies import ServiceContainer, init_all_services
from lostfound.events import RenderEvent, RenderHooks

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# Logging
# =============================================================================
def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.get_log_level(), format=LOG_FORMAT)


# =============================================================================
# Application Startup
# =============================================================================
def create_app(
    settings: Optional[Settings] = None,
    kv_store: Optional[KeyValueStore] = None,
    render_hooks: Optional[RenderHooks] = None,
) -> ServiceContainer:
    """
    Start the registry.

    Args:
        settings: Application settings; the environment-loaded settings when omitted
        kv_store: Storage backend override (tests pass an in-memory store)
        render_hooks: UI listener registry

    Returns:
        The wired service container, with the session restored if one was saved
    """
    settings = settings or default_settings
    configure_logging(settings)

    logger.info(f"Starting Lost & Found registry ({settings.ENVIRONMENT})")
    services = init_all_services(settings, kv_store=kv_store, render_hooks=render_hooks)

    if settings.SEED_SAMPLE_USERS:
        services.identity_store.ensure_sample_users()

    restored = services.session_controller.restore_session()
    if restored is not None:
        services.render_hooks.fire(*RenderEvent)

    logger.info("Lost & Found registry started")
    return services
