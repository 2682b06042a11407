"""Shared test fixtures for Lost & Found registry tests."""

import itertools
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from common.auth import PasswordHasher
from common.storage import MemoryKeyValueStore
from common.utils import TimestampIdGenerator
from lostfound.config import Settings
from lostfound.database import RegistryStore
from lostfound.events import RenderEvent, RenderHooks
from lostfound.services.auth.session_controller import SessionController
from lostfound.services.claims.claim_service import ClaimService
from lostfound.services.items.item_registry import ItemRegistry
from lostfound.services.matching.matcher import Matcher
from lostfound.services.media.image_reader import ImageReader
from lostfound.services.notifications.notification_service import NotificationService
from lostfound.services.user.identity_store import IdentityStore


# Lowest bcrypt cost keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        STORAGE_BACKEND="memory",
        BCRYPT_ROUNDS=TEST_BCRYPT_ROUNDS,
        SEED_SAMPLE_USERS=False,
    )


@pytest.fixture
def kv_store():
    return MemoryKeyValueStore()


@pytest.fixture
def store(kv_store):
    return RegistryStore(kv_store)


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def fixed_clock():
    """Notification clock advancing one second per call."""
    start = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def identity_store(store, hasher):
    return IdentityStore(store, hasher)


@pytest.fixture
def alice(identity_store):
    return identity_store.add_user(
        name="Alice Berg",
        email="Alice@School.edu",
        user_id="S100",
        role="student",
        secret="alice-secret",
    ).profile()


@pytest.fixture
def bob(identity_store):
    return identity_store.add_user(
        name="Bob Lund",
        email="bob@school.edu",
        user_id="T200",
        role="staff",
        secret="bob-secret",
    ).profile()


@pytest.fixture
def admin(identity_store):
    return identity_store.add_user(
        name="Admin",
        email="admin@school.edu",
        user_id="A001",
        role="admin",
        secret="admin123",
    ).profile()


@pytest.fixture
def item_registry(store):
    return ItemRegistry(store, id_generator=TimestampIdGenerator())


@pytest.fixture
def notification_service(store, identity_store, fixed_clock):
    return NotificationService(store, identity_store=identity_store, clock=fixed_clock)


@pytest.fixture
def matcher(store, notification_service):
    return Matcher(store, notification_service)


@pytest.fixture
def claim_service(item_registry, notification_service):
    return ClaimService(item_registry, notification_service)


@pytest.fixture
def session_controller(store, identity_store):
    return SessionController(store, identity_store)


@pytest.fixture
def image_reader():
    return ImageReader(max_bytes=1024)


@pytest.fixture
def render_hooks():
    return RenderHooks()


@pytest.fixture
def render_listeners(render_hooks):
    """One MagicMock listener per render event."""
    listeners = {event: MagicMock(name=event.value) for event in RenderEvent}
    for event, listener in listeners.items():
        render_hooks.subscribe(event, listener)
    return listeners


@pytest.fixture
def report(item_registry):
    """Submit a report with sensible defaults."""
    def _report(reporter, item_type="lost", name="Blue backpack", location="Library", **kwargs):
        kwargs.setdefault("description", None)
        kwargs.setdefault("date", "2026-03-01")
        return item_registry.submit_item(
            item_type=item_type,
            name=name,
            location=location,
            reporter=reporter,
            **kwargs,
        )
    return _report
