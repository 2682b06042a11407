"""
Registry store.

Holds the three collections (users, items, notifications) and the session
slot in memory, backed by a key-value store. Services receive the store in
their constructor; nothing reads the collections through module globals.

Writes are copy-on-write: a service builds the new collection, `commit_*`
persists the snapshot and only then swaps it in, so a failed write leaves
the in-memory state untouched.
"""

import json
import logging
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from common.storage import KeyValueStore
from common.utils.exceptions import StorageException
from lostfound.database.collections import (
    USERS_KEY,
    ITEMS_KEY,
    NOTIFICATIONS_KEY,
    SESSION_KEY,
)
from lostfound.schemas import User, UserProfile, Item, Notification

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(List[User])
_items_adapter = TypeAdapter(List[Item])
_notifications_adapter = TypeAdapter(List[Notification])
_profile_adapter = TypeAdapter(UserProfile)


class RegistryStore:
    """
    In-memory collections with snapshot persistence.
    """

    def __init__(self, kv_store: KeyValueStore, load: bool = True):
        """
        Initialize RegistryStore.

        Args:
            kv_store: Persistence backend
            load: Read existing snapshots immediately
        """
        self._kv = kv_store
        self._users: List[User] = []
        self._items: List[Item] = []
        self._notifications: List[Notification] = []

        if load:
            self.load()

    # ─────────────────────────────────────────────────────────────
    # Collections (read-only views; mutate through commit_*)
    # ─────────────────────────────────────────────────────────────

    @property
    def users(self) -> Sequence[User]:
        return tuple(self._users)

    @property
    def items(self) -> Sequence[Item]:
        return tuple(self._items)

    @property
    def notifications(self) -> Sequence[Notification]:
        return tuple(self._notifications)

    def load(self) -> None:
        """Read all collection snapshots from the backend."""
        self._users = self._load_collection(USERS_KEY, _users_adapter)
        self._items = self._load_collection(ITEMS_KEY, _items_adapter)
        self._notifications = self._load_collection(NOTIFICATIONS_KEY, _notifications_adapter)
        logger.info(
            f"Loaded {len(self._users)} users, {len(self._items)} items, "
            f"{len(self._notifications)} notifications"
        )

    def commit_users(self, users: List[User]) -> None:
        self._write_collection(USERS_KEY, users)
        self._users = list(users)

    def commit_items(self, items: List[Item]) -> None:
        self._write_collection(ITEMS_KEY, items)
        self._items = list(items)

    def commit_notifications(self, notifications: List[Notification]) -> None:
        self._write_collection(NOTIFICATIONS_KEY, notifications)
        self._notifications = list(notifications)

    # ─────────────────────────────────────────────────────────────
    # Session slot
    # ─────────────────────────────────────────────────────────────

    def load_session(self) -> Optional[UserProfile]:
        """
        Read the persisted session.

        Returns:
            The stored user profile, or None if there is no usable session
        """
        raw = self._kv.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return _profile_adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable session slot: {e.error_count()} errors")
            self._kv.delete(SESSION_KEY)
            return None

    def save_session(self, profile: UserProfile) -> None:
        if isinstance(profile, User):
            profile = profile.profile()
        self._kv.set(SESSION_KEY, json.dumps(profile.to_snapshot()))

    def clear_session(self) -> None:
        self._kv.delete(SESSION_KEY)

    # ─────────────────────────────────────────────────────────────
    # Snapshot helpers
    # ─────────────────────────────────────────────────────────────

    def _load_collection(self, key: str, adapter: TypeAdapter) -> list:
        raw = self._kv.get(key)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Snapshot {key} failed validation: {e.error_count()} errors")
            raise StorageException(
                message=f"Stored collection {key} is corrupt",
                code="STORAGE_CORRUPT",
                details={"key": key},
            ) from e

    def _write_collection(self, key: str, records: Sequence) -> None:
        payload = json.dumps([record.to_snapshot() for record in records])
        self._kv.set(key, payload)
        logger.debug(f"Saved snapshot {key} ({len(records)} records)")
