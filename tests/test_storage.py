"""Unit tests for key-value stores and the registry store snapshots."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from common.storage import JsonFileKeyValueStore, MemoryKeyValueStore
from common.utils import StorageException
from lostfound.database import (
    ITEMS_KEY,
    NOTIFICATIONS_KEY,
    SESSION_KEY,
    USERS_KEY,
    RegistryStore,
)
from lostfound.schemas import Item, ItemType, User, UserProfile, UserRole


@pytest.fixture
def sample_item():
    return Item(
        id=1700000000001,
        type=ItemType.LOST,
        name="Blue backpack",
        location="Library",
        date=date(2026, 3, 1),
        reporter_name="Alice Berg",
        reporter_user_id="S100",
    )


@pytest.fixture
def sample_profile():
    return UserProfile(name="Alice Berg", email="alice@school.edu", id="S100", role=UserRole.STUDENT)


# ─────────────────────────────────────────────────────────────────
# Key-value stores
# ─────────────────────────────────────────────────────────────────


class TestMemoryKeyValueStore:
    def test_set_get_delete(self):
        kv = MemoryKeyValueStore()
        kv.set("a", "1")

        assert kv.get("a") == "1"
        kv.delete("a")
        assert kv.get("a") is None

    def test_delete_missing_key_is_noop(self):
        kv = MemoryKeyValueStore({"a": "1"})
        kv.delete("b")

        assert kv.get("a") == "1"


class TestJsonFileKeyValueStore:
    def test_missing_file_reads_as_empty(self, tmp_path):
        kv = JsonFileKeyValueStore(tmp_path / "registry.json")

        assert kv.get(USERS_KEY) is None

    def test_values_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "registry.json"
        JsonFileKeyValueStore(path).set(ITEMS_KEY, "[]")

        assert JsonFileKeyValueStore(path).get(ITEMS_KEY) == "[]"
        assert json.loads(path.read_text(encoding="utf-8")) == {ITEMS_KEY: "[]"}

    def test_no_temporary_files_left_behind(self, tmp_path):
        kv = JsonFileKeyValueStore(tmp_path / "registry.json")
        kv.set("a", "1")
        kv.set("b", "2")
        kv.delete("a")

        assert [p.name for p in tmp_path.iterdir()] == ["registry.json"]

    def test_unparseable_file_raises(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageException) as exc_info:
            JsonFileKeyValueStore(path).get(USERS_KEY)

        assert exc_info.value.code == "STORAGE_READ_FAILED"

    def test_non_object_file_is_corrupt(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(StorageException) as exc_info:
            JsonFileKeyValueStore(path).get(USERS_KEY)

        assert exc_info.value.code == "STORAGE_CORRUPT"


# ─────────────────────────────────────────────────────────────────
# RegistryStore
# ─────────────────────────────────────────────────────────────────


class TestRegistryStoreSnapshots:
    def test_empty_backend_gives_empty_collections(self, store):
        assert store.users == ()
        assert store.items == ()
        assert store.notifications == ()

    def test_items_persist_with_camel_case_keys(self, kv_store, store, sample_item):
        store.commit_items([sample_item])

        saved = json.loads(kv_store.get(ITEMS_KEY))
        assert saved == [{
            "id": 1700000000001,
            "type": "lost",
            "name": "Blue backpack",
            "location": "Library",
            "description": None,
            "date": "2026-03-01",
            "reporterName": "Alice Berg",
            "reporterUserId": "S100",
            "status": "active",
            "image": None,
        }]

    def test_reload_restores_collections(self, kv_store, store, sample_item):
        store.commit_items([sample_item])

        reloaded = RegistryStore(kv_store)

        assert reloaded.items == (sample_item,)

    def test_collections_are_read_only_views(self, store, sample_item):
        store.commit_items([sample_item])

        assert isinstance(store.items, tuple)

    def test_corrupt_collection_raises(self):
        kv = MemoryKeyValueStore({NOTIFICATIONS_KEY: json.dumps([{"id": "nope"}])})

        with pytest.raises(StorageException) as exc_info:
            RegistryStore(kv)

        assert exc_info.value.code == "STORAGE_CORRUPT"
        assert exc_info.value.details == {"key": NOTIFICATIONS_KEY}

    def test_failed_write_keeps_previous_state(self, sample_item):
        kv = MagicMock()
        kv.get.return_value = None
        kv.set.side_effect = StorageException(code="STORAGE_WRITE_FAILED")
        store = RegistryStore(kv)

        with pytest.raises(StorageException):
            store.commit_items([sample_item])

        assert store.items == ()


class TestRegistryStoreSession:
    def test_session_round_trip(self, kv_store, store, sample_profile):
        store.save_session(sample_profile)

        assert json.loads(kv_store.get(SESSION_KEY)) == {
            "name": "Alice Berg",
            "email": "alice@school.edu",
            "id": "S100",
            "role": "student",
        }
        assert store.load_session() == sample_profile

    def test_session_never_contains_the_secret_hash(self, kv_store, store):
        user = User(
            name="Alice Berg",
            email="alice@school.edu",
            id="S100",
            role=UserRole.STUDENT,
            secret_hash="$2b$04$hash",
        )

        store.save_session(user)

        assert "secretHash" not in json.loads(kv_store.get(SESSION_KEY))

    def test_unreadable_session_is_discarded(self, kv_store, store):
        kv_store.set(SESSION_KEY, "{broken")

        assert store.load_session() is None
        assert kv_store.get(SESSION_KEY) is None

    def test_clear_session(self, kv_store, store, sample_profile):
        store.save_session(sample_profile)
        store.clear_session()

        assert store.load_session() is None
