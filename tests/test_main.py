"""Unit tests for service wiring and application startup."""

from unittest.mock import MagicMock

import pytest

from common.storage import JsonFileKeyValueStore, MemoryKeyValueStore
from lostfound.config import Settings
from lostfound.dependencies import create_kv_store, init_all_services
from lostfound.events import RenderEvent, RenderHooks
from lostfound.main import create_app


class TestCreateKvStore:
    def test_memory_backend(self, settings):
        assert isinstance(create_kv_store(settings), MemoryKeyValueStore)

    def test_file_backend(self, tmp_path):
        settings = Settings(_env_file=None, STORAGE_BACKEND="file", STORAGE_PATH=str(tmp_path / "db.json"))

        kv = create_kv_store(settings)

        assert isinstance(kv, JsonFileKeyValueStore)
        assert kv.path == tmp_path / "db.json"


class TestInitAllServices:
    def test_invalid_settings_rejected(self):
        settings = Settings(_env_file=None, STORAGE_BACKEND="file")

        with pytest.raises(ValueError):
            init_all_services(settings)

    def test_services_share_one_store(self, settings):
        services = init_all_services(settings, kv_store=MemoryKeyValueStore())
        services.identity_store.add_user("Alice", "alice@school.edu", "S100", "student", "secret")

        assert services.session_controller.login("S100", "secret").id == "S100"
        assert len(services.store.users) == 1


class TestCreateApp:
    def test_seeds_sample_users(self):
        settings = Settings(_env_file=None, BCRYPT_ROUNDS=4, SEED_SAMPLE_USERS=True)

        services = create_app(settings, kv_store=MemoryKeyValueStore())

        assert {u.id for u in services.identity_store.list_users()} == {"A001", "S001", "T001"}
        assert services.session_controller.current_user is None

    def test_seeding_disabled(self, settings):
        services = create_app(settings, kv_store=MemoryKeyValueStore())

        assert services.identity_store.list_users() == []

    def test_restart_restores_session_and_data(self, tmp_path):
        settings = Settings(
            _env_file=None,
            STORAGE_BACKEND="file",
            STORAGE_PATH=str(tmp_path / "registry.json"),
            BCRYPT_ROUNDS=4,
        )
        first = create_app(settings)
        user = first.session_controller.login("john.doe@school.edu", "student123")
        first.item_registry.submit_item("lost", "Scarf", "Hall B", None, "2026-03-01", user)

        hooks = RenderHooks()
        listener = MagicMock()
        hooks.subscribe(RenderEvent.MY_REPORTS_CHANGED, listener)
        second = create_app(settings, render_hooks=hooks)

        assert second.session_controller.current_user.id == "S001"
        assert [it.name for it in second.item_registry.items_by_owner("S001")] == ["Scarf"]
        assert len(second.identity_store.list_users()) == 3
        listener.assert_called_once()
