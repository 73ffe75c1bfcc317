"""Tests for shared/storage.py."""

import pytest
import sqlite3
from unittest.mock import patch

from shared.storage import (
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    SqliteStore,
    create_store,
    get_store,
    reset_store_cache,
)


@pytest.fixture(params=["memory", "file", "sqlite"])
def any_store(request, tmp_path):
    """Each backend in turn."""
    if request.param == "memory":
        yield InMemoryStore()
    elif request.param == "file":
        yield JsonFileStore(tmp_path / "data")
    else:
        store = SqliteStore(tmp_path / "market.db")
        yield store
        store.close()


class TestStoreContract:
    def test_satisfies_protocol(self, any_store):
        assert isinstance(any_store, KeyValueStore)

    def test_missing_key_is_none(self, any_store):
        """Absent keys should read as None."""
        assert any_store.get("nope") is None

    def test_set_then_get(self, any_store):
        any_store.set("k", '{"a": 1}')
        assert any_store.get("k") == '{"a": 1}'

    def test_set_overwrites(self, any_store):
        """A second write should replace the first."""
        any_store.set("k", "1")
        any_store.set("k", "2")
        assert any_store.get("k") == "2"

    def test_delete(self, any_store):
        any_store.set("k", "1")
        any_store.delete("k")
        assert any_store.get("k") is None

    def test_delete_missing_is_noop(self, any_store):
        """Deleting an absent key should not raise."""
        any_store.delete("never-set")
        assert any_store.get("never-set") is None


class TestPersistence:
    def test_file_store_survives_new_instance(self, tmp_path):
        """A fresh JsonFileStore over the same directory sees earlier writes."""
        JsonFileStore(tmp_path).set("k", "v")
        assert JsonFileStore(tmp_path).get("k") == "v"
        assert (tmp_path / "k.json").read_text() == "v"

    def test_sqlite_store_survives_new_instance(self, tmp_path):
        """A fresh SqliteStore over the same file sees earlier writes."""
        first = SqliteStore(tmp_path / "m.db")
        first.set("k", "v")
        first.close()

        second = SqliteStore(tmp_path / "m.db")
        assert second.get("k") == "v"
        second.close()

    def test_in_memory_initial_data(self):
        store = InMemoryStore({"k": "v"})
        assert store.get("k") == "v"


class TestCreateStore:
    def test_memory(self, tmp_path):
        assert isinstance(create_store("memory", tmp_path), InMemoryStore)

    def test_file(self, tmp_path):
        assert isinstance(create_store("file", tmp_path), JsonFileStore)

    def test_sqlite(self, tmp_path):
        store = create_store("sqlite", tmp_path, tmp_path / "x.db")
        assert isinstance(store, SqliteStore)
        store.close()

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(ValueError):
            create_store("redis", tmp_path)


class TestGetStore:
    def setup_method(self):
        """Reset cache before each test."""
        reset_store_cache()

    @patch("shared.storage.get_settings")
    def test_get_store_uses_settings(self, mock_settings, tmp_path):
        """Should build the backend named in settings."""
        mock_settings.return_value.store_backend = "memory"
        mock_settings.return_value.data_dir = tmp_path
        mock_settings.return_value.resolved_sqlite_path = tmp_path / "m.db"

        assert isinstance(get_store(), InMemoryStore)

    @patch("shared.storage.get_settings")
    def test_get_store_caches(self, mock_settings, tmp_path):
        """Should cache the store and not recreate it."""
        mock_settings.return_value.store_backend = "memory"
        mock_settings.return_value.data_dir = tmp_path
        mock_settings.return_value.resolved_sqlite_path = tmp_path / "m.db"

        assert get_store() is get_store()

    @patch("shared.storage.get_settings")
    def test_reset_store_cache(self, mock_settings, tmp_path):
        """Should build a new store after reset."""
        mock_settings.return_value.store_backend = "memory"
        mock_settings.return_value.data_dir = tmp_path
        mock_settings.return_value.resolved_sqlite_path = tmp_path / "m.db"

        first = get_store()
        reset_store_cache()
        assert get_store() is not first

    @patch("shared.storage.get_settings")
    def test_reset_closes_sqlite_connection(self, mock_settings, tmp_path):
        """Resetting should close the cached database connection."""
        mock_settings.return_value.store_backend = "sqlite"
        mock_settings.return_value.data_dir = tmp_path
        mock_settings.return_value.resolved_sqlite_path = tmp_path / "m.db"

        store = get_store()
        store.set("k", "v")
        reset_store_cache()

        with pytest.raises(sqlite3.ProgrammingError):
            store.get("k")
        reopened = SqliteStore(tmp_path / "m.db")
        assert reopened.get("k") == "v"
        reopened.close()

    def test_reset_without_store(self):
        """Resetting an empty cache is a no-op."""
        reset_store_cache()
        reset_store_cache()
