"""
Key-value store backends.

The marketplace persists everything as JSON strings under a handful of keys.
Backends share one tiny interface so repositories never care where the
bytes live:

- InMemoryStore: process-local dict, used by tests
- JsonFileStore: one <key>.json file per key inside a directory
- SqliteStore: a single two-column table in a SQLite database

Writes are plain overwrites. There is no locking and no transaction
spanning a read and the following write: last writer wins.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal string key-value store."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        ...


class InMemoryStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """
    Directory-backed store.

    Each key maps to ``<directory>/<key>.json``. The directory is created
    on first write.
    """

    def __init__(self, directory: Path) -> None:
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SqliteStore:
    """SQLite-backed store using a single ``kv`` table."""

    def __init__(self, db_path: Path) -> None:
        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(db_path)
        self._conn.executescript(SCHEMA)
        self._conn.commit()

    def get(self, key: str) -> Optional[str]:
        row = self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self._conn.execute(
            """
            INSERT INTO kv (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, value),
        )
        self._conn.commit()

    def delete(self, key: str) -> None:
        self._conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        self._conn.commit()

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()


# Module-level store cache
_store: Optional[KeyValueStore] = None


def create_store(backend: str, data_dir: Path, sqlite_path: Optional[Path] = None) -> KeyValueStore:
    """
    Build a store for the named backend.

    Args:
        backend: One of "memory", "file", "sqlite"
        data_dir: Directory used by the file backend
        sqlite_path: Database path used by the sqlite backend

    Returns:
        A fresh store instance
    """
    if backend == "memory":
        return InMemoryStore()
    if backend == "file":
        return JsonFileStore(data_dir)
    if backend == "sqlite":
        return SqliteStore(sqlite_path or data_dir / "market.db")
    raise ValueError(f"Unknown store backend: {backend}")


def get_store() -> KeyValueStore:
    """
    Get the configured store, creating it on first use.

    Returns:
        Store selected by the STORE_BACKEND setting
    """
    global _store

    if _store is None:
        settings = get_settings()
        _store = create_store(
            settings.store_backend,
            settings.data_dir,
            settings.resolved_sqlite_path,
        )
        logger.debug("Opened %s store", settings.store_backend)

    return _store


def reset_store_cache() -> None:
    """
    Reset the cached store.

    Closes the cached store when it holds a connection. Useful for testing
    or when configuration changes.
    """
    global _store
    close = getattr(_store, "close", None)
    if close is not None:
        close()
    _store = None
