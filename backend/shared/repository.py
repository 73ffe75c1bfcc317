"""
Base repository class for store access.

Provides a common abstraction layer for all repositories, encapsulating
key-value store access and the JSON encoding shared by every stored key.
"""

import json
import logging
from typing import Any, TypeVar, Generic

from .storage import KeyValueStore


T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for store operations:
    - Store access via self._store
    - Fail-soft JSON reads via self._read_json
    - JSON writes via self._write_json

    Subclasses should implement domain-specific load/save methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ListingRepository(BaseRepository[Listing]):
            def load_all(self) -> list[Listing]:
                raw = self._read_json("listings", [])
                return [Listing.model_validate(item) for item in raw]
    """

    def __init__(self, store: KeyValueStore) -> None:
        """
        Initialize the repository with a key-value store.

        Args:
            store: Backing store for all reads and writes.
        """
        self._store = store

    def _read_json(self, key: str, fallback: Any) -> Any:
        """
        Read and decode a JSON value.

        Missing keys and undecodable payloads both yield ``fallback``.
        """
        raw = self._store.get(key)
        if raw is None:
            return fallback
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable value stored under %s", key)
            return fallback

    def _write_json(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it under key."""
        self._store.set(key, json.dumps(value))
