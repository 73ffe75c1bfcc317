"""
Shared infrastructure for Campus Market backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- storage: Key-value store backends and factory
- repository: JSON repository base class
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .storage import (
    KeyValueStore,
    InMemoryStore,
    JsonFileStore,
    SqliteStore,
    create_store,
    get_store,
    reset_store_cache,
)
from .exceptions import (
    MarketError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
)
from .models import SessionUser

__all__ = [
    "Settings",
    "get_settings",
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    "SqliteStore",
    "create_store",
    "get_store",
    "reset_store_cache",
    "MarketError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "SessionUser",
]
