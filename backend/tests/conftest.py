"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone

from core.container import reset_container
from shared.config import Settings, get_settings
from shared.models import SessionUser
from shared.storage import InMemoryStore, reset_store_cache


T0 = datetime(2026, 9, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, store and container around each test."""
    get_settings.cache_clear()
    reset_store_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_store_cache()
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: in-memory store, fast unsalted hashing."""
    return Settings(
        _env_file=None,
        store_backend="memory",
        credential_hasher="sha256",
        log_level="DEBUG",
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def student_email() -> str:
    return "alex@student.csulb.edu"


@pytest.fixture
def student(student_email: str) -> SessionUser:
    """A signed-in student."""
    return SessionUser(email=student_email)


@pytest.fixture
def other_student() -> SessionUser:
    return SessionUser(email="sam@student.csulb.edu")
