"""Tests for account and session repositories."""

import json

from modules.accounts.models import Account
from modules.accounts.repository import (
    ACCOUNTS_KEY,
    SESSION_KEY,
    AccountRepository,
    SessionRepository,
)
from shared.models import SessionUser
from shared.storage import InMemoryStore


class TestAccountRepository:
    def test_empty_store(self):
        repo = AccountRepository(InMemoryStore())
        assert repo.load_all() == {}
        assert repo.get("alex@student.csulb.edu") is None

    def test_add_and_get(self):
        store = InMemoryStore()
        repo = AccountRepository(store)
        repo.add(Account(email="alex@student.csulb.edu", credential="h1"))

        account = repo.get("alex@student.csulb.edu")
        assert account == Account(email="alex@student.csulb.edu", credential="h1")
        assert json.loads(store.get(ACCOUNTS_KEY)) == {"alex@student.csulb.edu": "h1"}

    def test_add_keeps_existing(self):
        repo = AccountRepository(InMemoryStore())
        repo.add(Account(email="a@student.csulb.edu", credential="h1"))
        repo.add(Account(email="b@student.csulb.edu", credential="h2"))
        assert set(repo.load_all()) == {"a@student.csulb.edu", "b@student.csulb.edu"}

    def test_corrupt_json_degrades_to_empty(self):
        """Unreadable account data should read as no accounts."""
        repo = AccountRepository(InMemoryStore({ACCOUNTS_KEY: "{{{"}))
        assert repo.load_all() == {}

    def test_wrong_shape_degrades_to_empty(self):
        """A list or non-string credentials should read as no accounts."""
        assert AccountRepository(InMemoryStore({ACCOUNTS_KEY: "[1, 2]"})).load_all() == {}
        assert AccountRepository(InMemoryStore({ACCOUNTS_KEY: '{"a": 1}'})).load_all() == {}


class TestSessionRepository:
    def test_no_session(self):
        assert SessionRepository(InMemoryStore()).load() is None

    def test_save_and_load(self):
        store = InMemoryStore()
        repo = SessionRepository(store)
        repo.save(SessionUser(email="alex@student.csulb.edu"))

        assert repo.load() == SessionUser(email="alex@student.csulb.edu")
        assert json.loads(store.get(SESSION_KEY)) == {"email": "alex@student.csulb.edu"}

    def test_clear_removes_key(self):
        store = InMemoryStore()
        repo = SessionRepository(store)
        repo.save(SessionUser(email="alex@student.csulb.edu"))
        repo.clear()

        assert store.get(SESSION_KEY) is None
        assert repo.load() is None

    def test_clear_is_idempotent(self):
        repo = SessionRepository(InMemoryStore())
        repo.clear()
        repo.clear()
        assert repo.load() is None

    def test_corrupt_session_degrades_to_none(self):
        assert SessionRepository(InMemoryStore({SESSION_KEY: "nope"})).load() is None
        assert SessionRepository(InMemoryStore({SESSION_KEY: '{"user": 1}'})).load() is None
