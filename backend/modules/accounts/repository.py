"""
Account and session repositories.

Accounts live under a single key as a JSON object mapping lowercased email
to credential. The session is a separate key holding ``{"email": ...}``
and is removed entirely on logout.
"""

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.models import SessionUser
from shared.repository import BaseRepository
from .models import Account, SessionRecord

logger = logging.getLogger(__name__)

ACCOUNTS_KEY = "campus_market.accounts.v1"
SESSION_KEY = "campus_market.session.v1"


class AccountRepository(BaseRepository[Account]):
    """
    Repository for registered accounts.

    Every call re-reads the store; nothing is cached between calls.
    """

    def load_all(self) -> dict[str, str]:
        """Return the email -> credential mapping, or {} if unreadable."""
        data = self._read_json(ACCOUNTS_KEY, {})
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            logger.warning("Discarding malformed account data")
            return {}
        return data

    def get(self, email: str) -> Optional[Account]:
        """Get an account by its lowercased email."""
        credential = self.load_all().get(email)
        if credential is None:
            return None
        return Account(email=email, credential=credential)

    def add(self, account: Account) -> None:
        """Store a new account alongside the existing ones."""
        accounts = self.load_all()
        accounts[account.email] = account.credential
        self._write_json(ACCOUNTS_KEY, accounts)


class SessionRepository(BaseRepository[SessionUser]):
    """Repository for the single current session."""

    def load(self) -> Optional[SessionUser]:
        data = self._read_json(SESSION_KEY, None)
        if data is None:
            return None
        try:
            record = SessionRecord.model_validate(data)
        except PydanticValidationError:
            logger.warning("Discarding malformed session data")
            return None
        return SessionUser(email=record.email)

    def save(self, user: SessionUser) -> None:
        self._write_json(SESSION_KEY, SessionRecord(email=user.email).model_dump())

    def clear(self) -> None:
        self._store.delete(SESSION_KEY)
