"""
Accounts service implementation.

Registers students, checks their passwords and keeps track of who is
signed in. Only addresses ending in the configured student domain are
accepted.
"""

import logging
from typing import Optional

from shared.config import Settings, get_settings
from shared.models import SessionUser
from shared.storage import KeyValueStore

from .hashing import get_hasher
from .interfaces import IAccountService, ICredentialHasher
from .models import Account
from .repository import AccountRepository, SessionRepository
from .exceptions import (
    BadCredentialError,
    DomainMismatchError,
    DuplicateAccountError,
    UnknownAccountError,
    WeakCredentialError,
)

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Implementation of the accounts service.

    Accounts and the session are read from the store on every call,
    so a second process sharing the store sees changes on its next call.
    """

    def __init__(
        self,
        store: KeyValueStore,
        hasher: Optional[ICredentialHasher] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._hasher = hasher or get_hasher(self._settings.credential_hasher)
        self._accounts = AccountRepository(store)
        self._sessions = SessionRepository(store)

    def is_student_email(self, email: str) -> bool:
        """Check the address against the required domain, ignoring case."""
        suffix = self._settings.student_email_suffix.lower()
        return email.strip().lower().endswith(suffix)

    def _normalize(self, email: str) -> str:
        if not self.is_student_email(email):
            raise DomainMismatchError(email, self._settings.student_email_suffix)
        return email.strip().lower()

    def register(self, email: str, credential: str) -> SessionUser:
        """Create an account and establish a session for it."""
        key = self._normalize(email)

        min_length = self._settings.min_password_length
        if not credential or len(credential) < min_length:
            raise WeakCredentialError(min_length)

        if self._accounts.get(key) is not None:
            logger.debug("Rejected duplicate registration for %s", key)
            raise DuplicateAccountError(key)

        self._accounts.add(Account(email=key, credential=self._hasher.hash(credential)))
        user = SessionUser(email=key)
        self._sessions.save(user)
        logger.info("Registered account %s", key)
        return user

    def login(self, email: str, credential: str) -> SessionUser:
        """Check the password and establish a session."""
        key = self._normalize(email)

        account = self._accounts.get(key)
        if account is None:
            raise UnknownAccountError(key)

        if not self._hasher.verify(credential, account.credential):
            logger.debug("Rejected sign-in for %s", key)
            raise BadCredentialError()

        user = SessionUser(email=key)
        self._sessions.save(user)
        logger.info("Signed in %s", key)
        return user

    def logout(self) -> None:
        """Clear the session."""
        self._sessions.clear()

    def current_user(self) -> Optional[SessionUser]:
        """Return the persisted session user, if any."""
        return self._sessions.load()


# Verify the implementation satisfies the interface
def _verify_interface(store: KeyValueStore) -> IAccountService:
    """Type check that AccountService implements IAccountService."""
    service: IAccountService = AccountService(store)
    return service
