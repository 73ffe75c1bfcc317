"""
Accounts module.

Handles student registration, sign-in and the persisted current session.

Public API:
- IAccountService: Interface for account operations
- ICredentialHasher: Interface for password hashing
- Account: Stored account record
- Account exceptions: DomainMismatchError, BadCredentialError, etc.
"""

from .interfaces import IAccountService, ICredentialHasher
from .models import Account, SessionRecord
from .exceptions import (
    AccountError,
    DomainMismatchError,
    WeakCredentialError,
    DuplicateAccountError,
    UnknownAccountError,
    BadCredentialError,
    NotSignedInError,
)

__all__ = [
    # Interfaces
    "IAccountService",
    "ICredentialHasher",
    # Models
    "Account",
    "SessionRecord",
    # Exceptions
    "AccountError",
    "DomainMismatchError",
    "WeakCredentialError",
    "DuplicateAccountError",
    "UnknownAccountError",
    "BadCredentialError",
    "NotSignedInError",
]
