"""
Accounts module interface.

Other modules should depend on IAccountService, not the concrete implementation.
This enables testing with fakes and swapping the persistence underneath.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import SessionUser


@runtime_checkable
class ICredentialHasher(Protocol):
    """Turns a clear password into a storable credential and checks it later."""

    def hash(self, credential: str) -> str:
        """Return the storable form of credential."""
        ...

    def verify(self, credential: str, hashed: str) -> bool:
        """Return True if credential matches the stored value."""
        ...


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account and session operations.

    This protocol defines the contract that the accounts module exposes
    to the rest of the application.
    """

    def register(self, email: str, credential: str) -> SessionUser:
        """
        Create an account and sign it in.

        Args:
            email: Student email address
            credential: Clear password

        Returns:
            SessionUser for the new account

        Raises:
            DomainMismatchError: If the email is not a student email
            WeakCredentialError: If the password is too short
            DuplicateAccountError: If the email is already registered
        """
        ...

    def login(self, email: str, credential: str) -> SessionUser:
        """
        Sign in to an existing account.

        Raises:
            DomainMismatchError: If the email is not a student email
            UnknownAccountError: If no account exists for the email
            BadCredentialError: If the password does not match
        """
        ...

    def logout(self) -> None:
        """Clear the current session. Always succeeds."""
        ...

    def current_user(self) -> Optional[SessionUser]:
        """
        Return the signed-in student, if any.

        Reads the persisted session, so the answer survives a restart.
        """
        ...
