"""
Base exception classes for the Campus Market backend.

Modules raise subclasses of these; the terminal front end catches MarketError
and prints the message, so nothing here needs to know about rendering.
"""

from typing import Optional, Any


class MarketError(Exception):
    """
    Base exception for all Campus Market errors.

    All custom exceptions should inherit from this class. Every one of them
    is recoverable by the user: the front end shows the message inline.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MarketError):
    """A listing or account does not exist."""

    pass


class ValidationError(MarketError):
    """Submitted values break a field constraint."""

    pass


class AuthenticationError(MarketError):
    """Sign-up or sign-in was refused, or nobody is signed in."""

    pass


class AuthorizationError(MarketError):
    """Authorization failed (caller does not own the resource)."""

    pass
