"""
Accounts module exceptions.

These exceptions are raised by the accounts module and are shown to the
student as inline messages by the front end.
"""

from shared.exceptions import AuthenticationError, ValidationError


class AccountError(AuthenticationError):
    """Base exception for registration and sign-in failures."""

    pass


class DomainMismatchError(AccountError):
    """Raised when an email does not carry the required student domain."""

    def __init__(self, email: str, suffix: str):
        super().__init__(
            f"Use your {suffix} email.",
            code="DOMAIN_MISMATCH",
            details={"email": email, "required_suffix": suffix},
        )


class WeakCredentialError(ValidationError):
    """Raised when a new password is shorter than the configured minimum."""

    def __init__(self, min_length: int):
        super().__init__(
            f"Password must be {min_length}+ characters.",
            code="WEAK_CREDENTIAL",
            details={"min_length": min_length},
        )


class DuplicateAccountError(AccountError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Account already exists. Try logging in.",
            code="DUPLICATE_ACCOUNT",
            details={"email": email},
        )


class UnknownAccountError(AccountError):
    """Raised when signing in with an email that has no account."""

    def __init__(self, email: str):
        super().__init__(
            "No account found. Create one.",
            code="UNKNOWN_ACCOUNT",
            details={"email": email},
        )


class BadCredentialError(AccountError):
    """Raised when the password does not match the stored credential."""

    def __init__(self):
        super().__init__("Incorrect password.", code="BAD_CREDENTIAL")


class NotSignedInError(AccountError):
    """Raised when an operation needs a signed-in student and there is none."""

    def __init__(self, message: str = "Sign in to continue."):
        super().__init__(message, code="NOT_SIGNED_IN")
