"""
Credential hashing.

Two implementations of ICredentialHasher:

- BcryptHasher: salted bcrypt, the default.
- Sha256Hasher: a single unsalted SHA-256 hex digest. This matches what the
  browser prototype stored and exists only for stores carried over from it.
  It is not a secure way to keep passwords.
"""

import hashlib
import hmac

import bcrypt

from .interfaces import ICredentialHasher

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptHasher:
    """Salted bcrypt hashes."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, credential: str) -> str:
        secret = credential.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, credential: str, hashed: str) -> bool:
        secret = credential.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(secret, hashed.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


class Sha256Hasher:
    """Unsalted SHA-256 hex digests."""

    def hash(self, credential: str) -> str:
        return hashlib.sha256(credential.encode("utf-8")).hexdigest()

    def verify(self, credential: str, hashed: str) -> bool:
        return hmac.compare_digest(self.hash(credential), hashed)


def get_hasher(name: str) -> ICredentialHasher:
    """
    Build the hasher selected by the CREDENTIAL_HASHER setting.

    Args:
        name: "bcrypt" or "sha256"

    Returns:
        A hasher instance

    Raises:
        ValueError: If the name is not recognised
    """
    if name == "bcrypt":
        return BcryptHasher()
    if name == "sha256":
        return Sha256Hasher()
    raise ValueError(f"Unknown credential hasher: {name}")
