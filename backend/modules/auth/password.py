"""
bcrypt password hasher.

Digests embed their own salt and work factor, so stored hashes stay
verifiable after BCRYPT_ROUNDS changes.
"""

import bcrypt

from .exceptions import PasswordHashingError


class PasswordHasher:
    """bcrypt-backed implementation of IPasswordHasher."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """
        Produce a salted digest for storage.

        Raises:
            PasswordHashingError: If bcrypt rejects the input or work factor
        """
        try:
            return bcrypt.hashpw(
                password.encode("utf-8"),
                bcrypt.gensalt(rounds=self._rounds),
            ).decode("utf-8")
        except (ValueError, TypeError) as e:
            raise PasswordHashingError(str(e)) from e

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored digest. False on mismatch or a malformed digest."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False
