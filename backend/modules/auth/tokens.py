"""
Identity token issuing and verification.

Tokens are HS256 JWTs carrying the user ID (``sub``) and email. Nothing
is stored server-side: a token is valid until it expires.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .models import TokenClaims

logger = logging.getLogger(__name__)


class TokenService:
    """PyJWT-backed implementation of ITokenService."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=24),
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token that expires after the configured duration."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Verify signature and expiry.

        Every failure returns None; callers cannot tell an expired token
        from a forged one.
        """
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "email", "exp"]},
            )
            return TokenClaims(**payload)
        except jwt.InvalidTokenError as e:
            logger.debug("Token rejected: %s", e)
            return None
        except PydanticValidationError:
            logger.debug("Token rejected: malformed claims")
            return None
