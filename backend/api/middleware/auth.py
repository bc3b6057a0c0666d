"""
Bearer token authentication.

The auth gate for protected routes: reads ``Authorization: Bearer <token>``,
verifies the token and hands the caller's identity to the route. It never
touches the credential store.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.interfaces import ITokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service

# Bearer token extractor. Returns None instead of failing so the error
# response goes through our own handlers.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a signed-in user.

    Raises:
        MissingTokenError: No Authorization header, or not a Bearer header
        InvalidTokenError: Token is malformed, badly signed or expired

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    claims = tokens.verify(credentials.credentials)
    if claims is None:
        raise InvalidTokenError()

    return claims.to_user()
