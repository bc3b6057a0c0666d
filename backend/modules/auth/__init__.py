"""
Authentication module.

Handles password hashing, identity tokens, and signup/signin/signout.

Public API:
- IAuthService: Interface for auth operations
- IPasswordHasher, ITokenService, IUserRepository: Collaborator interfaces
- AuthResponse, SignupRequest, SigninRequest, TokenClaims, User: Models
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService, IPasswordHasher, ITokenService, IUserRepository
from .models import (
    AuthResponse,
    SigninRequest,
    SignupRequest,
    TokenClaims,
    User,
    UserResponse,
)
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    PasswordHashingError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IPasswordHasher",
    "ITokenService",
    "IUserRepository",
    # Models
    "AuthResponse",
    "SigninRequest",
    "SignupRequest",
    "TokenClaims",
    "User",
    "UserResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "PasswordHashingError",
]
