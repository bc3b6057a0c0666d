"""
Authentication module interfaces.

Other modules and the API layer should depend on these protocols, not the
concrete implementations. This enables testing with fakes and swapping
the credential store without touching business logic.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser, MessageResponse

from .models import AuthResponse, SigninRequest, SignupRequest, TokenClaims, User


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way salted password hashing."""

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            PasswordHashingError: If a digest cannot be produced
        """
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a digest. Never raises."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies signed, expiring identity tokens."""

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token for the given identity."""
        ...

    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Verify a token's signature and expiry.

        Returns:
            The token claims, or None for any invalid token
        """
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Storage for user records."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def create(self, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """
        Create an account and issue a token for it.

        Args:
            request: Validated email and password

        Returns:
            AuthResponse with the token and public user info

        Raises:
            EmailAlreadyRegisteredError: If the email is already registered
        """
        ...

    async def signin(self, request: SigninRequest) -> AuthResponse:
        """
        Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the
                password does not match
        """
        ...

    async def signout(self, user: AuthenticatedUser) -> MessageResponse:
        """Acknowledge a signout. Issued tokens stay valid until they expire."""
        ...
