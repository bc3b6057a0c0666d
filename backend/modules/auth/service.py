"""
Authentication service implementation.

Signup, signin and signout, composed from a user repository, a password
hasher and a token service. All three are injected, so the service holds
no global state.
"""

import logging
from functools import cached_property

from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IAuthService, IPasswordHasher, ITokenService, IUserRepository
from .models import AuthResponse, SigninRequest, SignupRequest, User
from .exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError

logger = logging.getLogger(__name__)

# Compared against on signin for unknown emails, so that path hashes too.
_DUMMY_PASSWORD = "signin-timing-placeholder"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are stateless: signout does not invalidate anything server-side,
    and there is no refresh or revocation mechanism.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """Create a user with a hashed password and issue a token."""
        if self._users.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)

        password_hash = self._hasher.hash(request.password)
        user = self._users.create(request.email, password_hash)
        logger.info("User signed up: %s", user.id)

        return self._auth_response(user, "User created successfully")

    async def signin(self, request: SigninRequest) -> AuthResponse:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same error.
        """
        user = self._users.get_by_email(request.email)

        if user is None:
            self._hasher.verify(request.password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._hasher.verify(request.password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info("User signed in: %s", user.id)
        return self._auth_response(user, "Signed in successfully")

    async def signout(self, user: AuthenticatedUser) -> MessageResponse:
        """
        Acknowledge signout.

        The client discards its token. The token itself remains valid
        until it expires; no server state changes.
        """
        logger.info("User signed out: %s", user.id)
        return MessageResponse(message="Signed out successfully")

    @cached_property
    def _dummy_hash(self) -> str:
        return self._hasher.hash(_DUMMY_PASSWORD)

    def _auth_response(self, user: User, message: str) -> AuthResponse:
        token = self._tokens.issue(user.id, user.email)
        return AuthResponse(message=message, token=token, user=user.to_response())
