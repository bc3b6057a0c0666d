"""
Auth API endpoints.

Provides signup, signin and signout.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IAuthService
from .models import AuthResponse, SigninRequest, SignupRequest

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    Returns a token for the new user. Fails with 400 if the email is
    invalid, the password is shorter than 6 characters, or the email is
    already registered.
    """
    return await service.signup(request)


@router.post("/signin", response_model=AuthResponse)
async def signin(
    request: SigninRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with email and password.
    """
    return await service.signin(request)


@router.post("/signout", response_model=MessageResponse)
async def signout(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Sign out.

    Tokens are not revoked server-side; the client is expected to drop
    its token. Issued tokens stay valid until they expire.
    """
    return await service.signout(user)
