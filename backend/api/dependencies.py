"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from the settings
the application was created with.

The container lives on ``app.state``; there are no module-level service
singletons. Tests either build an app with their own settings or replace
a service with ``app.dependency_overrides``.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings
from shared.memory import MemoryStore

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import (
        IAuthService,
        IPasswordHasher,
        ITokenService,
        IUserRepository,
    )
    from modules.posts.interfaces import IPostRepository, IPostService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and cached
    for the lifetime of the container.

    The storage backend is chosen by ``settings.storage_backend``:
    "supabase" builds Supabase repositories, "memory" builds in-memory
    repositories sharing one MemoryStore.
    """

    def __init__(self, settings: Settings, memory_store: Optional[MemoryStore] = None) -> None:
        self._settings = settings
        self._memory_store = memory_store
        self._supabase: "Client | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._token_service: "ITokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._post_repository: "IPostRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def memory_store(self) -> MemoryStore:
        """Get the in-memory store (memory backend only)."""
        if self._memory_store is None:
            self._memory_store = MemoryStore()
        return self._memory_store

    @property
    def supabase(self) -> "Client":
        """Get the Supabase client (supabase backend only)."""
        if self._supabase is None:
            from shared.database import create_supabase_client
            self._supabase = create_supabase_client(self._settings)
        return self._supabase

    @property
    def password_hasher(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.password import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self._settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_service(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self._settings.jwt_secret,
                algorithm=self._settings.jwt_algorithm,
                expires_in=timedelta(hours=self._settings.jwt_expiry_hours),
            )
        return self._token_service

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository for the configured backend."""
        if self._user_repository is None:
            from modules.auth.repository import InMemoryUserRepository, UserRepository
            if self._settings.storage_backend == "memory":
                self._user_repository = InMemoryUserRepository(self.memory_store)
            else:
                self._user_repository = UserRepository(self.supabase)
        return self._user_repository

    @property
    def post_repository(self) -> "IPostRepository":
        """Get the post repository for the configured backend."""
        if self._post_repository is None:
            from modules.posts.repository import InMemoryPostRepository, PostRepository
            if self._settings.storage_backend == "memory":
                self._post_repository = InMemoryPostRepository(self.memory_store)
            else:
                self._post_repository = PostRepository(self.supabase)
        return self._post_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_service,
            )
        return self._auth_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(posts=self.post_repository)
        return self._post_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The next access rebuilds them from the settings. The memory store
        is kept, so stored rows survive a reset.
        """
        self._supabase = None
        self._password_hasher = None
        self._token_service = None
        self._user_repository = None
        self._post_repository = None
        self._auth_service = None
        self._post_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_token_service(container: ServiceContainer = Depends(get_container)) -> "ITokenService":
    """FastAPI dependency for token service."""
    return container.token_service


def get_post_service(container: ServiceContainer = Depends(get_container)) -> "IPostService":
    """FastAPI dependency for post service."""
    return container.posts
