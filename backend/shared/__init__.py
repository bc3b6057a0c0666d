"""
Shared infrastructure for the blog backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- memory: In-process store for the memory backend
- exceptions: Base exception classes
- repository: Base class for Supabase repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .memory import MemoryStore
from .exceptions import (
    BlogError,
    ValidationError,
    ConflictError,
    NotFoundError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    StoreError,
)
from .models import AuthenticatedUser, CamelModel, MessageResponse

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "MemoryStore",
    "BlogError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "StoreError",
    "AuthenticatedUser",
    "CamelModel",
    "MessageResponse",
]
