"""
Posts module.

Handles post listing and ownership-checked create/update/delete.

Public API:
- IPostService: Interface for post operations
- IPostRepository: Storage interface
- Post, AuthorSummary, Pagination: Models
- PostNotFoundError, PostAccessDeniedError: Exceptions
"""

from .interfaces import IPostService, IPostRepository
from .models import (
    AuthorSummary,
    CreatePostRequest,
    Pagination,
    Post,
    PostListResponse,
    PostMessageResponse,
    PostResponse,
    UpdatePostRequest,
)
from .exceptions import PostNotFoundError, PostAccessDeniedError

__all__ = [
    # Interfaces
    "IPostService",
    "IPostRepository",
    # Models
    "AuthorSummary",
    "CreatePostRequest",
    "Pagination",
    "Post",
    "PostListResponse",
    "PostMessageResponse",
    "PostResponse",
    "UpdatePostRequest",
    # Exceptions
    "PostNotFoundError",
    "PostAccessDeniedError",
]
