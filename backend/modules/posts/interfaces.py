"""
Posts module interfaces.

The API layer depends on IPostService for all post operations. The
service depends on IPostRepository for storage.
"""

from datetime import datetime
from typing import Protocol, Optional, Any, runtime_checkable

from shared.models import AuthenticatedUser

from .models import CreatePostRequest, Post, PostListResponse, UpdatePostRequest


@runtime_checkable
class IPostRepository(Protocol):
    """Storage for posts. Performs no authorization checks."""

    def count(self) -> int:
        ...

    def list_recent(self, offset: int, limit: int) -> list[Post]:
        """Posts ordered by creation time, newest first."""
        ...

    def get_by_id(self, post_id: str) -> Optional[Post]:
        ...

    def create(
        self,
        author_id: str,
        title: str,
        content: str,
        created_at: datetime,
    ) -> Post:
        """
        Insert a post with created_at and updated_at both set to created_at.

        Raises:
            InvalidTokenError: If no user with author_id exists
        """
        ...

    def update(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        """Apply fields to a post. Returns None if the post is gone."""
        ...

    def delete(self, post_id: str) -> bool:
        ...


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.

    Every method takes the caller explicitly. Anyone authenticated can
    read every post; only the author can change or delete one.
    """

    async def list_posts(self, page: int = 1, limit: int = 10) -> PostListResponse:
        """
        List all posts, newest first.

        Args:
            page: Page number (1-indexed)
            limit: Items per page

        Returns:
            The page of posts and pagination metadata. A page past the
            end has no posts but still carries valid metadata.
        """
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Raises:
            PostNotFoundError: If the post does not exist
        """
        ...

    async def create_post(self, user: AuthenticatedUser, request: CreatePostRequest) -> Post:
        """Create a post authored by the caller."""
        ...

    async def update_post(
        self,
        user: AuthenticatedUser,
        post_id: str,
        request: UpdatePostRequest,
    ) -> Post:
        """
        Apply a partial update to the caller's post.

        Raises:
            PostNotFoundError: If the post does not exist
            PostAccessDeniedError: If the caller is not the author
        """
        ...

    async def delete_post(self, user: AuthenticatedUser, post_id: str) -> None:
        """
        Delete the caller's post.

        Raises:
            PostNotFoundError: If the post does not exist
            PostAccessDeniedError: If the caller is not the author
        """
        ...
