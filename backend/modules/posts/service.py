"""
Posts service implementation.

Ownership-checked CRUD over an IPostRepository. The caller identity comes
from the auth gate and is passed in explicitly on every call.
"""

import logging
from datetime import datetime, timedelta, timezone

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IPostRepository, IPostService
from .models import (
    CreatePostRequest,
    MAX_PAGE_SIZE,
    Pagination,
    Post,
    PostListResponse,
    UpdatePostRequest,
)
from .exceptions import PostNotFoundError, PostAccessDeniedError

logger = logging.getLogger(__name__)

# Smallest step the stores can represent (Postgres timestamptz is microsecond precision).
_TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


class PostService(IPostService):
    """
    Post service.

    Implements IPostService on top of an injected repository.
    """

    def __init__(self, posts: IPostRepository):
        self._posts = posts

    async def list_posts(self, page: int = 1, limit: int = 10) -> PostListResponse:
        """List posts, newest first, with pagination metadata."""
        fields = {}
        if page < 1:
            fields["page"] = "Page must be at least 1"
        if limit < 1 or limit > MAX_PAGE_SIZE:
            fields["limit"] = f"Limit must be between 1 and {MAX_PAGE_SIZE}"
        if fields:
            raise ValidationError(fields=fields)

        offset = (page - 1) * limit
        total = self._posts.count()

        # Past the last page: skip the query, the page is empty.
        posts = self._posts.list_recent(offset, limit) if offset < total else []

        return PostListResponse(
            posts=posts,
            pagination=Pagination.build(page, limit, total),
        )

    async def get_post(self, post_id: str) -> Post:
        """Get a post by ID."""
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def create_post(self, user: AuthenticatedUser, request: CreatePostRequest) -> Post:
        """Create a post. The author is always the caller."""
        post = self._posts.create(
            author_id=user.id,
            title=request.title,
            content=request.content,
            created_at=datetime.now(timezone.utc),
        )
        logger.info("Post %s created by %s", post.id, user.id)
        return post

    async def update_post(
        self,
        user: AuthenticatedUser,
        post_id: str,
        request: UpdatePostRequest,
    ) -> Post:
        """Apply the supplied fields and bump updated_at."""
        post = self._get_owned_post(user, post_id, "edit")

        fields = request.changes()
        # updated_at must move forward even if the clock has not.
        fields["updated_at"] = max(
            datetime.now(timezone.utc),
            post.updated_at + _TIMESTAMP_RESOLUTION,
        )

        updated = self._posts.update(post_id, fields)
        if updated is None:
            raise PostNotFoundError(post_id)
        return updated

    async def delete_post(self, user: AuthenticatedUser, post_id: str) -> None:
        """Delete a post owned by the caller."""
        self._get_owned_post(user, post_id, "delete")

        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info("Post %s deleted by %s", post_id, user.id)

    def _get_owned_post(self, user: AuthenticatedUser, post_id: str, action: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        if post.author_id != user.id:
            logger.warning(
                "User %s denied %s on post %s owned by %s",
                user.id,
                action,
                post_id,
                post.author_id,
            )
            raise PostAccessDeniedError(post_id, action)

        return post
