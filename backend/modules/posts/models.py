"""
Posts module data models.
"""

import math
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class AuthorSummary(CamelModel):
    """The part of a user embedded in a post."""

    id: str
    email: str


class Post(CamelModel):
    """A blog post with its author summary."""

    id: str = Field(..., description="Post ID")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    author_id: str = Field(..., description="ID of the user who wrote the post")
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class CreatePostRequest(BaseModel):
    """Request to create a post."""

    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")


class UpdatePostRequest(BaseModel):
    """
    Partial update of a post.

    Omitted and null fields keep their current values.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)

    def changes(self) -> dict[str, str]:
        """Fields to write, without the ones left out."""
        return self.model_dump(exclude_none=True)


class Pagination(CamelModel):
    """Pagination metadata for post listings."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        )


class PostListResponse(CamelModel):
    """Page of posts, newest first."""

    posts: list[Post]
    pagination: Pagination


class PostResponse(CamelModel):
    """A single post."""

    post: Post


class PostMessageResponse(CamelModel):
    """A post with a confirmation message, returned by create and update."""

    message: str
    post: Post
