"""
Post API endpoints.

Provides REST endpoints for post CRUD. Every endpoint requires a bearer
token; only the author may update or delete a post.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_post_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IPostService
from .models import (
    CreatePostRequest,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PostListResponse,
    PostMessageResponse,
    PostResponse,
    UpdatePostRequest,
)

router = APIRouter()


@router.get("", response_model=PostListResponse)
async def list_posts(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostListResponse:
    """
    List all posts, most recent first.

    Posts from every author are visible to any signed-in user.
    """
    return await service.list_posts(page, limit)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostResponse:
    """
    Get a single post with its author.
    """
    return PostResponse(post=await service.get_post(post_id))


@router.post("", response_model=PostMessageResponse, status_code=201)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostMessageResponse:
    """
    Create a post authored by the caller.
    """
    post = await service.create_post(user, request)
    return PostMessageResponse(message="Post created successfully", post=post)


@router.put("/{post_id}", response_model=PostMessageResponse)
async def update_post(
    post_id: str,
    request: UpdatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostMessageResponse:
    """
    Update the title and/or content of one of the caller's posts.
    """
    post = await service.update_post(user, post_id, request)
    return PostMessageResponse(message="Post updated successfully", post=post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """
    Delete one of the caller's posts.
    """
    await service.delete_post(user, post_id)
    return MessageResponse(message="Post deleted successfully")
