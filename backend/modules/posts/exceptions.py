"""
Posts module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostAccessDeniedError(AuthorizationError):
    """Raised when a user tries to change a post they did not write."""

    def __init__(self, post_id: str, action: str):
        super().__init__(
            f"Forbidden - You can only {action} your own posts",
            code="POST_ACCESS_DENIED",
            details={"post_id": post_id},
        )
