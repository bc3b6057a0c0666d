"""
Base repository class for database access.

Provides a common abstraction layer for the Supabase-backed repositories,
encapsulating client access and the translation of PostgREST failures
into the store error used across the backend.
"""

from typing import Any, TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StoreError


T = TypeVar("T")

# Postgres error codes the repositories react to.
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for Supabase repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() which turns PostgREST errors into StoreError
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            def get_by_id(self, post_id: str) -> Optional[Post]:
                result = self._execute(
                    self._db.table("posts").select("*").eq("id", post_id),
                    "get post",
                )
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: Query builder returned by the Supabase client.
            operation: Short description used in error details.

        Returns:
            The PostgREST response.

        Raises:
            StoreError: If PostgREST reports a failure. The Postgres error
                code is kept in ``details["code"]``.
        """
        try:
            return query.execute()
        except APIError as e:
            raise StoreError(
                f"Store operation failed: {operation}: {e.message}",
                operation=operation,
                details={"code": e.code},
            ) from e
