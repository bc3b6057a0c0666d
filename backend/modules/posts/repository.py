"""
Post repositories.

Two implementations of IPostRepository:
- PostRepository: Supabase ``posts`` table, author embedded from ``users``
- InMemoryPostRepository: rows in a shared MemoryStore

Note: These repositories do NOT perform authorization checks.
The service layer is responsible for verifying post ownership.
"""

import uuid
from datetime import datetime
from typing import Optional, Any

from supabase import Client

from modules.auth.exceptions import InvalidTokenError
from shared.exceptions import StoreError
from shared.memory import MemoryStore
from shared.repository import BaseRepository, INVALID_TEXT_REPRESENTATION
from .models import AuthorSummary, Post

# Postgres foreign_key_violation.
FOREIGN_KEY_VIOLATION = "23503"

POST_COLUMNS = "id, title, content, author_id, created_at, updated_at, author:users(id, email)"


class PostRepository(BaseRepository[Post]):
    """
    Repository for the Supabase ``posts`` table.

    All reads embed the author's id and email through the
    ``posts.author_id -> users.id`` foreign key.
    """

    TABLE = "posts"

    def __init__(self, db: Client) -> None:
        super().__init__(db)

    def count(self) -> int:
        """Total number of posts."""
        result = self._execute(
            self._db.table(self.TABLE).select("id", count="exact", head=True),
            "count posts",
        )
        return result.count or 0

    def list_recent(self, offset: int, limit: int) -> list[Post]:
        """
        Get a page of posts, newest first.

        Args:
            offset: Number of posts to skip.
            limit: Maximum number of posts to return.
        """
        query = (
            self._db.table(self.TABLE)
            .select(POST_COLUMNS)
            .order("created_at", desc=True)
            .order("id", desc=True)
            .range(offset, offset + limit - 1)
        )
        result = self._execute(query, "list posts")
        return [self._map_to_post(row) for row in result.data]

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """
        Get a post by ID.

        Returns None if no row matches or the ID is not a valid UUID.
        """
        try:
            result = self._execute(
                self._db.table(self.TABLE).select(POST_COLUMNS).eq("id", post_id),
                "get post",
            )
        except StoreError as e:
            if e.details.get("code") == INVALID_TEXT_REPRESENTATION:
                return None
            raise

        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def create(
        self,
        author_id: str,
        title: str,
        content: str,
        created_at: datetime,
    ) -> Post:
        """
        Insert a post and read it back with its author.

        Both timestamps are written explicitly so they are equal.

        Raises:
            InvalidTokenError: If the author no longer exists (the token
                names a deleted user)
        """
        timestamp = created_at.isoformat()
        data = {
            "author_id": author_id,
            "title": title,
            "content": content,
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        try:
            result = self._execute(self._db.table(self.TABLE).insert(data), "create post")
        except StoreError as e:
            if e.details.get("code") == FOREIGN_KEY_VIOLATION:
                raise InvalidTokenError() from e
            raise

        post_id = str(result.data[0]["id"])
        post = self.get_by_id(post_id)
        if post is None:
            raise StoreError(
                "Created post could not be read back",
                operation="create post",
                details={"post_id": post_id},
            )
        return post

    def update(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        """Apply fields to a post and return the updated row."""
        data = {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in fields.items()
        }
        result = self._execute(
            self._db.table(self.TABLE).update(data).eq("id", post_id),
            "update post",
        )
        if not result.data:
            return None
        return self.get_by_id(post_id)

    def delete(self, post_id: str) -> bool:
        """
        Delete a post.

        Returns:
            True if a row was deleted.
        """
        result = self._execute(
            self._db.table(self.TABLE).delete().eq("id", post_id),
            "delete post",
        )
        return bool(result.data)

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        author = data.get("author") or {}
        return Post(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            author_id=str(data["author_id"]),
            author=AuthorSummary(
                id=str(author.get("id", data["author_id"])),
                email=author.get("email", ""),
            ),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class InMemoryPostRepository:
    """IPostRepository over a MemoryStore."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def count(self) -> int:
        with self._store.lock:
            return len(self._store.posts)

    def list_recent(self, offset: int, limit: int) -> list[Post]:
        with self._store.lock:
            # Reversed first so equal timestamps list the later insert first.
            rows = sorted(
                reversed(list(self._store.posts.values())),
                key=lambda row: row["created_at"],
                reverse=True,
            )
            return [self._map_to_post(row) for row in rows[offset:offset + limit]]

    def get_by_id(self, post_id: str) -> Optional[Post]:
        with self._store.lock:
            row = self._store.posts.get(post_id)
            return self._map_to_post(row) if row else None

    def create(
        self,
        author_id: str,
        title: str,
        content: str,
        created_at: datetime,
    ) -> Post:
        with self._store.lock:
            if author_id not in self._store.users:
                raise InvalidTokenError()

            row = {
                "id": str(uuid.uuid4()),
                "author_id": author_id,
                "title": title,
                "content": content,
                "created_at": created_at,
                "updated_at": created_at,
            }
            self._store.posts[row["id"]] = row
            return self._map_to_post(row)

    def update(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        with self._store.lock:
            row = self._store.posts.get(post_id)
            if row is None:
                return None
            row.update(fields)
            return self._map_to_post(row)

    def delete(self, post_id: str) -> bool:
        with self._store.lock:
            return self._store.posts.pop(post_id, None) is not None

    def _map_to_post(self, row: dict[str, Any]) -> Post:
        author = self._store.users.get(row["author_id"], {})
        return Post(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            author_id=row["author_id"],
            author=AuthorSummary(id=row["author_id"], email=author.get("email", "")),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
