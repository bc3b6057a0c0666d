"""
User repositories.

Two implementations of IUserRepository:
- UserRepository: Supabase ``users`` table
- InMemoryUserRepository: rows in a shared MemoryStore

Email uniqueness is enforced by the store itself (unique index in
Postgres, the locked email index in memory). Losing a concurrent signup
race surfaces as EmailAlreadyRegisteredError from create().
"""

import uuid
from datetime import datetime, timezone
from typing import Optional, Any

from supabase import Client

from shared.exceptions import StoreError
from shared.memory import MemoryStore
from shared.repository import BaseRepository, UNIQUE_VIOLATION
from .exceptions import EmailAlreadyRegisteredError
from .models import User


class UserRepository(BaseRepository[User]):
    """Repository for the Supabase ``users`` table."""

    TABLE = "users"

    def __init__(self, db: Client) -> None:
        super().__init__(db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        result = self._execute(
            self._db.table(self.TABLE).select("*").eq("email", email),
            "get user by email",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, email: str, password_hash: str) -> User:
        """
        Insert a user row. ID and created_at are generated by Postgres.

        Raises:
            EmailAlreadyRegisteredError: On a unique-index violation.
        """
        data = {"email": email, "password_hash": password_hash}
        try:
            result = self._execute(
                self._db.table(self.TABLE).insert(data),
                "create user",
            )
        except StoreError as e:
            if e.details.get("code") == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(email) from e
            raise
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
        )


class InMemoryUserRepository:
    """IUserRepository over a MemoryStore."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def get_by_email(self, email: str) -> Optional[User]:
        with self._store.lock:
            user_id = self._store.users_by_email.get(email)
            if user_id is None:
                return None
            return User(**self._store.users[user_id])

    def create(self, email: str, password_hash: str) -> User:
        with self._store.lock:
            if email in self._store.users_by_email:
                raise EmailAlreadyRegisteredError(email)

            row = {
                "id": str(uuid.uuid4()),
                "email": email,
                "password_hash": password_hash,
                "created_at": datetime.now(timezone.utc),
            }
            self._store.users[row["id"]] = row
            self._store.users_by_email[email] = row["id"]
            return User(**row)
