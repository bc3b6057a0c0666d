"""
In-process credential store.

Holds user and post rows in plain dicts guarded by a lock. Used when
``STORAGE_BACKEND=memory`` (local development, tests). Data is lost when
the process exits.
"""

import threading
from typing import Any


class MemoryStore:
    """
    Tables for the in-memory repositories.

    Rows are stored as dicts keyed by id. ``users_by_email`` is the unique
    index on user email; repositories must hold ``lock`` while checking
    and writing it so concurrent signups cannot both succeed.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users: dict[str, dict[str, Any]] = {}
        self.users_by_email: dict[str, str] = {}
        self.posts: dict[str, dict[str, Any]] = {}
