"""Tests for modules/posts/repository.py."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.posts.repository import (
    FOREIGN_KEY_VIOLATION,
    POST_COLUMNS,
    InMemoryPostRepository,
    PostRepository,
)
from modules.auth.exceptions import InvalidTokenError
from shared.exceptions import StoreError
from shared.memory import MemoryStore

POST_ID = "22222222-2222-2222-2222-222222222222"
AUTHOR_ID = "11111111-1111-1111-1111-111111111111"


def _post_row(**overrides) -> dict:
    row = {
        "id": POST_ID,
        "title": "Hello",
        "content": "World",
        "author_id": AUTHOR_ID,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
        "author": {"id": AUTHOR_ID, "email": "a@x.com"},
    }
    row.update(overrides)
    return row


class TestPostRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return PostRepository(mock_db)

    def test_count(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.execute.return_value.count = 7

        assert repo.count() == 7
        mock_db.table.return_value.select.assert_called_once_with("id", count="exact", head=True)

    def test_count_none_is_zero(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.execute.return_value.count = None
        assert repo.count() == 0

    def test_list_recent(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        ranged = select.order.return_value.order.return_value.range.return_value
        ranged.execute.return_value.data = [_post_row()]

        posts = repo.list_recent(offset=10, limit=10)

        assert [p.id for p in posts] == [POST_ID]
        mock_db.table.return_value.select.assert_called_once_with(POST_COLUMNS)
        select.order.assert_called_once_with("created_at", desc=True)
        select.order.return_value.order.assert_called_once_with("id", desc=True)
        select.order.return_value.order.return_value.range.assert_called_once_with(10, 19)

    def test_get_by_id_maps_author(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            _post_row()
        ]

        post = repo.get_by_id(POST_ID)

        assert post.author.id == AUTHOR_ID
        assert post.author.email == "a@x.com"
        assert post.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_get_by_id_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_id(POST_ID) is None

    def test_get_by_id_invalid_uuid(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.side_effect = APIError(
            {"message": "invalid input syntax for type uuid", "code": "22P02", "details": None, "hint": None}
        )
        assert repo.get_by_id("not-a-uuid") is None

    def test_create_writes_equal_timestamps(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [{"id": POST_ID}]
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            _post_row()
        ]
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)

        post = repo.create(AUTHOR_ID, "Hello", "World", created_at)

        assert post.id == POST_ID
        mock_db.table.return_value.insert.assert_called_once_with({
            "author_id": AUTHOR_ID,
            "title": "Hello",
            "content": "World",
            "created_at": created_at.isoformat(),
            "updated_at": created_at.isoformat(),
        })

    def test_create_unknown_author(self, repo, mock_db):
        """A foreign-key violation means the caller's user is gone."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "violates foreign key constraint", "code": FOREIGN_KEY_VIOLATION, "details": None, "hint": None}
        )

        with pytest.raises(InvalidTokenError):
            repo.create(AUTHOR_ID, "Hello", "World", datetime.now(timezone.utc))

    def test_create_other_store_error_raises(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "connection lost", "code": "08006", "details": None, "hint": None}
        )

        with pytest.raises(StoreError):
            repo.create(AUTHOR_ID, "Hello", "World", datetime.now(timezone.utc))

    def test_create_read_back_missing(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [{"id": POST_ID}]
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        with pytest.raises(StoreError):
            repo.create(AUTHOR_ID, "Hello", "World", datetime.now(timezone.utc))

    def test_update_serializes_datetimes(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [{"id": POST_ID}]
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            _post_row(title="New")
        ]
        updated_at = datetime(2024, 1, 2, tzinfo=timezone.utc)

        post = repo.update(POST_ID, {"title": "New", "updated_at": updated_at})

        assert post.title == "New"
        update.assert_called_once_with({"title": "New", "updated_at": updated_at.isoformat()})
        update.return_value.eq.assert_called_once_with("id", POST_ID)

    def test_update_missing(self, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
        assert repo.update(POST_ID, {"title": "New"}) is None

    def test_delete(self, repo, mock_db):
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = [
            {"id": POST_ID}
        ]
        assert repo.delete(POST_ID) is True

    def test_delete_missing(self, repo, mock_db):
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = []
        assert repo.delete(POST_ID) is False


class TestInMemoryPostRepository:
    @pytest.fixture
    def store(self):
        store = MemoryStore()
        store.users[AUTHOR_ID] = {"id": AUTHOR_ID, "email": "a@x.com"}
        return store

    @pytest.fixture
    def repo(self, store):
        return InMemoryPostRepository(store)

    def test_create_embeds_author(self, repo):
        post = repo.create(AUTHOR_ID, "Hello", "World", datetime.now(timezone.utc))

        assert post.author.email == "a@x.com"
        assert post.created_at == post.updated_at

    def test_create_unknown_author(self, repo):
        with pytest.raises(InvalidTokenError):
            repo.create("missing", "Hello", "World", datetime.now(timezone.utc))

    def test_list_recent_orders_by_created_at(self, repo):
        now = datetime.now(timezone.utc)
        old = repo.create(AUTHOR_ID, "old", "x", now - timedelta(hours=1))
        new = repo.create(AUTHOR_ID, "new", "x", now)

        assert [p.id for p in repo.list_recent(0, 10)] == [new.id, old.id]

    def test_list_recent_ties_list_later_insert_first(self, repo):
        now = datetime.now(timezone.utc)
        first = repo.create(AUTHOR_ID, "first", "x", now)
        second = repo.create(AUTHOR_ID, "second", "x", now)

        assert [p.id for p in repo.list_recent(0, 10)] == [second.id, first.id]

    def test_list_recent_window(self, repo):
        now = datetime.now(timezone.utc)
        for i in range(5):
            repo.create(AUTHOR_ID, f"post {i}", "x", now + timedelta(seconds=i))

        assert [p.title for p in repo.list_recent(1, 2)] == ["post 3", "post 2"]
        assert repo.count() == 5

    def test_update_and_delete(self, repo):
        post = repo.create(AUTHOR_ID, "Hello", "World", datetime.now(timezone.utc))

        assert repo.update(post.id, {"title": "New"}).title == "New"
        assert repo.delete(post.id) is True
        assert repo.delete(post.id) is False
        assert repo.update(post.id, {"title": "x"}) is None
