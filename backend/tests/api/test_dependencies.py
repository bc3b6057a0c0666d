"""Tests for api/dependencies.py."""

import pytest
from unittest.mock import MagicMock, patch

from api.dependencies import ServiceContainer
from modules.auth.repository import InMemoryUserRepository, UserRepository
from modules.posts.repository import InMemoryPostRepository, PostRepository
from shared.memory import MemoryStore
from tests.conftest import make_test_settings


class TestServiceContainer:
    def test_memory_backend(self):
        container = ServiceContainer(make_test_settings())

        assert isinstance(container.user_repository, InMemoryUserRepository)
        assert isinstance(container.post_repository, InMemoryPostRepository)

    def test_memory_repositories_share_store(self):
        store = MemoryStore()
        container = ServiceContainer(make_test_settings(), memory_store=store)

        user = container.user_repository.create("a@x.com", "hash")

        assert container.memory_store is store
        assert user.id in store.users

    @patch("shared.database.create_client")
    def test_supabase_backend(self, mock_create):
        mock_create.return_value = MagicMock()
        container = ServiceContainer(make_test_settings(
            storage_backend="supabase",
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="test-key",
        ))

        assert isinstance(container.user_repository, UserRepository)
        assert isinstance(container.post_repository, PostRepository)
        mock_create.assert_called_once_with("https://test.supabase.co", "test-key")

    def test_supabase_backend_without_config(self):
        container = ServiceContainer(make_test_settings(storage_backend="supabase"))
        with pytest.raises(RuntimeError):
            container.user_repository

    def test_services_are_cached(self):
        container = ServiceContainer(make_test_settings())
        assert container.auth is container.auth
        assert container.posts is container.posts

    def test_reset_rebuilds_services_but_keeps_store(self):
        container = ServiceContainer(make_test_settings())
        auth = container.auth
        container.user_repository.create("a@x.com", "hash")

        container.reset()

        assert container.auth is not auth
        assert container.user_repository.get_by_email("a@x.com") is not None

    def test_token_service_uses_settings(self):
        container = ServiceContainer(make_test_settings(jwt_secret="configured"))
        token = container.token_service.issue("u1", "a@x.com")
        assert container.token_service.verify(token).sub == "u1"
