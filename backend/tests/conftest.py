"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Apps built here use the in-memory store, a fixed JWT secret and the
cheapest bcrypt work factor so tests stay fast.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Callable
import jwt  # PyJWT
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_test_settings(**overrides) -> Settings:
    """Settings for a self-contained test app."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "bcrypt_rounds": 4,
        "storage_backend": "memory",
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def test_settings() -> Settings:
    """Settings using the in-memory store."""
    return make_test_settings()


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create a fresh app (and empty store) for each test."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the fresh app."""
    return TestClient(app)


@pytest.fixture
def signup(client: TestClient) -> Callable[..., dict]:
    """
    Sign up a user through the API.

    Returns a function taking (email, password) and returning the
    signup response body.
    """

    def _signup(email: str = "a@x.com", password: str = "secret1") -> dict:
        response = client.post("/auth/signup", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _signup


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}
