"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from api.app import create_app
from tests.conftest import make_test_settings


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Blog API is running"}

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_readiness_check(self, client):
        """Readiness endpoint should report the storage backend."""
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "storage": "memory"}

    def test_health_requires_no_auth(self, client):
        assert client.get("/api/health", headers={"Authorization": "Bearer junk"}).status_code == 200


class TestAppFactory:
    def test_docs_hidden_by_default(self, client):
        assert client.get("/api/docs").status_code == 404

    def test_docs_enabled_in_debug(self):
        client = TestClient(create_app(make_test_settings(debug=True)))
        assert client.get("/api/docs").status_code == 200

    def test_cors_preflight(self, client):
        response = client.options(
            "/posts",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_lifespan_runs(self, app):
        """Startup and shutdown should complete with the test settings."""
        with TestClient(app) as client:
            assert client.get("/api/health").status_code == 200

    def test_each_app_has_its_own_store(self, test_settings):
        first = TestClient(create_app(test_settings))
        second = TestClient(create_app(test_settings))
        first.post("/auth/signup", json={"email": "a@x.com", "password": "secret1"})

        response = second.post("/auth/signup", json={"email": "a@x.com", "password": "secret1"})

        assert response.status_code == 201

    def test_openapi_schema(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert {"/auth/signup", "/auth/signin", "/auth/signout", "/posts", "/posts/{post_id}"} <= set(paths)
