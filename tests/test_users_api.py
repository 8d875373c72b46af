"""Tests for the admin user directory endpoint."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resume_studio.api.main import app
from resume_studio.services.auth import create_user
from resume_studio.services.users import UserDirectoryError


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


def _login(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"X-Session-Token": response.json()["token"]}


@pytest.fixture
def accounts() -> None:
    create_user("admin@example.com", "admin-pw", "admin")
    create_user("user@example.com", "user-pw", "user")


class TestListUsers:
    """Tests for GET /api/users."""

    def test_admin_sees_all_users(self, client: TestClient, accounts: None) -> None:
        headers = _login(client, "admin@example.com", "admin-pw")

        response = client.get("/api/users", headers=headers)

        assert response.status_code == 200
        assert response.json() == [
            {"email": "admin@example.com", "role": "admin"},
            {"email": "user@example.com", "role": "user"},
        ]

    def test_regular_user_forbidden(self, client: TestClient, accounts: None) -> None:
        headers = _login(client, "user@example.com", "user-pw")

        response = client.get("/api/users", headers=headers)

        assert response.status_code == 403

    def test_requires_authentication(self, client: TestClient) -> None:
        assert client.get("/api/users").status_code == 401
        assert client.get("/api/users", headers={"X-Session-Token": "bogus"}).status_code == 401

    def test_storage_failure(
        self, client: TestClient, accounts: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        headers = _login(client, "admin@example.com", "admin-pw")

        def _fail() -> list:
            raise UserDirectoryError("Failed to load users")

        monkeypatch.setattr("resume_studio.api.routes.users.list_users", _fail)

        response = client.get("/api/users", headers=headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load users"
