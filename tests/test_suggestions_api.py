"""Tests for the AI suggestion endpoint."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resume_studio.api.main import app
from resume_studio.services.auth import create_user
from resume_studio.services.llm_providers import LLMProvider
from resume_studio.services.suggestions import UNAVAILABLE_MESSAGE, SuggestionService


class _EchoProvider(LLMProvider):
    def send_prompt(self, prompt: str, config: dict) -> str:
        return f"  Better: {prompt}  "


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def headers(client: TestClient) -> dict[str, str]:
    create_user("writer@example.com", "pw")
    response = client.post("/api/login", json={"email": "writer@example.com", "password": "pw"})
    return {"X-Session-Token": response.json()["token"]}


class TestSuggestions:
    """Tests for POST /api/suggestions."""

    def test_suggestion_text(
        self, client: TestClient, headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(app.state, "suggestions", SuggestionService(provider=_EchoProvider()))

        response = client.post("/api/suggestions", json={"prompt": "led team"}, headers=headers)

        assert response.status_code == 200
        assert response.json() == {"text": "Better: led team"}

    def test_unconfigured_provider(
        self, client: TestClient, headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(app.state, "suggestions", SuggestionService())

        response = client.post("/api/suggestions", json={"prompt": "led team"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["text"] == UNAVAILABLE_MESSAGE

    def test_empty_prompt_rejected(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post("/api/suggestions", json={"prompt": ""}, headers=headers)

        assert response.status_code == 422

    def test_requires_token(self, client: TestClient) -> None:
        response = client.post("/api/suggestions", json={"prompt": "x"})

        assert response.status_code == 401
