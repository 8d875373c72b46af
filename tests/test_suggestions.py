"""Tests for the AI suggestion service."""

from __future__ import annotations

import pytest

from resume_studio.services.llm_providers import LLMError, LLMProvider
from resume_studio.services.suggestions import (
    FAILED_MESSAGE,
    UNAVAILABLE_MESSAGE,
    SuggestionService,
)


class MockProvider(LLMProvider):
    def __init__(self, response: str = "Result", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.last_prompt: str | None = None
        self.last_config: dict | None = None

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.last_prompt = prompt
        self.last_config = config
        if self.error is not None:
            raise self.error
        return self.response


class TestSuggestionService:
    def test_returns_trimmed_text(self) -> None:
        provider = MockProvider(response="\n  Led a team of five engineers.  \n")
        service = SuggestionService(provider=provider)

        assert service.suggest("Rewrite: led team") == "Led a team of five engineers."
        assert provider.last_prompt == "Rewrite: led team"
        assert provider.last_config == {"temperature": 0.7}

    def test_provider_failure_returns_fixed_message(self) -> None:
        service = SuggestionService(provider=MockProvider(error=LLMError("boom")))

        assert service.suggest("anything") == FAILED_MESSAGE

    def test_missing_api_key_returns_unavailable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        assert SuggestionService().suggest("anything") == UNAVAILABLE_MESSAGE

    def test_unavailable_message_text(self) -> None:
        assert UNAVAILABLE_MESSAGE == "AI service is unavailable. Please configure your API Key."
