from __future__ import annotations

import pytest

from resume_studio.services.llm_providers import GeminiProvider, LLMError, LLMProvider


class MockLLMProvider(LLMProvider):
    """Mock provider for testing abstract base class."""

    def send_prompt(self, prompt: str, config: dict) -> str:
        return f"Mock response to: {prompt}"


class _FakeModels:
    def __init__(self, text: str | None = "  Suggested text  ", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    def generate_content(self, model: str, contents: str, config: dict):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return type("Response", (), {"text": self.text})()


def _install_fake_client(monkeypatch: pytest.MonkeyPatch, models: _FakeModels) -> None:
    class _FakeClient:
        def __init__(self, api_key: str) -> None:
            self.api_key = api_key
            self.models = models

    import google.genai as _genai

    monkeypatch.setattr(_genai, "Client", _FakeClient, raising=True)


def test_generate_llm_config_with_all_parameters() -> None:
    """Test config generation with all parameters set."""
    config = MockLLMProvider().generate_llm_config(temperature=0.5, max_tokens=100)

    assert config == {"temperature": 0.5, "max_tokens": 100}


def test_generate_llm_config_with_no_parameters() -> None:
    """Test config generation with all parameters as None."""
    assert MockLLMProvider().generate_llm_config(temperature=None, max_tokens=None) == {}


def test_gemini_missing_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing API key raises before any client is created."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(LLMError, match="GEMINI_API_KEY"):
        GeminiProvider()


def test_gemini_initialization_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test successful initialization with API key and model override."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-api-key-123")
    monkeypatch.setenv("LLM_MODEL", "gemini-2.0-flash-exp")
    _install_fake_client(monkeypatch, _FakeModels())

    provider = GeminiProvider()

    assert provider.api_key == "test-api-key-123"
    assert provider.model == "gemini-2.0-flash-exp"


def test_gemini_default_model(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    monkeypatch.delenv("LLM_MODEL", raising=False)
    _install_fake_client(monkeypatch, _FakeModels())

    assert GeminiProvider().model == "gemini-2.5-flash"


def test_gemini_config_maps_max_tokens(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    _install_fake_client(monkeypatch, _FakeModels())

    config = GeminiProvider().generate_llm_config(temperature=0.2, max_tokens=64)

    assert config == {
        "temperature": 0.2,
        "max_output_tokens": 64,
        "thinking_config": {"thinking_budget": 0},
    }


def test_gemini_send_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    models = _FakeModels()
    _install_fake_client(monkeypatch, models)

    result = GeminiProvider().send_prompt("Improve this", {"temperature": 0.7})

    assert result == "Suggested text"
    assert models.calls[0]["contents"] == "Improve this"


def test_gemini_send_prompt_wraps_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    _install_fake_client(monkeypatch, _FakeModels(error=RuntimeError("quota exceeded")))

    with pytest.raises(LLMError, match="quota exceeded"):
        GeminiProvider().send_prompt("Improve this", {})
