"""AI writing suggestions for resume fields.

This is a thin wrapper: the editor core never depends on it, and it
degrades to fixed messages when no provider is configured or the provider
call fails.
"""

from __future__ import annotations

import logging

from resume_studio.services.llm_providers import GeminiProvider, LLMError, LLMProvider

logger = logging.getLogger(__name__)

__all__ = ["FAILED_MESSAGE", "UNAVAILABLE_MESSAGE", "SuggestionService"]

UNAVAILABLE_MESSAGE = "AI service is unavailable. Please configure your API Key."
FAILED_MESSAGE = "Failed to get a suggestion. Please try again."


class SuggestionService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize the service.

        Args:
            provider: LLM provider instance. When omitted, a Gemini provider is
                created on first use if ``GEMINI_API_KEY`` is configured.
        """
        self._provider = provider

    def _get_provider(self) -> LLMProvider | None:
        if self._provider is None:
            try:
                self._provider = GeminiProvider()
            except LLMError:
                logger.warning("AI suggestions disabled: no API key configured")
                return None
        return self._provider

    def suggest(self, prompt: str, temperature: float | None = 0.7) -> str:
        """Return a trimmed suggestion for *prompt*, or a fixed fallback message."""
        provider = self._get_provider()
        if provider is None:
            return UNAVAILABLE_MESSAGE

        config = provider.generate_llm_config(temperature, None)
        try:
            return provider.send_prompt(prompt, config).strip()
        except LLMError:
            logger.exception("Error fetching AI suggestion")
            return FAILED_MESSAGE
