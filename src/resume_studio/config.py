"""Runtime configuration read from environment variables.

Values are looked up on every call so tests can adjust them with
``monkeypatch.setenv``. A ``.env`` file in the working directory is loaded
once at import time.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

__all__ = [
    "get_database_url",
    "get_history_limit",
    "get_llm_model",
    "get_render_service_timeout",
    "get_render_service_url",
    "get_session_idle_timeout",
    "get_users_file",
]

DEFAULT_RENDER_TIMEOUT_SECONDS = 30.0
DEFAULT_LLM_MODEL = "gemini-2.5-flash"
DEFAULT_SESSION_IDLE_SECONDS = 3600.0


def get_database_url() -> str | None:
    """Return ``DB_URL`` if set; the data layer supplies the default."""
    return os.getenv("DB_URL") or None


def get_users_file() -> Path | None:
    """Return the JSON file used to seed user accounts, if configured."""
    value = os.getenv("USERS_FILE")
    return Path(value) if value else None


def get_render_service_url() -> str | None:
    return os.getenv("PDF_RENDER_SERVICE_URL") or None


def get_render_service_timeout() -> float:
    value = os.getenv("PDF_RENDER_TIMEOUT")
    if not value:
        return DEFAULT_RENDER_TIMEOUT_SECONDS
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"PDF_RENDER_TIMEOUT must be a number, got {value!r}") from None


def get_llm_model() -> str:
    return os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL)


def get_history_limit() -> int | None:
    """Return the maximum undo depth, or None for unbounded history."""
    value = os.getenv("HISTORY_LIMIT")
    if not value:
        return None
    try:
        limit = int(value)
    except ValueError:
        raise ValueError(f"HISTORY_LIMIT must be an integer, got {value!r}") from None
    return limit if limit > 0 else None


def get_session_idle_timeout() -> float | None:
    """Return seconds of inactivity before an editing session expires.

    ``SESSION_IDLE_TIMEOUT`` defaults to one hour; zero or a negative value
    keeps sessions until logout.
    """
    value = os.getenv("SESSION_IDLE_TIMEOUT")
    if not value:
        return DEFAULT_SESSION_IDLE_SECONDS
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"SESSION_IDLE_TIMEOUT must be a number, got {value!r}") from None
    return timeout if timeout > 0 else None
