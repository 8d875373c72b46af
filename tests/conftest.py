from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import resume_studio.data.db as app_db
from resume_studio.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for API and account tests."""
    db_path = tmp_path / "users.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    app_db.dispose_engine()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep local .env values from leaking into tests."""
    for name in (
        "PDF_RENDER_SERVICE_URL",
        "GEMINI_API_KEY",
        "HISTORY_LIMIT",
        "USERS_FILE",
        "SESSION_IDLE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _api_db_for_api_tests(request: pytest.FixtureRequest) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
