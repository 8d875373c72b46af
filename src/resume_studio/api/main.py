"""FastAPI application entry point for the Resume Studio API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_studio.api.routes import auth, export, health, resume, suggestions, users
from resume_studio.services.session import SessionStore
from resume_studio.services.suggestions import SuggestionService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from resume_studio.config import get_users_file
    from resume_studio.data.db import dispose_engine, init_db
    from resume_studio.services.auth import seed_users_from_file

    init_db()
    users_file = get_users_file()
    if users_file is not None:
        if users_file.exists():
            seed_users_from_file(users_file)
        else:
            logger.warning("USERS_FILE %s does not exist; no accounts seeded", users_file)
    yield
    app.state.sessions.clear()
    dispose_engine()


app = FastAPI(
    title="Resume Studio API",
    description="API for editing resumes, previewing templates and exporting PDFs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[export.NOTICES_HEADER, "Content-Disposition"],
)

app.state.sessions = SessionStore()
app.state.suggestions = SuggestionService()

app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(resume.router, prefix="/api")
app.include_router(export.router, prefix="/api")
app.include_router(suggestions.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "resume_studio.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
