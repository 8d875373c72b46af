"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from resume_studio.services.session import EditorSession, SessionStore


def get_session_store(request: Request) -> SessionStore:
    """Return the session store owned by the running application."""
    return request.app.state.sessions


def get_editor_session(
    store: Annotated[SessionStore, Depends(get_session_store)],
    x_session_token: Annotated[
        str | None,
        Header(description="Session token returned by POST /api/login."),
    ] = None,
) -> EditorSession:
    """Resolve the caller's editing session.

    Raises:
        HTTPException: If the token is missing or unknown (401).
    """
    if not x_session_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Session-Token header.",
        )
    session = store.get(x_session_token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or invalid. Please log in again.",
        )
    return session


def require_admin(
    session: Annotated[EditorSession, Depends(get_editor_session)],
) -> EditorSession:
    """Allow only admin users through.

    Raises:
        HTTPException: If the session user is not an admin (403).
    """
    if not session.user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return session
