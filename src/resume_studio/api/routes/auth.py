"""Login and logout routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status

from resume_studio.api.dependencies import get_session_store
from resume_studio.api.schemas.auth import LoginRequest, LoginResponse, UserResponse
from resume_studio.services.auth import authenticate
from resume_studio.services.session import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

StoreDep = Annotated[SessionStore, Depends(get_session_store)]


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, store: StoreDep) -> LoginResponse:
    """Check credentials and open an editing session.

    Args:
        data: Email and password.
        store: Session store of the running app.

    Returns:
        LoginResponse: Session token and the user's email and role.

    Raises:
        HTTPException: 400 if a field is missing, 401 if the credentials are rejected.
    """
    if not data.email.strip() or not data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )

    user = authenticate(data.email, data.password)
    if user is None:
        logger.info("Rejected login for %s", data.email.strip())
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    session = store.create(user)
    return LoginResponse(
        token=session.token,
        user=UserResponse(email=user.email, role=user.role),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    store: StoreDep,
    x_session_token: Annotated[
        str | None,
        Header(description="Session token returned by POST /api/login."),
    ] = None,
) -> Response:
    """End the caller's session and discard its history. Unknown tokens are ignored."""
    if x_session_token:
        store.end(x_session_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
