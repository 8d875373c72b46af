"""User directory routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from resume_studio.api.dependencies import require_admin
from resume_studio.api.schemas.auth import UserResponse
from resume_studio.services.session import EditorSession
from resume_studio.services.users import UserDirectoryError, list_users

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def get_users(
    _admin: Annotated[EditorSession, Depends(require_admin)],
) -> list[UserResponse]:
    """List every account with credentials stripped. Admins only.

    Raises:
        HTTPException: 500 if the account store cannot be read.
    """
    try:
        records = list_users()
    except UserDirectoryError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return [UserResponse.model_validate(record) for record in records]
