"""User directory listing for the admin view."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from resume_studio.data.db import get_session
from resume_studio.data.models import User, UserRole

logger = logging.getLogger(__name__)

__all__ = ["UserDirectoryError", "UserRecord", "list_users"]


class UserDirectoryError(RuntimeError):
    """Raised when the account store cannot be read."""


@dataclass(frozen=True, slots=True)
class UserRecord:
    """Directory entry with credentials stripped."""

    email: str
    role: UserRole


def list_users() -> list[UserRecord]:
    """Return every account in creation order.

    Raises:
        UserDirectoryError: If the database query fails.
    """
    try:
        with get_session() as session:
            rows = session.query(User.email, User.role).order_by(User.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list users")
        raise UserDirectoryError("Failed to load users") from exc
    return [UserRecord(email=email, role=UserRole(role)) for email, role in rows]
