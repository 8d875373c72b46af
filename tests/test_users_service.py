"""Tests for the user directory listing."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from resume_studio.data.models import UserRole
from resume_studio.services.auth import create_user
from resume_studio.services.users import UserDirectoryError, UserRecord, list_users

pytestmark = pytest.mark.usefixtures("api_db")


class TestListUsers:
    def test_empty(self) -> None:
        assert list_users() == []

    def test_creation_order_without_credentials(self) -> None:
        create_user("b@example.com", "pw", "admin")
        create_user("a@example.com", "pw")

        users = list_users()

        assert users == [
            UserRecord(email="b@example.com", role=UserRole.ADMIN),
            UserRecord(email="a@example.com", role=UserRole.USER),
        ]
        assert not hasattr(users[0], "password_hash")

    def test_storage_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _broken_session():
            raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        monkeypatch.setattr("resume_studio.services.users.get_session", _broken_session)

        with pytest.raises(UserDirectoryError, match="Failed to load users"):
            list_users()
