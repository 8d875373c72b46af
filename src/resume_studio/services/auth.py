"""Credential check service.

This module provides a minimal email/password authentication layer backed
by the users table. Passwords are stored as salted PBKDF2 hashes. Callers
only see an :class:`AuthenticatedUser` (email and role) or ``None``; a
rejected login never raises past this boundary.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from resume_studio.data.db import get_session
from resume_studio.data.models import User, UserRole

logger = logging.getLogger(__name__)

__all__ = [
    "AuthenticatedUser",
    "authenticate",
    "create_user",
    "seed_users_from_file",
]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """Identity handed to the editor once a login succeeds."""

    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


def _hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def create_user(
    email: str, password: str, role: UserRole | str = UserRole.USER
) -> tuple[bool, str | None]:
    """Create a new user account.

    Returns:
        Tuple of (success flag, error message). On success, error is None.
    """
    email_clean = email.strip()
    if not email_clean:
        return False, "Email cannot be empty."
    if not password:
        return False, "Password cannot be empty."
    try:
        role_value = UserRole(role)
    except ValueError:
        return False, f"Unknown role: {role}."

    try:
        with get_session() as session:
            existing = session.query(User).filter(User.email == email_clean).first()
            if existing is not None:
                return False, "A user with this email already exists."

            user = User(
                email=email_clean,
                role=role_value.value,
                password_hash=_hash_password(password),
            )
            session.add(user)
        return True, None
    except Exception as exc:
        logger.exception("Failed to create user %s", email_clean)
        return False, f"Failed to create user: {exc}"


def authenticate(email: str, password: str) -> AuthenticatedUser | None:
    """Check *email* and *password* against the stored accounts.

    Returns:
        The authenticated user, or None when the credentials are rejected or
        the account store cannot be read.
    """
    email_clean = email.strip()
    if not email_clean or not password:
        return None

    try:
        with get_session() as session:
            user = session.query(User).filter(User.email == email_clean).first()
            if user is None or not _verify_password(password, user.password_hash):
                return None
            return AuthenticatedUser(email=user.email, role=UserRole(user.role))
    except Exception:
        logger.exception("Credential check failed for %s", email_clean)
        return None


def seed_users_from_file(path: Path) -> int:
    """Create accounts listed in a JSON file of ``{email, password, role}`` objects.

    Existing emails are skipped.

    Returns:
        Number of accounts created.
    """
    entries = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a JSON list of user objects")

    created = 0
    for entry in entries:
        ok, error = create_user(
            entry.get("email", ""),
            entry.get("password", ""),
            entry.get("role", UserRole.USER.value),
        )
        if ok:
            created += 1
        else:
            logger.info("Skipped seeding %s: %s", entry.get("email", "<missing>"), error)
    logger.info("Seeded %d user(s) from %s", created, path)
    return created
