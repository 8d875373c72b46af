"""Pydantic schemas for login and user directory endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resume_studio.data.models import UserRole


class LoginRequest(BaseModel):
    """Request schema for logging in.

    Both fields default to empty so a missing value is reported by the route
    with a readable message rather than a schema error.
    """

    email: str = Field("", description="Account email address")
    password: str = Field("", description="Account password")


class UserResponse(BaseModel):
    """Response schema for a user record with credentials stripped."""

    model_config = ConfigDict(from_attributes=True)

    email: str
    role: UserRole


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    token: str = Field(description="Session token to send in the X-Session-Token header")
    user: UserResponse
