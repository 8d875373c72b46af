"""Route handlers for the API."""

from resume_studio.api.routes import auth, export, health, resume, suggestions, users

__all__ = [
    "auth",
    "export",
    "health",
    "resume",
    "suggestions",
    "users",
]
