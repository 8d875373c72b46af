"""ORM models package for database tables.

- User: login account with an email, a role and a salted password hash

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_studio.data.db import Base
from resume_studio.data.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole"]
