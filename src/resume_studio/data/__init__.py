"""Database layer for user accounts."""
