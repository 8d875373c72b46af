"""Utility functions and helpers"""

from resume_studio.utils.equality import structurally_equal

__all__ = [
    "structurally_equal",
]
