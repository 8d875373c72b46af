"""Editing core and the services around it.

The document history and mutation functions form the editing core. Sessions
tie a history to a logged-in user; the remaining modules wrap external
collaborators (account store, PDF rendering, language model).
"""

from resume_studio.services.history import History, HistorySnapshot
from resume_studio.services.mutations import (
    ContentTypeError,
    Direction,
    add_section,
    change_contact_field,
    change_field,
    change_section_content,
    change_section_title,
    delete_section,
    move_section,
)

__all__ = [
    "ContentTypeError",
    "Direction",
    "History",
    "HistorySnapshot",
    "add_section",
    "change_contact_field",
    "change_field",
    "change_section_content",
    "change_section_title",
    "delete_section",
    "move_section",
]
