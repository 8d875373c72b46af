"""Pure document mutation operations.

Each function takes a ``ResumeDocument`` and returns a new one. The input is
never modified; sections that are not touched are shared between the old and
new snapshot, which is safe because every model is frozen. Looking up an id
that does not exist returns the input unchanged rather than raising.

These functions are meant to be submitted through ``History.set`` as
transforms, for example ``history.set(lambda doc: delete_section(doc, "skills"))``.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from resume_studio.models.content import ContactInfo, SectionType
from resume_studio.models.document import (
    DEFAULT_SECTION_TITLES,
    SUMMARY_SECTION_ID,
    ResumeDocument,
    Section,
    section_class_for,
)

__all__ = [
    "DOCUMENT_FIELDS",
    "ContentTypeError",
    "Direction",
    "add_section",
    "change_contact_field",
    "change_field",
    "change_section_content",
    "change_section_title",
    "delete_section",
    "move_section",
    "new_section_id",
]

# Top-level document fields editable through change_field.
DOCUMENT_FIELDS = ("name", "title")


class ContentTypeError(ValueError):
    """Raised when section content does not match the section's type tag."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"


def new_section_id(section_type: SectionType | str) -> str:
    """Return a fresh section id such as ``skills-3f9a1c2e``."""
    return f"{SectionType(section_type).value}-{uuid.uuid4().hex[:8]}"


def _with_sections(document: ResumeDocument, sections: list[Section]) -> ResumeDocument:
    return document.model_copy(update={"sections": sections})


def move_section(
    document: ResumeDocument, index: int, direction: Direction | str
) -> ResumeDocument:
    """Swap the section at *index* with its neighbour above or below.

    Moving the first section up, the last section down, or passing an index
    outside the list is a no-op.
    """
    offset = -1 if Direction(direction) is Direction.UP else 1
    target = index + offset
    count = len(document.sections)
    if not (0 <= index < count and 0 <= target < count):
        return document

    sections = list(document.sections)
    sections[index], sections[target] = sections[target], sections[index]
    return _with_sections(document, sections)


def delete_section(document: ResumeDocument, section_id: str) -> ResumeDocument:
    """Remove the section with *section_id*.

    ``is_deletable`` is not checked here; hiding the delete control for
    protected sections is up to the caller.
    """
    if document.index_of(section_id) < 0:
        return document
    return _with_sections(document, [s for s in document.sections if s.id != section_id])


def add_section(
    document: ResumeDocument,
    section_type: SectionType | str,
    id_factory: Callable[[SectionType], str] | None = None,
) -> ResumeDocument:
    """Append an empty section of *section_type* with its default title.

    A summary section always uses the reserved ``"summary"`` id and is not
    deletable; adding one when the document already has a summary is a no-op.
    """
    kind = SectionType(section_type)
    if kind is SectionType.SUMMARY:
        if document.has_section_type(SectionType.SUMMARY):
            return document
        section_id = SUMMARY_SECTION_ID
    else:
        make_id = id_factory or new_section_id
        section_id = make_id(kind)
        while document.find_section(section_id) is not None or section_id == SUMMARY_SECTION_ID:
            section_id = new_section_id(kind)

    section = section_class_for(kind)(
        id=section_id,
        type=kind.value,
        title=DEFAULT_SECTION_TITLES[kind],
        is_deletable=kind is not SectionType.SUMMARY,
    )
    return _with_sections(document, [*document.sections, section])


def change_section_content(
    document: ResumeDocument, section_id: str, content: Any
) -> ResumeDocument:
    """Replace the content of the section with *section_id*.

    *content* is validated against the section's type tag: a summary takes a
    string, a skills section a category mapping, and the list sections their
    own entry records (or equivalent dicts).

    Raises:
        ContentTypeError: If *content* does not fit the section's type.
    """
    index = document.index_of(section_id)
    if index < 0:
        return document

    section = document.sections[index]
    data = section.model_dump()
    data["content"] = content
    try:
        updated = type(section).model_validate(data)
    except ValidationError as exc:
        msg = f"Content does not match section type {section.type!r}: {exc.error_count()} error(s)"
        raise ContentTypeError(msg) from exc

    sections = list(document.sections)
    sections[index] = updated
    return _with_sections(document, sections)


def change_section_title(document: ResumeDocument, section_id: str, title: str) -> ResumeDocument:
    index = document.index_of(section_id)
    if index < 0:
        return document
    sections = list(document.sections)
    sections[index] = sections[index].model_copy(update={"title": title})
    return _with_sections(document, sections)


def change_contact_field(document: ResumeDocument, field: str, value: str) -> ResumeDocument:
    """Replace one field of the contact block.

    Raises:
        ValueError: If *field* is not a contact field.
    """
    if field not in ContactInfo.model_fields:
        raise ValueError(f"Unknown contact field {field!r}")
    contact = document.contact.model_copy(update={field: value})
    return document.model_copy(update={"contact": contact})


def change_field(document: ResumeDocument, field: str, value: str) -> ResumeDocument:
    """Replace the top-level ``name`` or ``title`` of the document.

    Raises:
        ValueError: If *field* is not an editable top-level field.
    """
    if field not in DOCUMENT_FIELDS:
        raise ValueError(f"Unknown document field {field!r}")
    return document.model_copy(update={field: value})
