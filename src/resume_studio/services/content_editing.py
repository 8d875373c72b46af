"""Helpers that build new section content values from user edits.

These work on the content of a single section (a skills map, a list of
entries, a responsibilities block) and return new values. The result is then
handed to :func:`resume_studio.services.mutations.change_section_content`.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from resume_studio.models.content import (
    ITEM_LIST_TYPES,
    CustomItem,
    Education,
    Project,
    SectionType,
    SkillsContent,
    WorkExperience,
)
from resume_studio.models.document import ResumeDocument, SkillsSection
from resume_studio.services.mutations import ContentTypeError, change_section_content

__all__ = [
    "add_item",
    "add_skill",
    "edit_items_section",
    "edit_skills_section",
    "new_item",
    "remove_item",
    "remove_skill",
    "responsibilities_from_text",
    "responsibilities_to_text",
    "update_item",
]

Item = TypeVar("Item", WorkExperience, Education, Project, CustomItem)

_ITEM_CLASSES: dict[SectionType, type] = {
    SectionType.EXPERIENCE: WorkExperience,
    SectionType.EDUCATION: Education,
    SectionType.PROJECTS: Project,
}


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------


def add_skill(skills: SkillsContent, category: str, name: str) -> SkillsContent:
    """Return *skills* with *name* appended to *category*.

    Both values are trimmed. Blank input, or a name already present in the
    category (ignoring case), leaves the map unchanged. A new category is
    added after the existing ones.
    """
    category = category.strip()
    name = name.strip()
    if not category or not name:
        return skills

    existing = skills.get(category, [])
    if any(skill.lower() == name.lower() for skill in existing):
        return skills

    updated = {key: list(values) for key, values in skills.items()}
    updated[category] = [*existing, name]
    return updated


def remove_skill(skills: SkillsContent, category: str, name: str) -> SkillsContent:
    """Return *skills* without *name* in *category*.

    Removing the last skill of a category drops the category itself.
    """
    existing = skills.get(category)
    if existing is None or name not in existing:
        return skills

    remaining = [skill for skill in existing if skill != name]
    updated: SkillsContent = {}
    for key, values in skills.items():
        if key != category:
            updated[key] = list(values)
        elif remaining:
            updated[key] = remaining
    return updated


# ---------------------------------------------------------------------------
# Work experience responsibilities
# ---------------------------------------------------------------------------


def responsibilities_from_text(text: str) -> list[str]:
    """Split a textarea value into responsibility lines (blank lines kept)."""
    return text.split("\n")


def responsibilities_to_text(lines: list[str]) -> str:
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entry lists
# ---------------------------------------------------------------------------


def new_item(section_type: SectionType | str) -> WorkExperience | Education | Project | CustomItem:
    """Return an empty entry for a list section, with a fresh id.

    Raises:
        ValueError: If *section_type* does not hold a list of entries.
    """
    kind = SectionType(section_type)
    if kind in ITEM_LIST_TYPES:
        return CustomItem(id=str(uuid.uuid4()))
    try:
        return _ITEM_CLASSES[kind](id=str(uuid.uuid4()))
    except KeyError:
        raise ValueError(f"Section type {kind.value!r} has no list entries") from None


def add_item(items: list[Item], item: Item) -> list[Item]:
    return [*items, item]


def update_item(items: list[Item], item_id: str, **changes: Any) -> list[Item]:
    """Return *items* with the entry *item_id* updated; unknown ids are ignored.

    Raises:
        ValueError: If *changes* names a field the entry does not have.
    """
    updated: list[Item] = []
    for item in items:
        if item.id == item_id:
            unknown = set(changes) - set(type(item).model_fields)
            if unknown:
                raise ValueError(f"Unknown field(s) for {type(item).__name__}: {sorted(unknown)}")
            item = type(item).model_validate({**item.model_dump(), **changes})
        updated.append(item)
    return updated


def remove_item(items: list[Item], item_id: str) -> list[Item]:
    return [item for item in items if item.id != item_id]


# ---------------------------------------------------------------------------
# Document-level wrappers
# ---------------------------------------------------------------------------


def edit_skills_section(
    document: ResumeDocument,
    section_id: str,
    edit: Callable[[SkillsContent], SkillsContent],
) -> ResumeDocument:
    """Apply *edit* to the skills map of section *section_id*.

    Raises:
        ContentTypeError: If the section is not a skills section.
    """
    section = document.find_section(section_id)
    if section is None:
        return document
    if not isinstance(section, SkillsSection):
        raise ContentTypeError(f"Section {section_id!r} is not a skills section")
    return change_section_content(document, section_id, edit(section.content))


def edit_items_section(
    document: ResumeDocument,
    section_id: str,
    edit: Callable[[list[Any]], list[Any]],
) -> ResumeDocument:
    """Apply *edit* to the entry list of section *section_id*.

    Raises:
        ContentTypeError: If the section does not hold a list of entries.
    """
    section = document.find_section(section_id)
    if section is None:
        return document
    if not isinstance(section.content, list):
        raise ContentTypeError(f"Section {section_id!r} does not hold a list of entries")
    return change_section_content(document, section_id, edit(section.content))
