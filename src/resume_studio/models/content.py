"""Typed content records for each resume section kind.

Every record is an immutable Pydantic model. Editing code never mutates a
record in place; it builds a new one with ``model_copy(update=...)`` so that
earlier document snapshots held by the history stay valid.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ITEM_LIST_TYPES",
    "ContactInfo",
    "CustomItem",
    "Education",
    "Project",
    "SectionType",
    "SkillsContent",
    "WorkExperience",
]


class _Record(BaseModel):
    """Base for frozen content records."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SectionType(StrEnum):
    """Tag identifying the content shape of a section."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    SKILLS = "skills"
    CUSTOM = "custom"
    CERTIFICATIONS = "certifications"
    AWARDS = "awards"
    VOLUNTEER = "volunteer"
    INTERESTS = "interests"


# Section kinds that all share the CustomItem list shape.
ITEM_LIST_TYPES: frozenset[SectionType] = frozenset(
    {
        SectionType.CUSTOM,
        SectionType.CERTIFICATIONS,
        SectionType.AWARDS,
        SectionType.VOLUNTEER,
        SectionType.INTERESTS,
    }
)

# Category name -> skill names, in insertion order.
SkillsContent = dict[str, list[str]]


class ContactInfo(_Record):
    """Contact block shown in the resume header.

    Formats are advisory only; nothing here validates an email or phone.
    """

    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""
    location: str = ""


class WorkExperience(_Record):
    """A single work-experience entry.

    ``responsibilities`` keeps one list element per line of the editing
    textarea, blank lines included. Blank lines are dropped at render time.
    """

    id: str
    company: str = ""
    role: str = ""
    duration: str = ""
    responsibilities: list[str] = Field(default_factory=list)


class Education(_Record):
    """A single education entry."""

    id: str
    institution: str = ""
    degree: str = ""
    duration: str = ""


class Project(_Record):
    """A single project entry."""

    id: str
    name: str = ""
    description: str = ""


class CustomItem(_Record):
    """Entry for certifications, awards, volunteer, interests and custom sections."""

    id: str
    title: str = ""
    subtitle: str = ""
    description: str = ""
