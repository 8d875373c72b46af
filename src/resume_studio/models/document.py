"""Resume document aggregate and its tagged section union.

A ``Section`` is one of six concrete models discriminated on ``type``. The
content shape of each variant is fixed by its annotation, so a skills map can
never sit inside an experience section.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from resume_studio.models.content import (
    ContactInfo,
    CustomItem,
    Education,
    Project,
    SectionType,
    WorkExperience,
)

__all__ = [
    "DEFAULT_SECTION_TITLES",
    "SUMMARY_SECTION_ID",
    "EducationSection",
    "ExperienceSection",
    "ItemListSection",
    "ProjectsSection",
    "ResumeDocument",
    "Section",
    "SkillsSection",
    "SummarySection",
    "decode_document",
    "encode_document",
    "section_class_for",
]

SUMMARY_SECTION_ID = "summary"

DEFAULT_SECTION_TITLES: dict[SectionType, str] = {
    SectionType.SUMMARY: "Professional Summary",
    SectionType.EXPERIENCE: "Work Experience",
    SectionType.EDUCATION: "Education",
    SectionType.PROJECTS: "Projects",
    SectionType.SKILLS: "Skills",
    SectionType.CUSTOM: "Custom Section",
    SectionType.CERTIFICATIONS: "Certifications",
    SectionType.AWARDS: "Awards",
    SectionType.VOLUNTEER: "Volunteer Experience",
    SectionType.INTERESTS: "Interests",
}


class _SectionBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    title: str
    is_deletable: bool = True


class SummarySection(_SectionBase):
    type: Literal["summary"] = "summary"
    content: str = ""


class ExperienceSection(_SectionBase):
    type: Literal["experience"] = "experience"
    content: list[WorkExperience] = Field(default_factory=list)


class EducationSection(_SectionBase):
    type: Literal["education"] = "education"
    content: list[Education] = Field(default_factory=list)


class ProjectsSection(_SectionBase):
    type: Literal["projects"] = "projects"
    content: list[Project] = Field(default_factory=list)


class SkillsSection(_SectionBase):
    type: Literal["skills"] = "skills"
    content: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("content")
    @classmethod
    def _check_categories(cls, content: dict[str, list[str]]) -> dict[str, list[str]]:
        for category, skills in content.items():
            if not skills:
                raise ValueError(f"Skill category {category!r} is empty")
            seen: set[str] = set()
            for skill in skills:
                if skill.lower() in seen:
                    raise ValueError(f"Duplicate skill {skill!r} in category {category!r}")
                seen.add(skill.lower())
        return content


class ItemListSection(_SectionBase):
    """Any of the list-of-CustomItem section kinds."""

    type: Literal["custom", "certifications", "awards", "volunteer", "interests"]
    content: list[CustomItem] = Field(default_factory=list)


Section = Annotated[
    SummarySection
    | ExperienceSection
    | EducationSection
    | ProjectsSection
    | SkillsSection
    | ItemListSection,
    Field(discriminator="type"),
]

_SECTION_CLASSES: dict[SectionType, type[_SectionBase]] = {
    SectionType.SUMMARY: SummarySection,
    SectionType.EXPERIENCE: ExperienceSection,
    SectionType.EDUCATION: EducationSection,
    SectionType.PROJECTS: ProjectsSection,
    SectionType.SKILLS: SkillsSection,
    SectionType.CUSTOM: ItemListSection,
    SectionType.CERTIFICATIONS: ItemListSection,
    SectionType.AWARDS: ItemListSection,
    SectionType.VOLUNTEER: ItemListSection,
    SectionType.INTERESTS: ItemListSection,
}


def section_class_for(section_type: SectionType | str) -> type[_SectionBase]:
    """Return the concrete section model for *section_type*.

    Raises:
        ValueError: If *section_type* is not a known section kind.
    """
    return _SECTION_CLASSES[SectionType(section_type)]


class ResumeDocument(BaseModel):
    """One immutable snapshot of the whole resume."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    title: str = ""
    contact: ContactInfo = Field(default_factory=ContactInfo)
    sections: list[Section] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_sections(self) -> ResumeDocument:
        seen: set[str] = set()
        summaries = 0
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id {section.id!r}")
            seen.add(section.id)
            if section.type == SectionType.SUMMARY:
                summaries += 1
                if section.id != SUMMARY_SECTION_ID:
                    raise ValueError(f"Summary section must use id {SUMMARY_SECTION_ID!r}")
                if section.is_deletable:
                    raise ValueError("Summary section cannot be deletable")
            elif section.id == SUMMARY_SECTION_ID:
                raise ValueError(f"Section id {SUMMARY_SECTION_ID!r} is reserved")
        if summaries > 1:
            raise ValueError("A resume can contain at most one summary section")
        return self

    def find_section(self, section_id: str) -> Section | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def index_of(self, section_id: str) -> int:
        """Return the position of *section_id*, or -1 when absent."""
        for index, section in enumerate(self.sections):
            if section.id == section_id:
                return index
        return -1

    def has_section_type(self, section_type: SectionType | str) -> bool:
        return any(section.type == section_type for section in self.sections)


_DOCUMENT_ADAPTER = TypeAdapter(ResumeDocument)


def encode_document(document: ResumeDocument) -> str:
    """Return the canonical JSON encoding of *document*.

    Field order follows the model definition and mapping keys keep their
    insertion order, so equal documents always encode to the same string.
    """
    return document.model_dump_json()


def decode_document(payload: str | bytes) -> ResumeDocument:
    return _DOCUMENT_ADAPTER.validate_json(payload)
