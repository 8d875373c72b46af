"""Resume document model: typed section content and the document aggregate."""

from resume_studio.models.content import (
    ITEM_LIST_TYPES,
    ContactInfo,
    CustomItem,
    Education,
    Project,
    SectionType,
    SkillsContent,
    WorkExperience,
)
from resume_studio.models.defaults import default_document
from resume_studio.models.document import (
    DEFAULT_SECTION_TITLES,
    SUMMARY_SECTION_ID,
    EducationSection,
    ExperienceSection,
    ItemListSection,
    ProjectsSection,
    ResumeDocument,
    Section,
    SkillsSection,
    SummarySection,
    decode_document,
    encode_document,
    section_class_for,
)

__all__ = [
    "DEFAULT_SECTION_TITLES",
    "ITEM_LIST_TYPES",
    "SUMMARY_SECTION_ID",
    "ContactInfo",
    "CustomItem",
    "Education",
    "EducationSection",
    "ExperienceSection",
    "ItemListSection",
    "Project",
    "ProjectsSection",
    "ResumeDocument",
    "Section",
    "SectionType",
    "SkillsContent",
    "SkillsSection",
    "SummarySection",
    "WorkExperience",
    "decode_document",
    "default_document",
    "encode_document",
    "section_class_for",
]
