"""Pydantic schemas for resume editing endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from resume_studio.models.content import SectionType
from resume_studio.models.document import ResumeDocument
from resume_studio.services.mutations import Direction
from resume_studio.templates import ColorPalette


class ResumeStateResponse(BaseModel):
    """Current document plus undo/redo availability and style selection."""

    document: ResumeDocument
    can_undo: bool
    can_redo: bool
    template: str
    palette: ColorPalette
    changed: bool = Field(False, description="Whether the last request changed the document")


class DocumentFieldUpdateRequest(BaseModel):
    field: Literal["name", "title"]
    value: str


class ContactFieldUpdateRequest(BaseModel):
    field: Literal["phone", "email", "linkedin", "github", "location"]
    value: str


class AddSectionRequest(BaseModel):
    type: SectionType = Field(description="Kind of section to append")


class MoveSectionRequest(BaseModel):
    index: int = Field(description="Current position of the section")
    direction: Direction


class SectionTitleUpdateRequest(BaseModel):
    title: str = Field(min_length=1, description="New section title")


class SectionContentUpdateRequest(BaseModel):
    content: Any = Field(description="Replacement content matching the section type")


class SkillRequest(BaseModel):
    category: str
    name: str


class ItemUpdateRequest(BaseModel):
    changes: dict[str, Any] = Field(
        description=(
            "Fields to change on the entry. Experience entries also accept "
            "'responsibilities_text', one responsibility per line."
        )
    )


class StyleUpdateRequest(BaseModel):
    template: str | None = Field(None, description="Template name")
    palette: ColorPalette | None = Field(None, description="Color palette name")


class TemplateOption(BaseModel):
    key: str = Field(description="Value accepted by the style and preview routes")
    name: str = Field(description="Human-readable template name")


class StyleOptionsResponse(BaseModel):
    templates: list[TemplateOption]
    palettes: list[ColorPalette]


class ExportNoticeResponse(BaseModel):
    severity: str
    message: str


class ExportFailureResponse(BaseModel):
    detail: str
    notices: list[ExportNoticeResponse]


class SuggestionRequest(BaseModel):
    prompt: str = Field(min_length=1)


class SuggestionResponse(BaseModel):
    text: str
