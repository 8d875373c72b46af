"""Executive resume template.

Two columns: section titles on the left, section bodies on the right behind
a vertical rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.templates.base import RenderedLayout, ResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument
    from resume_studio.templates.palettes import ColorPalette

__all__ = ["ExecutiveResumeTemplate"]


class ExecutiveResumeTemplate(ResumeTemplate):
    key = "executive"
    separator = "•"

    @property
    def name(self) -> str:
        return "Executive"

    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        return self._render(
            "executive.html.j2",
            document,
            palette,
            sections=self.section_views(document.sections),
        )
