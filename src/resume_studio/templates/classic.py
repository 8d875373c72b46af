"""Classic resume template.

Centred header, single column, uppercase section headings underlined in the
palette's border color.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.templates.base import RenderedLayout, ResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument
    from resume_studio.templates.palettes import ColorPalette

__all__ = ["ClassicResumeTemplate"]


class ClassicResumeTemplate(ResumeTemplate):
    """Single-column layout with ruled section headings."""

    key = "classic"
    separator = "|"

    @property
    def name(self) -> str:
        return "Classic"

    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        return self._render(
            "classic.html.j2",
            document,
            palette,
            sections=self.section_views(document.sections),
        )
