"""Creative resume template.

A colored sidebar carries the name, a contact block and the skills and
education sections in light-on-color styling. Every other section goes to
the main column. Both groups keep document order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.content import SectionType
from resume_studio.templates.base import RenderedLayout, ResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument, Section
    from resume_studio.templates.palettes import ColorPalette

__all__ = ["SIDEBAR_SECTION_TYPES", "CreativeResumeTemplate"]

SIDEBAR_SECTION_TYPES = frozenset({SectionType.SKILLS, SectionType.EDUCATION})


class CreativeResumeTemplate(ResumeTemplate):
    key = "creative"

    @property
    def name(self) -> str:
        return "Creative"

    @staticmethod
    def split_sections(sections: list[Section]) -> tuple[list[Section], list[Section]]:
        """Return ``(sidebar, main)`` section groups."""
        sidebar = [s for s in sections if s.type in SIDEBAR_SECTION_TYPES]
        main = [s for s in sections if s.type not in SIDEBAR_SECTION_TYPES]
        return sidebar, main

    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        sidebar, main = self.split_sections(document.sections)
        return self._render(
            "creative.html.j2",
            document,
            palette,
            sidebar_sections=self.section_views(sidebar),
            main_sections=self.section_views(main),
        )
