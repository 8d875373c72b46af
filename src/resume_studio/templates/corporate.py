"""Corporate resume template.

Serif type, a heavy rule under the header and the contact line set apart
below it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.templates.base import RenderedLayout, ResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument
    from resume_studio.templates.palettes import ColorPalette

__all__ = ["CorporateResumeTemplate"]


class CorporateResumeTemplate(ResumeTemplate):
    key = "corporate"
    separator = "|"

    @property
    def name(self) -> str:
        return "Corporate"

    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        return self._render(
            "corporate.html.j2",
            document,
            palette,
            sections=self.section_views(document.sections),
        )
