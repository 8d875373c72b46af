"""Technical resume template.

Monospaced throughout, ``Name // Title`` header on a tinted band and
``<Section>`` style headings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.templates.base import RenderedLayout, ResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument
    from resume_studio.templates.palettes import ColorPalette

__all__ = ["TechnicalResumeTemplate"]


class TechnicalResumeTemplate(ResumeTemplate):
    key = "technical"
    separator = "//"

    @property
    def name(self) -> str:
        return "Technical"

    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        return self._render(
            "technical.html.j2",
            document,
            palette,
            sections=self.section_views(document.sections),
        )
