"""Template registry and rendering entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.templates.base import (
    PAGE_HEIGHT_PX,
    PAGE_WIDTH_PX,
    RenderedLayout,
    ResumeTemplate,
    preview_scale,
)
from resume_studio.templates.classic import ClassicResumeTemplate
from resume_studio.templates.corporate import CorporateResumeTemplate
from resume_studio.templates.creative import CreativeResumeTemplate
from resume_studio.templates.executive import ExecutiveResumeTemplate
from resume_studio.templates.palettes import ColorPalette, PaletteColors, get_palette
from resume_studio.templates.technical import TechnicalResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument

__all__ = [
    "PAGE_HEIGHT_PX",
    "PAGE_WIDTH_PX",
    "ColorPalette",
    "PaletteColors",
    "RenderedLayout",
    "ResumeTemplate",
    "get_palette",
    "get_template",
    "list_templates",
    "preview_scale",
    "render",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    "classic": ClassicResumeTemplate(),
    "corporate": CorporateResumeTemplate(),
    "creative": CreativeResumeTemplate(),
    "executive": ExecutiveResumeTemplate(),
    "technical": TechnicalResumeTemplate(),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)


def render(
    document: ResumeDocument, template: str = "classic", palette: ColorPalette | str = "blue"
) -> RenderedLayout:
    """Project *document* into the layout of *template* colored by *palette*."""
    return get_template(template).build(document, palette)
