"""Abstract base class for pluggable resume templates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume_studio.models.document import (
    EducationSection,
    ExperienceSection,
    ItemListSection,
    ProjectsSection,
    SkillsSection,
    SummarySection,
)
from resume_studio.templates.palettes import ColorPalette, PaletteColors, get_palette

if TYPE_CHECKING:
    from resume_studio.models.content import ContactInfo
    from resume_studio.models.document import ResumeDocument, Section

__all__ = [
    "PAGE_HEIGHT_PX",
    "PAGE_WIDTH_PX",
    "ContactItem",
    "RenderedLayout",
    "ResumeTemplate",
    "SectionView",
    "preview_scale",
]

# Nominal A4 page at 96 dpi.
PAGE_WIDTH_PX = 794
PAGE_HEIGHT_PX = 1123

HTML_DIR = Path(__file__).resolve().parent / "html"


@cache
def _env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(HTML_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["visible_lines"] = ResumeTemplate.visible_responsibilities
    return env


@cache
def _stylesheet() -> str:
    return (HTML_DIR / "resume.css").read_text(encoding="utf-8")


def preview_scale(container_width: float) -> float:
    """Return the display scale for a page shown in *container_width* pixels.

    The scale only affects on-screen display; the rendered markup is always
    produced at the nominal page size.
    """
    if container_width <= 0:
        return 0.0
    return min(1.0, container_width / PAGE_WIDTH_PX)


@dataclass(frozen=True, slots=True)
class ContactItem:
    """One entry of a contact line; ``href`` is empty for plain text."""

    kind: str
    value: str
    href: str = ""
    external: bool = False


@dataclass(frozen=True, slots=True)
class SectionView:
    """A section paired with the name of the markup block that renders it."""

    kind: str
    section: Section


@dataclass(frozen=True, slots=True)
class RenderedLayout:
    """Output of a template: page markup plus the stylesheet it relies on."""

    template: str
    palette: ColorPalette
    body_html: str
    stylesheet: str
    page_width_px: int = PAGE_WIDTH_PX
    page_height_px: int = PAGE_HEIGHT_PX

    def dumps(self, title: str = "Resume") -> str:
        """Return a self-contained HTML document with the stylesheet inlined."""
        return _env().get_template("page.html.j2").render(layout=self, title=title)


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    #: Registry key, e.g. ``"classic"``.
    key: str = ""
    #: Glyph placed between contact items.
    separator: str = "|"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @abstractmethod
    def build(self, document: ResumeDocument, palette: ColorPalette | str) -> RenderedLayout:
        """Render *document* with the colors of *palette*."""

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    def _render(
        self,
        template_file: str,
        document: ResumeDocument,
        palette: ColorPalette | str,
        **extra: Any,
    ) -> RenderedLayout:
        colors: PaletteColors = get_palette(palette)
        body = (
            _env()
            .get_template(template_file)
            .render(
                doc=document,
                colors=colors,
                template_key=self.key,
                separator=self.separator,
                contact_items=self.contact_items(document.contact),
                page_width=PAGE_WIDTH_PX,
                page_height=PAGE_HEIGHT_PX,
                **extra,
            )
        )
        return RenderedLayout(
            template=self.key,
            palette=ColorPalette(palette),
            body_html=body,
            stylesheet=_stylesheet(),
        )

    @staticmethod
    def format_url(url: str) -> str:
        """Prefix ``https://`` unless *url* already carries an http(s) scheme."""
        if not url:
            return ""
        if url.startswith(("http://", "https://")):
            return url
        return f"https://{url}"

    @classmethod
    def contact_items(cls, contact: ContactInfo) -> list[ContactItem]:
        """Return the non-empty contact fields in display order."""
        items: list[ContactItem] = []
        if contact.email:
            items.append(ContactItem("email", contact.email, f"mailto:{contact.email}"))
        if contact.phone:
            items.append(ContactItem("phone", contact.phone))
        if contact.location:
            items.append(ContactItem("location", contact.location))
        if contact.linkedin:
            items.append(
                ContactItem("linkedin", contact.linkedin, cls.format_url(contact.linkedin), True)
            )
        if contact.github:
            items.append(
                ContactItem("github", contact.github, cls.format_url(contact.github), True)
            )
        return items

    @staticmethod
    def visible_responsibilities(lines: list[str]) -> list[str]:
        """Drop blank lines so they never render as empty bullets."""
        return [line for line in lines if line.strip()]

    @staticmethod
    def section_view(section: Section) -> SectionView:
        """Pair *section* with the markup block for its content shape.

        Raises:
            TypeError: For an object that is not one of the section models.
        """
        match section:
            case SummarySection():
                kind = "summary"
            case ExperienceSection():
                kind = "experience"
            case EducationSection():
                kind = "education"
            case ProjectsSection():
                kind = "projects"
            case SkillsSection():
                kind = "skills"
            case ItemListSection():
                kind = "items"
            case _:
                raise TypeError(f"Unsupported section object: {type(section).__name__}")
        return SectionView(kind=kind, section=section)

    @classmethod
    def section_views(cls, sections: list[Section]) -> list[SectionView]:
        return [cls.section_view(section) for section in sections]
