"""Color palettes applied on top of any template."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["PALETTES", "ColorPalette", "PaletteColors", "get_palette"]


class ColorPalette(StrEnum):
    BLUE = "blue"
    GREEN = "green"
    BLACK = "black"
    PURPLE = "purple"


@dataclass(frozen=True, slots=True)
class PaletteColors:
    """Hex colors for each visual role a template can use.

    Attributes:
        primary: Name/title accents and section headings.
        accent_bg: Solid backgrounds (creative sidebar, technical header).
        border: Rules and dividers.
        company: Company names in experience entries.
        link: Contact links.
    """

    primary: str
    accent_bg: str
    border: str
    company: str
    link: str

    def css_variables(self) -> str:
        return (
            f"--color-primary: {self.primary}; "
            f"--color-accent-bg: {self.accent_bg}; "
            f"--color-border: {self.border}; "
            f"--color-company: {self.company}; "
            f"--color-link: {self.link};"
        )


PALETTES: dict[ColorPalette, PaletteColors] = {
    ColorPalette.BLUE: PaletteColors(
        primary="#1e40af",
        accent_bg="#2563eb",
        border="#2563eb",
        company="#1d4ed8",
        link="#1d4ed8",
    ),
    ColorPalette.GREEN: PaletteColors(
        primary="#166534",
        accent_bg="#16a34a",
        border="#16a34a",
        company="#15803d",
        link="#15803d",
    ),
    ColorPalette.BLACK: PaletteColors(
        primary="#000000",
        accent_bg="#18181b",
        border="#000000",
        company="#27272a",
        link="#27272a",
    ),
    ColorPalette.PURPLE: PaletteColors(
        primary="#6b21a8",
        accent_bg="#9333ea",
        border="#9333ea",
        company="#7e22ce",
        link="#7e22ce",
    ),
}


def get_palette(name: ColorPalette | str) -> PaletteColors:
    """Return the colors for palette *name*.

    Raises:
        ValueError: If no palette with that name exists.
    """
    try:
        return PALETTES[ColorPalette(name)]
    except ValueError:
        available = ", ".join(p.value for p in ColorPalette)
        msg = f"Unknown color palette {name!r}. Available: {available}"
        raise ValueError(msg) from None
