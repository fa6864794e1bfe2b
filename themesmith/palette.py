"""Reference palette and human-readable color names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class NamedColor:
    """A palette entry."""

    name: str
    hex: str


PALETTE: Final[dict[str, tuple[NamedColor, ...]]] = {
    "primary": (
        NamedColor("aegean", "#5088C5"),
        NamedColor("amber", "#F28360"),
        NamedColor("seaweed", "#3B9886"),
        NamedColor("canary", "#F7B846"),
        NamedColor("aster", "#7A77AB"),
        NamedColor("rose", "#F898AE"),
        NamedColor("vital", "#73B5E3"),
        NamedColor("tangerine", "#FFB984"),
        NamedColor("lime", "#97CD78"),
        NamedColor("dragon", "#C85152"),
        NamedColor("oat", "#F5E4BE"),
        NamedColor("wish", "#BABEE0"),
    ),
    "neutral": (
        NamedColor("pitch", "#09090A"),
        NamedColor("crow", "#292928"),
        NamedColor("slate", "#43413F"),
        NamedColor("bark", "#8F8885"),
        NamedColor("chateau", "#BAB0A8"),
        NamedColor("gray", "#EBEDE8"),
        NamedColor("parchment", "#FDF8F2"),
    ),
    "shades": (
        NamedColor("lapis", "#2B65A1"),
        NamedColor("dusk", "#094468"),
        NamedColor("cinnabar", "#9E3F41"),
        NamedColor("mustard", "#D68D22"),
        NamedColor("tanzanite", "#54448C"),
        NamedColor("asparagus", "#2A6B5E"),
        NamedColor("depths", "#09473E"),
        NamedColor("fern", "#47784A"),
        NamedColor("matcha", "#71AC5A"),
        NamedColor("azalea", "#C14C70"),
        NamedColor("steel", "#687787"),
    ),
    "backgrounds": (
        NamedColor("parchment", "#FDF8F2"),
        NamedColor("zephyr", "#F4FBFF"),
        NamedColor("lichen", "#F7FBEF"),
        NamedColor("dawn", "#F8F4F1"),
        NamedColor("white", "#FFFFFF"),
        NamedColor("crow", "#292928"),
        NamedColor("pitch", "#09090A"),
    ),
}


def _build_name_index() -> dict[str, str]:
    index: dict[str, str] = {}
    for colors in PALETTE.values():
        for color in colors:
            index.setdefault(color.hex.upper(), color.name)
    return index


_NAMES_BY_HEX: Final[dict[str, str]] = _build_name_index()


def color_name(value: str) -> str:
    """Return the palette name of ``value``, or the lowercase value."""

    return _NAMES_BY_HEX.get(value.upper(), value.lower())


def palette_groups() -> tuple[tuple[str, tuple[NamedColor, ...]], ...]:
    """Return the palette groups in display order."""

    return tuple(PALETTE.items())
