"""Color helpers shared by the exporters and the preview."""

from __future__ import annotations

from typing import Optional

from rich.color import Color, ColorParseError
from rich.color_triplet import ColorTriplet

LIGHT_THRESHOLD = 0.5


def parse_triplet(value: str) -> Optional[ColorTriplet]:
    """Return the RGB triplet for ``value`` or ``None`` if unparseable."""

    try:
        return Color.parse(value).get_truecolor()
    except ColorParseError:
        return None


def perceived_luminance(color: ColorTriplet) -> float:
    """Return the 0..1 perceived brightness of ``color``."""

    return (
        0.299 * color.red + 0.587 * color.green + 0.114 * color.blue
    ) / 255


def is_light_background(value: str) -> bool:
    """Return whether a background reads as light.

    Values that cannot be parsed are treated as dark.
    """

    triplet = parse_triplet(value)
    if triplet is None:
        return False
    return perceived_luminance(triplet) > LIGHT_THRESHOLD


def theme_type(background: str) -> str:
    """Return ``"light"`` or ``"dark"`` for a background color."""

    return "light" if is_light_background(background) else "dark"
