"""Canonical in-memory theme model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Final, Mapping, Optional

from .categories import (
    CATEGORY_ATTRIBUTE,
    CATEGORY_COMMENT,
    CATEGORY_CONSTANT,
    CATEGORY_ERROR,
    CATEGORY_FUNCTION,
    CATEGORY_IMPORT,
    CATEGORY_KEYWORD,
    CATEGORY_NUMBER,
    CATEGORY_OPERATOR,
    CATEGORY_STRING,
    CATEGORY_TYPE,
    CATEGORY_VARIABLE,
    GLOBAL_BACKGROUND,
    GLOBAL_FOREGROUND,
    category_ids,
    get_category,
    global_ids,
)

DEFAULT_THEME_NAME: Final[str] = "arcadia"


@dataclass(frozen=True)
class Emphasis:
    """Independent bold and italic flags for a token category."""

    bold: bool = False
    italic: bool = False

    @property
    def font_style(self) -> str:
        """Return the style string, ``bold`` first, or ``""``."""

        parts = []
        if self.bold:
            parts.append("bold")
        if self.italic:
            parts.append("italic")
        return " ".join(parts)

    @classmethod
    def from_font_style(cls, value: Optional[str]) -> "Emphasis":
        """Parse a style string by substring containment.

        Any value containing ``bold`` sets bold and any value containing
        ``italic`` sets italic, so ``"italic bold"`` and ``"bold underline"``
        are both understood.
        """

        text = value or ""
        return cls(bold="bold" in text, italic="italic" in text)


NO_EMPHASIS: Final[Emphasis] = Emphasis()


@dataclass(frozen=True)
class CategoryStyle:
    """Color and emphasis assigned to one token category."""

    color: str
    emphasis: Emphasis = NO_EMPHASIS


@dataclass
class ThemePatch:
    """Partial theme update recovered from an external file.

    ``None`` fields and categories absent from ``categories`` are left
    untouched when the patch is applied.
    """

    name: Optional[str] = None
    background: Optional[str] = None
    foreground: Optional[str] = None
    categories: dict[str, CategoryStyle] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when applying the patch would change nothing."""

        return (
            self.name is None
            and self.background is None
            and self.foreground is None
            and not self.categories
        )


_DEFAULT_GLOBALS: Final[dict[str, str]] = {
    GLOBAL_BACKGROUND: "#282828",
    GLOBAL_FOREGROUND: "#ebdbb2",
}

_DEFAULT_STYLES: Final[dict[str, CategoryStyle]] = {
    CATEGORY_KEYWORD: CategoryStyle("#fb4934"),
    CATEGORY_ERROR: CategoryStyle("#fb4934", Emphasis(bold=True)),
    CATEGORY_STRING: CategoryStyle("#b8bb26", Emphasis(italic=True)),
    CATEGORY_FUNCTION: CategoryStyle("#b8bb26", Emphasis(bold=True)),
    CATEGORY_COMMENT: CategoryStyle("#928374", Emphasis(italic=True)),
    CATEGORY_TYPE: CategoryStyle("#fabd2f"),
    CATEGORY_VARIABLE: CategoryStyle("#83a598"),
    CATEGORY_NUMBER: CategoryStyle("#d3869b"),
    CATEGORY_CONSTANT: CategoryStyle("#d3869b"),
    CATEGORY_OPERATOR: CategoryStyle("#fe8019"),
    CATEGORY_IMPORT: CategoryStyle("#8ec07c"),
    CATEGORY_ATTRIBUTE: CategoryStyle("#8ec07c"),
}


class ThemeState:
    """The single source of truth for the theme being edited.

    Every token category and both global settings always hold a color.
    Colors are stored exactly as written; no validation or case
    normalization happens here. Callers that render a preview are
    responsible for refreshing it after each mutation.
    """

    def __init__(
        self,
        *,
        name: str,
        globals_: Mapping[str, str],
        styles: Mapping[str, CategoryStyle],
    ) -> None:
        missing = [key for key in global_ids() if key not in globals_]
        missing.extend(key for key in category_ids() if key not in styles)
        if missing:
            raise ValueError(
                "Theme state is missing values for: " + ", ".join(missing)
            )
        self._name = name
        self._globals = {key: globals_[key] for key in global_ids()}
        self._styles = {key: styles[key] for key in category_ids()}

    @classmethod
    def default(cls) -> "ThemeState":
        """Return a fresh state holding the built-in default theme."""

        return cls(
            name=DEFAULT_THEME_NAME,
            globals_=_DEFAULT_GLOBALS,
            styles=_DEFAULT_STYLES,
        )

    def copy(self) -> "ThemeState":
        """Return an independent copy of this state."""

        return ThemeState(
            name=self._name,
            globals_=self._globals,
            styles=self._styles,
        )

    def get(self, category_id: str) -> CategoryStyle:
        """Return the color and emphasis of ``category_id``."""

        get_category(category_id)
        return self._styles[category_id]

    def set_color(self, category_id: str, color: str) -> None:
        """Set the color of ``category_id`` without touching emphasis."""

        current = self.get(category_id)
        self._styles[category_id] = replace(current, color=color)

    def toggle_bold(self, category_id: str) -> None:
        """Flip the bold flag of ``category_id``."""

        current = self.get(category_id)
        emphasis = replace(current.emphasis, bold=not current.emphasis.bold)
        self._styles[category_id] = replace(current, emphasis=emphasis)

    def toggle_italic(self, category_id: str) -> None:
        """Flip the italic flag of ``category_id``."""

        current = self.get(category_id)
        emphasis = replace(
            current.emphasis,
            italic=not current.emphasis.italic,
        )
        self._styles[category_id] = replace(current, emphasis=emphasis)

    def get_global(self, setting_id: str) -> str:
        """Return the color of the global setting ``setting_id``."""

        try:
            return self._globals[setting_id]
        except KeyError:
            raise KeyError(f"Unknown global setting '{setting_id}'") from None

    def set_global(self, setting_id: str, color: str) -> None:
        """Set the color of the global setting ``setting_id``."""

        self.get_global(setting_id)
        self._globals[setting_id] = color

    def get_name(self) -> str:
        """Return the theme name, or the default name when it is empty."""

        return self._name or DEFAULT_THEME_NAME

    def set_name(self, name: str) -> None:
        """Set the theme name."""

        self._name = name

    @property
    def background(self) -> str:
        """Background color of the theme."""

        return self._globals[GLOBAL_BACKGROUND]

    @property
    def foreground(self) -> str:
        """Default text color of the theme."""

        return self._globals[GLOBAL_FOREGROUND]

    def apply(self, patch: ThemePatch) -> None:
        """Replace the fields carried by ``patch``."""

        unknown = [key for key in patch.categories if key not in self._styles]
        if unknown:
            raise KeyError(
                "Unknown token categories in patch: " + ", ".join(unknown)
            )
        if patch.background is not None:
            self._globals[GLOBAL_BACKGROUND] = patch.background
        if patch.foreground is not None:
            self._globals[GLOBAL_FOREGROUND] = patch.foreground
        self._styles.update(patch.categories)
        if patch.name is not None:
            self._name = patch.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThemeState):
            return NotImplemented
        return (
            self._name == other._name
            and self._globals == other._globals
            and self._styles == other._styles
        )

    def __repr__(self) -> str:
        return (
            f"ThemeState(name={self._name!r}, "
            f"background={self.background!r}, "
            f"foreground={self.foreground!r})"
        )
