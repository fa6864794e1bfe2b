"""Live preview of a theme applied to sample source code."""

from __future__ import annotations

import io
from typing import Any, Final

from pygments.token import (
    Comment,
    Error,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
)
from rich.console import Console
from rich.style import Style
from rich.syntax import ANSISyntaxTheme, Syntax

from .categories import list_categories
from .colors import parse_triplet, theme_type
from .model import Emphasis, ThemeState

PREVIEW_THEME_NAME: Final[str] = "themesmith-preview"

SAMPLE_CODE: Final[str] = '''\
from __future__ import annotations
from dataclasses import dataclass

import matplotlib.colors as mcolors


@dataclass
class Anchor(object):
    """A paired color and position value for a gradient."""

    color: str
    value: float = 0.5


def interpolate(anchors: list[Anchor], steps: int = 21) -> list[str]:
    # Sample the colormap at evenly spaced positions
    if len(anchors) < 2 or steps <= 0:
        raise ValueError(f"need two anchors, got {len(anchors)}")
    cmap = mcolors.LinearSegmentedColormap.from_list(
        "gradient", [(a.value, a.color) for a in anchors]
    )
    return [mcolors.to_hex(cmap(i / steps)) for i in range(steps)]
'''

# Pygments token types standing in for each TextMate scope.
SCOPE_TOKENS: Final[dict[str, tuple[Any, ...]]] = {
    "keyword": (Keyword,),
    "keyword.control": (Keyword.Reserved,),
    "invalid": (Error,),
    "string": (String,),
    "entity.name.function": (Name.Function,),
    "support.function": (Name.Builtin,),
    "comment": (Comment,),
    "entity.name.type": (Name.Class,),
    "storage.type": (Keyword.Type,),
    "support.type": (Name.Exception,),
    "variable": (Name.Variable,),
    "variable.parameter": (Name.Builtin.Pseudo,),
    "constant.numeric": (Number,),
    "constant.language": (Keyword.Constant,),
    "keyword.operator": (Operator,),
    "keyword.import": (Keyword.Namespace,),
    "keyword.control.import": (Keyword.Namespace,),
    "entity.other.attribute-name": (Name.Attribute, Name.Decorator),
    "entity.other.inherited-class": (Name.Entity,),
}

_FOREGROUND_TOKENS: Final[tuple[Any, ...]] = (
    Text,
    Name,
    Punctuation,
)


def build_preview_theme(state: ThemeState) -> dict[str, Any]:
    """Return the TextMate-style theme handed to the highlighter.

    This is the only view of the theme the highlighter gets: the editor
    colors plus one color/style rule per category, keyed by scope names.
    """

    settings: list[dict[str, Any]] = [
        {
            "settings": {
                "background": state.background,
                "foreground": state.foreground,
            },
        }
    ]
    for category in list_categories():
        style = state.get(category.id)
        rule = {"foreground": style.color}
        font_style = style.emphasis.font_style
        if font_style:
            rule["fontStyle"] = font_style
        settings.append({"scope": list(category.scopes), "settings": rule})
    return {
        "name": PREVIEW_THEME_NAME,
        "type": theme_type(state.background),
        "colors": {
            "editor.background": state.background,
            "editor.foreground": state.foreground,
        },
        "settings": settings,
    }


def syntax_theme_from_preview(theme: dict[str, Any]) -> ANSISyntaxTheme:
    """Translate a preview theme into a Rich syntax theme."""

    style_map: dict[Any, Style] = {}
    for rule in theme.get("settings", []):
        settings = rule.get("settings", {})
        style = _rule_style(settings)
        if style is None:
            continue
        scopes = rule.get("scope")
        if scopes is None:
            for token in _FOREGROUND_TOKENS:
                style_map[token] = style
            continue
        for scope in scopes:
            for token in SCOPE_TOKENS.get(scope, ()):
                style_map[token] = style
    return ANSISyntaxTheme(style_map)


def build_syntax(
    state: ThemeState,
    code: str = SAMPLE_CODE,
    *,
    lexer: str = "python",
) -> Syntax:
    """Return a Rich ``Syntax`` renderable showing ``code`` in ``state``."""

    theme = build_preview_theme(state)
    background = None
    if parse_triplet(state.background) is not None:
        background = state.background
    return Syntax(
        code,
        lexer,
        theme=syntax_theme_from_preview(theme),
        background_color=background,
        word_wrap=False,
    )


def render_preview_html(
    state: ThemeState,
    code: str = SAMPLE_CODE,
    *,
    width: int = 100,
) -> str:
    """Return the preview as a standalone HTML document."""

    console = Console(
        record=True,
        file=io.StringIO(),
        width=width,
        force_terminal=True,
        color_system="truecolor",
    )
    console.print(build_syntax(state, code))
    return console.export_html(inline_styles=True)


def _rule_style(settings: dict[str, Any]) -> Style | None:
    color = settings.get("foreground")
    if not isinstance(color, str) or parse_triplet(color) is None:
        return None
    emphasis = Emphasis.from_font_style(settings.get("fontStyle"))
    return Style(color=color, bold=emphasis.bold, italic=emphasis.italic)
