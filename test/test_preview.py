from __future__ import annotations

from pygments.token import Comment, Keyword, Name, Number
from rich.color import Color
from rich.syntax import Syntax

from themesmith import preview
from themesmith.model import ThemeState


def test_preview_theme_carries_globals_and_category_rules() -> None:
    theme = preview.build_preview_theme(ThemeState.default())

    assert theme["type"] == "dark"
    assert theme["colors"]["editor.background"] == "#282828"
    settings = theme["settings"]
    assert settings[0] == {
        "settings": {"background": "#282828", "foreground": "#ebdbb2"}
    }
    assert len(settings) == 13
    assert settings[5] == {
        "scope": ["comment"],
        "settings": {"foreground": "#928374", "fontStyle": "italic"},
    }


def test_syntax_theme_maps_scopes_to_pygments_tokens() -> None:
    state = ThemeState.default()
    state.toggle_bold("number")
    theme = preview.syntax_theme_from_preview(
        preview.build_preview_theme(state)
    )

    keyword = theme.get_style_for_token(Keyword)
    comment = theme.get_style_for_token(Comment.Single)
    number = theme.get_style_for_token(Number.Integer)
    function = theme.get_style_for_token(Name.Function)

    assert keyword.color == Color.parse("#fb4934")
    assert comment.italic is True
    assert number.bold is True
    assert function.color == Color.parse("#b8bb26")


def test_build_syntax_returns_renderable() -> None:
    syntax = preview.build_syntax(ThemeState.default(), "x = 1\n")

    assert isinstance(syntax, Syntax)
    assert syntax.code == "x = 1\n"


def test_render_preview_html_uses_theme_colors() -> None:
    state = ThemeState.default()
    state.set_color("keyword", "#5088C5")

    html = preview.render_preview_html(state)

    assert "<html" in html
    assert "#5088c5" in html.lower()


def test_unparseable_colors_do_not_break_the_preview() -> None:
    state = ThemeState.default()
    state.set_global("background", "paper")
    state.set_color("keyword", "not-a-color")

    theme = preview.syntax_theme_from_preview(
        preview.build_preview_theme(state)
    )
    html = preview.render_preview_html(state, "def f():\n    return 1\n")

    assert theme.get_style_for_token(Keyword).color is None
    assert "<html" in html
