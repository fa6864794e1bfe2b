from __future__ import annotations

import pytest

from themesmith.model import (
    CategoryStyle,
    Emphasis,
    ThemePatch,
    ThemeState,
)


def test_default_state_defines_every_value() -> None:
    state = ThemeState.default()

    assert state.get_name() == "arcadia"
    assert state.get_global("background") == "#282828"
    assert state.get_global("foreground") == "#ebdbb2"
    assert state.get("keyword") == CategoryStyle("#fb4934")
    assert state.get("comment").emphasis == Emphasis(italic=True)
    assert state.get("function").emphasis == Emphasis(bold=True)


def test_set_color_leaves_emphasis_untouched() -> None:
    state = ThemeState.default()

    state.set_color("string", "#5088C5")

    assert state.get("string").color == "#5088C5"
    assert state.get("string").emphasis == Emphasis(italic=True)


def test_toggles_flip_one_flag_and_keep_color() -> None:
    state = ThemeState.default()

    state.toggle_bold("string")
    assert state.get("string").emphasis == Emphasis(bold=True, italic=True)

    state.toggle_italic("string")
    assert state.get("string").emphasis == Emphasis(bold=True)
    assert state.get("string").color == "#b8bb26"


def test_colors_are_stored_as_written() -> None:
    state = ThemeState.default()

    state.set_global("background", "#FdF8f2")
    state.set_color("number", "not-a-color")

    assert state.background == "#FdF8f2"
    assert state.get("number").color == "not-a-color"


def test_unknown_ids_raise_key_error() -> None:
    state = ThemeState.default()

    with pytest.raises(KeyError):
        state.get("markup")
    with pytest.raises(KeyError):
        state.set_global("cursor", "#000000")


def test_empty_name_falls_back_to_default() -> None:
    state = ThemeState.default()

    state.set_name("")
    assert state.get_name() == "arcadia"

    state.set_name("Lichen")
    assert state.get_name() == "Lichen"


def test_name_spelling_is_kept_as_typed() -> None:
    state = ThemeState.default()

    state.set_name(" Dune ")
    assert state.get_name() == " Dune "

    state.set_name("  ")
    assert state.get_name() == "  "


def test_apply_patch_replaces_only_carried_fields() -> None:
    state = ThemeState.default()
    patch = ThemePatch(
        background="#ffffff",
        categories={"keyword": CategoryStyle("#2B65A1", Emphasis(bold=True))},
    )

    state.apply(patch)

    assert state.background == "#ffffff"
    assert state.foreground == "#ebdbb2"
    assert state.get("keyword") == CategoryStyle(
        "#2B65A1",
        Emphasis(bold=True),
    )
    assert state.get("comment") == ThemeState.default().get("comment")
    assert state.get_name() == "arcadia"


def test_apply_patch_with_unknown_category_changes_nothing() -> None:
    state = ThemeState.default()
    patch = ThemePatch(
        background="#ffffff",
        categories={"markup": CategoryStyle("#000000")},
    )

    with pytest.raises(KeyError):
        state.apply(patch)
    assert state == ThemeState.default()


def test_copy_is_independent() -> None:
    state = ThemeState.default()
    clone = state.copy()

    clone.set_color("keyword", "#000000")

    assert state.get("keyword").color == "#fb4934"
    assert clone != state


def test_font_style_lists_bold_first() -> None:
    assert Emphasis().font_style == ""
    assert Emphasis(bold=True).font_style == "bold"
    assert Emphasis(italic=True).font_style == "italic"
    assert Emphasis(bold=True, italic=True).font_style == "bold italic"


def test_font_style_parsing_uses_substring_containment() -> None:
    assert Emphasis.from_font_style("italic bold") == Emphasis(True, True)
    assert Emphasis.from_font_style("bold underline") == Emphasis(bold=True)
    assert Emphasis.from_font_style("") == Emphasis()
    assert Emphasis.from_font_style(None) == Emphasis()
    # Loose matching is accepted: any word containing "bold" counts.
    assert Emphasis.from_font_style("semibolder").bold is True


def test_patch_is_empty() -> None:
    assert ThemePatch().is_empty
    assert not ThemePatch(name="x").is_empty
