"""Pandoc (skylighting) highlight style JSON."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..categories import ALL_HIGHLIGHT_TOKENS, list_categories
from ..lookup import (
    DEFAULT_INDEX,
    HIGHLIGHT_TOKEN_SUFFIX,
    ReverseLookupIndex,
)
from ..model import NO_EMPHASIS, CategoryStyle, Emphasis, ThemePatch
from ..model import ThemeState
from .base import ThemeFormat, load_json_object, string_value

LOGGER = logging.getLogger(__name__)

DEFAULT_AUTHOR = "themesmith"
THEME_REVISION = 1


class PandocThemeFormat(ThemeFormat):
    """Highlight style consumed by ``pandoc --highlight-style``.

    The style table always lists every known skylighting token; tokens
    without an owning category carry a ``null`` text color.
    """

    key = "pandoc"
    label = "Pandoc"
    suffix = ".theme"

    def __init__(
        self,
        *,
        author: str = DEFAULT_AUTHOR,
        index: ReverseLookupIndex = DEFAULT_INDEX,
    ) -> None:
        self.author = author
        self.index = index

    def serialize(self, state: ThemeState) -> str:
        styles: dict[str, CategoryStyle] = {}
        for category in list_categories():
            for token in category.highlight_tokens:
                styles.setdefault(token, state.get(category.id))

        text_styles = {}
        for token in ALL_HIGHLIGHT_TOKENS:
            style = styles.get(token)
            emphasis = style.emphasis if style is not None else NO_EMPHASIS
            text_styles[token + HIGHLIGHT_TOKEN_SUFFIX] = {
                "text-color": style.color if style is not None else None,
                "background-color": None,
                "bold": emphasis.bold,
                "italic": emphasis.italic,
                "underline": False,
            }

        payload = {
            "metadata": {
                "name": state.get_name(),
                "author": self.author,
                "license": "",
                "revision": THEME_REVISION,
            },
            "text-color": state.foreground,
            "background-color": state.background,
            "line-number-color": state.foreground,
            "line-number-background-color": None,
            "text-styles": text_styles,
        }
        return json.dumps(payload, indent=2)

    def deserialize(self, text: str) -> ThemePatch:
        payload = load_json_object(text, label="pandoc theme")
        patch = ThemePatch(
            foreground=string_value(payload, "text-color"),
            background=string_value(payload, "background-color"),
        )

        text_styles = payload.get("text-styles")
        if isinstance(text_styles, dict):
            for token, style in text_styles.items():
                self._read_style(token, style, patch)

        patch.name = string_value(payload.get("metadata"), "name")
        return patch

    def _read_style(self, token: str, style: Any, patch: ThemePatch) -> None:
        category_id = self.index.category_for_highlight_token(token)
        if category_id is None:
            return
        if category_id in patch.categories:
            LOGGER.debug("Ignoring later style %s for %s", token, category_id)
            return
        color = string_value(style, "text-color")
        if color is None:
            return
        patch.categories[category_id] = CategoryStyle(
            color=color,
            emphasis=Emphasis(
                bold=bool(style.get("bold")),
                italic=bool(style.get("italic")),
            ),
        )
