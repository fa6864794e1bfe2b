"""VS Code color theme JSON."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from ..categories import list_categories
from ..colors import theme_type
from ..lookup import DEFAULT_INDEX, ReverseLookupIndex
from ..model import CategoryStyle, Emphasis, ThemePatch, ThemeState
from .base import ThemeFormat, load_json_object, string_value

LOGGER = logging.getLogger(__name__)

VSCODE_SCHEMA = "vscode://schemas/color-theme"
EDITOR_BACKGROUND = "editor.background"
EDITOR_FOREGROUND = "editor.foreground"


class VSCodeThemeFormat(ThemeFormat):
    """Editor theme with ``colors`` and ``tokenColors`` rules.

    When several rules resolve to the same category, the first one in the
    file wins and the rest are ignored.
    """

    key = "vscode"
    label = "VS Code"
    suffix = "-vscode.json"

    def __init__(self, index: ReverseLookupIndex = DEFAULT_INDEX) -> None:
        self.index = index

    def serialize(self, state: ThemeState) -> str:
        token_colors = []
        for category in list_categories():
            style = state.get(category.id)
            settings = {"foreground": style.color}
            font_style = style.emphasis.font_style
            if font_style:
                settings["fontStyle"] = font_style
            token_colors.append(
                {
                    "name": category.label,
                    "scope": list(category.scopes),
                    "settings": settings,
                }
            )
        payload = {
            "$schema": VSCODE_SCHEMA,
            "name": state.get_name(),
            "type": theme_type(state.background),
            "colors": {
                EDITOR_BACKGROUND: state.background,
                EDITOR_FOREGROUND: state.foreground,
            },
            "tokenColors": token_colors,
        }
        return json.dumps(payload, indent=2)

    def deserialize(self, text: str) -> ThemePatch:
        payload = load_json_object(text, label="VS Code theme")
        patch = ThemePatch()

        colors = payload.get("colors")
        patch.background = string_value(colors, EDITOR_BACKGROUND)
        patch.foreground = string_value(colors, EDITOR_FOREGROUND)

        rules = payload.get("tokenColors")
        if isinstance(rules, list):
            for rule in rules:
                self._read_rule(rule, patch)

        patch.name = string_value(payload, "name")
        return patch

    def _read_rule(self, rule: Any, patch: ThemePatch) -> None:
        if not isinstance(rule, dict):
            return
        settings = rule.get("settings")
        foreground = string_value(settings, "foreground")
        if foreground is None:
            return
        for scope in _rule_scopes(rule.get("scope")):
            category_id = self.index.category_for_scope(scope)
            if category_id is None:
                continue
            if category_id in patch.categories:
                LOGGER.debug(
                    "Ignoring later rule for %s (scope %s)",
                    category_id,
                    scope,
                )
                return
            font_style = string_value(settings, "fontStyle")
            patch.categories[category_id] = CategoryStyle(
                color=foreground,
                emphasis=Emphasis.from_font_style(font_style),
            )
            return


def _rule_scopes(value: Any) -> Iterable[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",")]
    if isinstance(value, list):
        return [item.strip() for item in value if isinstance(item, str)]
    return []
