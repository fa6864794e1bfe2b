"""TextMate ``.tmTheme`` property lists."""

from __future__ import annotations

import logging
import plistlib
from typing import Any
from xml.parsers.expat import ExpatError

from ..categories import list_categories
from ..lookup import DEFAULT_INDEX, ReverseLookupIndex
from ..model import CategoryStyle, Emphasis, ThemePatch, ThemeState
from .base import ThemeFormat, ThemeFormatError, string_value

LOGGER = logging.getLogger(__name__)

SCOPE_SEPARATOR = ", "


class TmThemeFormat(ThemeFormat):
    """XML property list with a ``settings`` array of scope rules.

    Scopeless entries carry the global colors. Every other entry
    names a comma-separated scope list; the first scope that resolves picks
    the category, and the first entry to claim a category wins. Entries
    that are malformed or lack a foreground are skipped.
    """

    key = "tmtheme"
    label = "TextMate"
    suffix = ".tmTheme"

    def __init__(self, index: ReverseLookupIndex = DEFAULT_INDEX) -> None:
        self.index = index

    def serialize(self, state: ThemeState) -> str:
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
            settings.append(
                {
                    "name": category.label,
                    "scope": SCOPE_SEPARATOR.join(category.scopes),
                    "settings": rule,
                }
            )
        payload = {"name": state.get_name(), "settings": settings}
        return plistlib.dumps(payload, sort_keys=False).decode("utf-8")

    def deserialize(self, text: str) -> ThemePatch:
        payload = _load_plist(text)
        patch = ThemePatch()

        entries = payload.get("settings")
        if isinstance(entries, list):
            for entry in entries:
                if not isinstance(entry, dict):
                    continue
                if "scope" in entry:
                    self._read_scope_entry(entry, patch)
                elif isinstance(entry.get("settings"), dict):
                    _read_global_entry(entry["settings"], patch)

        patch.name = string_value(payload, "name")
        return patch

    def _read_scope_entry(
        self,
        entry: dict[str, Any],
        patch: ThemePatch,
    ) -> None:
        scope_text = entry.get("scope")
        settings = entry.get("settings")
        foreground = string_value(settings, "foreground")
        if not isinstance(scope_text, str) or foreground is None:
            return
        for scope in scope_text.split(","):
            category_id = self.index.category_for_scope(scope.strip())
            if category_id is None:
                continue
            if category_id in patch.categories:
                LOGGER.debug(
                    "Ignoring later entry for %s (scope %s)",
                    category_id,
                    scope.strip(),
                )
                return
            patch.categories[category_id] = CategoryStyle(
                color=foreground,
                emphasis=Emphasis.from_font_style(
                    string_value(settings, "fontStyle")
                ),
            )
            return


def _read_global_entry(settings: dict[str, Any], patch: ThemePatch) -> None:
    background = string_value(settings, "background")
    foreground = string_value(settings, "foreground")
    if background is not None:
        patch.background = background
    if foreground is not None:
        patch.foreground = foreground


def _load_plist(text: str) -> dict[str, Any]:
    data = text.lstrip("\ufeff \t\r\n").encode("utf-8")
    try:
        payload = plistlib.loads(data)
    except (ExpatError, ValueError) as exc:
        raise ThemeFormatError(f"Failed to parse plist: {exc}") from exc
    except (AttributeError, TypeError, RecursionError) as exc:
        # plistlib fails this way on malformed <date> and deeply nested data
        raise ThemeFormatError(f"Invalid plist value: {exc!r}") from exc
    if not isinstance(payload, dict):
        raise ThemeFormatError("Top-level plist value must be a mapping.")
    return payload
