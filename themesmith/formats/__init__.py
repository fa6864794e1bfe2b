"""Converters between the canonical theme model and external formats."""

from __future__ import annotations

from .base import ThemeFormat, ThemeFormatError
from .pandoc import PandocThemeFormat
from .tmtheme import TmThemeFormat
from .vscode import VSCodeThemeFormat

__all__ = [
    "PandocThemeFormat",
    "ThemeFormat",
    "ThemeFormatError",
    "TmThemeFormat",
    "VSCodeThemeFormat",
]
