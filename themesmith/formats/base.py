"""Shared contract for theme file converters."""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
from typing import Any, Mapping, Optional

from ..model import ThemePatch, ThemeState


class ThemeFormatError(ValueError):
    """Raised when theme file content cannot be parsed."""


class ThemeFormat(ABC):
    """Convert between :class:`ThemeState` and one external file format.

    ``deserialize`` never mutates state. It returns a patch, so a file that
    fails to parse leaves the current theme untouched.
    """

    key: str = ""
    label: str = ""
    suffix: str = ""

    def filename(self, stem: str) -> str:
        """Return the export filename for a theme named ``stem``."""

        return f"{stem}{self.suffix}"

    def matches_filename(self, name: str) -> bool:
        """Return whether ``name`` carries this format's suffix."""

        return name.endswith(self.suffix)

    @abstractmethod
    def serialize(self, state: ThemeState) -> str:
        """Return the file content representing ``state``."""

    @abstractmethod
    def deserialize(self, text: str) -> ThemePatch:
        """Return the theme update recovered from ``text``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def load_json_object(text: str, *, label: str) -> dict[str, Any]:
    """Parse ``text`` as a JSON object or raise ``ThemeFormatError``."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ThemeFormatError(f"Failed to parse {label}: {exc}") from exc
    except RecursionError as exc:
        message = f"Failed to parse {label}: nested too deeply."
        raise ThemeFormatError(message) from exc
    if not isinstance(payload, dict):
        raise ThemeFormatError(
            f"Top-level {label} value must be an object, "
            f"got {type(payload).__name__}."
        )
    return payload


def string_value(mapping: object, key: str) -> Optional[str]:
    """Return ``mapping[key]`` when it is a non-empty string."""

    if not isinstance(mapping, Mapping):
        return None
    value = mapping.get(key)
    if isinstance(value, str) and value:
        return value
    return None
