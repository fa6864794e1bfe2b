"""YAML settings for themesmith."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .formats.pandoc import DEFAULT_AUTHOR

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "THEMESMITH_CONFIG"
KNOWN_KEYS = ("output_dir", "author", "theme")


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


@dataclass(frozen=True)
class AppConfig:
    """Settings read from ``config.yaml``. Every key is optional."""

    path: Path
    output_dir: Optional[Path] = None
    author: str = DEFAULT_AUTHOR
    theme: Optional[Path] = None

    @property
    def export_dir(self) -> Path:
        """Directory that exports are written to."""

        return self.output_dir or Path.cwd()


def default_config_path() -> Path:
    """Return ``$THEMESMITH_CONFIG`` or the per-user config file."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "themesmith" / "config.yaml"


def load_config(path: Path | None = None) -> AppConfig:
    """Read settings from ``path``, or from the default location.

    A missing file yields the defaults. Unknown keys are logged and
    otherwise ignored; keys with the wrong type raise ``ConfigError``.
    """

    config_path = (path or default_config_path()).expanduser()
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        LOGGER.debug("No config at %s, using defaults", config_path)
        return AppConfig(path=config_path)
    except OSError as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc

    settings = _parse_settings(text, config_path)
    for key in settings:
        if key not in KNOWN_KEYS:
            LOGGER.warning(
                "Ignoring unknown config key %r in %s",
                key,
                config_path,
            )

    author = settings.get("author", DEFAULT_AUTHOR)
    if not isinstance(author, str):
        raise ConfigError(
            f"{config_path}: 'author' must be a string, "
            f"got {type(author).__name__}."
        )

    LOGGER.debug("Loaded config from %s", config_path)
    return AppConfig(
        path=config_path,
        output_dir=_optional_path(settings, "output_dir", config_path),
        author=author,
        theme=_optional_path(settings, "theme", config_path),
    )


def _parse_settings(text: str, config_path: Path) -> dict[Any, Any]:
    try:
        settings = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Failed to parse YAML config {config_path}: {exc}"
        ) from exc
    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ConfigError(
            f"{config_path}: expected a mapping at the top level, "
            f"got {type(settings).__name__}."
        )
    return settings


def _optional_path(
    settings: dict[Any, Any],
    key: str,
    config_path: Path,
) -> Optional[Path]:
    value = settings.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"{config_path}: '{key}' must be a string path, "
            f"got {type(value).__name__}."
        )
    return Path(value).expanduser()
