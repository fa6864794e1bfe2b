"""Import and export themes as files and zip archives."""

from __future__ import annotations

from dataclasses import dataclass
import io
import logging
from pathlib import Path
import re
from typing import Optional, Sequence
from zipfile import BadZipFile, ZIP_DEFLATED, ZipFile
import zlib

from .formats import (
    PandocThemeFormat,
    ThemeFormat,
    ThemeFormatError,
    TmThemeFormat,
    VSCodeThemeFormat,
)
from .formats.base import load_json_object
from .formats.pandoc import DEFAULT_AUTHOR
from .model import ThemePatch, ThemeState

LOGGER = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"
_UNSAFE_STEM = re.compile(r"[\\/\x00-\x1f]+")


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a successful import."""

    source: str
    format_key: str
    patch: ThemePatch


def default_formats(
    *,
    author: str = DEFAULT_AUTHOR,
) -> tuple[ThemeFormat, ...]:
    """Return every converter, in archive import preference order."""

    return (
        VSCodeThemeFormat(),
        PandocThemeFormat(author=author),
        TmThemeFormat(),
    )


def theme_file_stem(state: ThemeState) -> str:
    """Return the filename stem used for exports of ``state``."""

    stem = _UNSAFE_STEM.sub("-", state.get_name()).strip(" .")
    return stem or "theme"


def export_files(
    state: ThemeState,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> dict[str, str]:
    """Serialize ``state`` with every converter, keyed by filename."""

    stem = theme_file_stem(state)
    active = formats if formats is not None else default_formats()
    return {fmt.filename(stem): fmt.serialize(state) for fmt in active}


def export_archive(
    state: ThemeState,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> bytes:
    """Return a zip archive bundling every exported theme file."""

    buffer = io.BytesIO()
    with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
        for name, content in export_files(state, formats).items():
            archive.writestr(name, content)
    return buffer.getvalue()


def write_archive(
    state: ThemeState,
    directory: Path,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> Path:
    """Write ``<name>.zip`` into ``directory`` and return its path."""

    directory = directory.expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / f"{theme_file_stem(state)}{ARCHIVE_SUFFIX}"
    target.write_bytes(export_archive(state, formats))
    LOGGER.info("Wrote theme archive %s", target)
    return target


def write_files(
    state: ThemeState,
    directory: Path,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> list[Path]:
    """Write each exported theme file into ``directory``."""

    directory = directory.expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, content in export_files(state, formats).items():
        target = directory / name
        with target.open("w", encoding="utf-8") as handle:
            handle.write(content)
        written.append(target)
        LOGGER.info("Wrote theme file %s", target)
    return written


def detect_format(
    filename: str,
    text: str,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> ThemeFormat:
    """Pick the converter for a file by name, then by content shape."""

    active = formats if formats is not None else default_formats()
    for fmt in active:
        if fmt.matches_filename(filename):
            return fmt

    if text.lstrip().startswith("<"):
        wanted = TmThemeFormat
    else:
        payload = load_json_object(text, label="theme JSON")
        if "text-styles" in payload:
            wanted = PandocThemeFormat
        else:
            wanted = VSCodeThemeFormat
    for fmt in active:
        if isinstance(fmt, wanted):
            return fmt
    raise ThemeFormatError(f"No converter available for {filename!r}.")


def parse_theme(
    filename: str,
    data: bytes,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> ImportResult:
    """Parse one theme file or archive without touching any state."""

    active = formats if formats is not None else default_formats()
    if filename.lower().endswith(ARCHIVE_SUFFIX):
        filename, data = _pick_archive_member(filename, data, active)

    text = _decode(filename, data)
    fmt = detect_format(filename, text, active)
    LOGGER.debug("Parsing %s as %s", filename, fmt.label)
    patch = fmt.deserialize(text)
    return ImportResult(source=filename, format_key=fmt.key, patch=patch)


def import_theme(
    filename: str,
    data: bytes,
    state: ThemeState,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> ImportResult:
    """Load a theme file or archive into ``state``.

    Parsing completes before ``state`` is touched, so a malformed file
    raises ``ThemeFormatError`` and leaves the current theme unchanged.
    """

    result = parse_theme(filename, data, formats)
    state.apply(result.patch)
    LOGGER.info(
        "Imported %s (%s): %d categories",
        result.source,
        result.format_key,
        len(result.patch.categories),
    )
    return result


def import_path(
    path: Path,
    state: ThemeState,
    formats: Optional[Sequence[ThemeFormat]] = None,
) -> ImportResult:
    """Read ``path`` from disk and import it into ``state``."""

    path = path.expanduser()
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ThemeFormatError(f"Failed to read file: {exc}") from exc
    return import_theme(path.name, data, state, formats)


def _pick_archive_member(
    filename: str,
    data: bytes,
    formats: Sequence[ThemeFormat],
) -> tuple[str, bytes]:
    try:
        with ZipFile(io.BytesIO(data)) as archive:
            members = [
                member
                for member in archive.namelist()
                if not member.endswith("/")
            ]
            for fmt in formats:
                for member in members:
                    if fmt.matches_filename(member):
                        return member, archive.read(member)
    except (BadZipFile, zlib.error, RuntimeError, NotImplementedError) as exc:
        # corrupt data, encrypted members and unsupported compression
        raise ThemeFormatError(
            f"Failed to read archive {filename}: {exc}"
        ) from exc
    raise ThemeFormatError(f"Archive {filename} contains no theme files.")


def _decode(filename: str, data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ThemeFormatError(
            f"{filename} is not UTF-8 text: {exc}"
        ) from exc
