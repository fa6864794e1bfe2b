"""Interactive theme studio for themesmith."""

from __future__ import annotations

import logging
from pathlib import Path
import re
from typing import Optional, Sequence

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    Footer,
    Input,
    ListItem,
    ListView,
    Static,
)

from ..categories import GLOBAL_SETTINGS, list_categories
from ..colors import parse_triplet
from ..exchange import default_formats, import_path, write_archive
from ..formats import ThemeFormat, ThemeFormatError
from ..model import ThemeState
from ..palette import NamedColor, color_name, palette_groups
from ..preview import build_syntax

LOGGER = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


def _swatch(color: str) -> Text:
    if parse_triplet(color) is None:
        return Text("??", style="reverse")
    return Text("  ", style=Style(bgcolor=color))


class TargetItem(ListItem):
    """List item for a global setting or token category."""

    def __init__(
        self,
        target_id: str,
        label: str,
        *,
        is_global: bool,
    ) -> None:
        self.label_widget = Static(label, classes="target-label")
        super().__init__(self.label_widget)
        self.target_id = target_id
        self.target_label = label
        self.is_global = is_global

    def show(self, state: ThemeState) -> None:
        """Render the item for the current value in ``state``."""

        if self.is_global:
            color = state.get_global(self.target_id)
            flags = ""
        else:
            style = state.get(self.target_id)
            color = style.color
            flags = "".join(
                (
                    "B" if style.emphasis.bold else "-",
                    "I" if style.emphasis.italic else "-",
                )
            )
        line = Text(f"{self.target_label:<11}")
        line.append_text(_swatch(color))
        line.append(f" {flags:<2} {color_name(color)}")
        self.label_widget.update(line)


class PaletteItem(ListItem):
    """List item for a reference palette color."""

    def __init__(self, group: str, color: NamedColor) -> None:
        line = _swatch(color.hex)
        line.append(f" {color.name} {color.hex} ({group})")
        super().__init__(Static(line, classes="palette-label"))
        self.color = color


class ThemeStudio(App):
    """Pick colors and emphasis per token category, then export."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #title {
        padding: 1 1;
        text-style: bold;
    }

    #layout {
        height: 1fr;
    }

    #targets {
        width: 40;
        margin: 0 1 1 1;
        border: round $accent;
        padding: 0 1;
    }

    #palette {
        width: 36;
        margin: 0 1 1 0;
        border: round $accent;
        padding: 0 1;
    }

    #editor {
        margin: 0 1 1 0;
        border: round $accent;
        padding: 0 1;
    }

    #target-list, #palette-list {
        height: 1fr;
    }

    .control-row {
        height: auto;
        margin-bottom: 1;
    }

    #color-input, #theme-name {
        width: 24;
        margin-right: 1;
    }

    #import-path {
        width: 1fr;
        margin-right: 1;
    }

    #status {
        color: $warning;
        margin-bottom: 1;
    }

    #preview {
        border: round $primary;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+b", "toggle_bold", "Bold"),
        Binding("ctrl+t", "toggle_italic", "Italic"),
        Binding("ctrl+e", "export_theme", "Export"),
        Binding("ctrl+o", "import_theme", "Import"),
    ]

    def __init__(
        self,
        *,
        state: Optional[ThemeState] = None,
        output_dir: Path,
        formats: Optional[Sequence[ThemeFormat]] = None,
        initial_theme: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.state = state if state is not None else ThemeState.default()
        self.output_dir = output_dir.expanduser()
        self.formats = tuple(formats or default_formats())
        self.initial_theme = initial_theme
        self.current_target = GLOBAL_SETTINGS[0].id
        self.last_status = ""

    def compose(self) -> ComposeResult:
        yield Static("Theme Studio", id="title")
        with Horizontal(id="layout"):
            with Vertical(id="targets"):
                yield Static("Global / Tokens")
                yield ListView(*self._target_items(), id="target-list")
            with Vertical(id="palette"):
                yield Static("Palette")
                yield ListView(*self._palette_items(), id="palette-list")
            with Vertical(id="editor"):
                with Horizontal(classes="control-row"):
                    yield Input(
                        "",
                        id="color-input",
                        placeholder="#rrggbb",
                    )
                    yield Button("Bold", id="toggle-bold")
                    yield Button("Italic", id="toggle-italic")
                with Horizontal(classes="control-row"):
                    yield Input(
                        self.state.get_name(),
                        id="theme-name",
                        placeholder="Theme name",
                    )
                    yield Button("Export", id="export-theme")
                    yield Button("Quit", id="quit-studio")
                with Horizontal(classes="control-row"):
                    yield Input(
                        "",
                        id="import-path",
                        placeholder="Theme file or .zip to import",
                    )
                    yield Button("Import", id="import-theme")
                yield Static("", id="status")
                yield Static("", id="preview")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_targets()
        self._refresh_preview()
        if self.initial_theme is not None:
            self.load_theme(self.initial_theme)
        else:
            self._set_status(f"Exports go to {self.output_dir}")

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        item = event.item
        if isinstance(item, TargetItem):
            self._focus_target(item)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        item = event.item
        if isinstance(item, TargetItem):
            self._focus_target(item)
        elif isinstance(item, PaletteItem):
            self.apply_color(item.color.hex)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        input_id = event.input.id
        if input_id == "color-input":
            self.apply_color(event.value.strip())
        elif input_id == "import-path":
            self.action_import_theme()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "theme-name":
            self.state.set_name(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "quit-studio":
            self.exit()
            return
        if button_id == "toggle-bold":
            self.action_toggle_bold()
            return
        if button_id == "toggle-italic":
            self.action_toggle_italic()
            return
        if button_id == "export-theme":
            self.action_export_theme()
            return
        if button_id == "import-theme":
            self.action_import_theme()

    def select_target(self, target_id: str) -> None:
        """Make ``target_id`` the target of color and style edits."""

        target_list = self.query_one("#target-list", ListView)
        for index, item in enumerate(self._target_list_items()):
            if item.target_id == target_id:
                target_list.index = index
                self._focus_target(item)
                return
        raise KeyError(f"Unknown theme target '{target_id}'")

    def apply_color(self, value: str) -> None:
        """Assign ``value`` to the current target."""

        if not _HEX_COLOR.match(value):
            self._set_status(f"Not a 6-digit hex color: {value!r}")
            return
        color = value if value.startswith("#") else f"#{value}"
        if self._target_is_global():
            self.state.set_global(self.current_target, color)
        else:
            self.state.set_color(self.current_target, color)
        self.query_one("#color-input", Input).value = color
        self._refresh_targets()
        self._refresh_preview()
        self._set_status(
            f"{self.current_target} set to {color} ({color_name(color)})"
        )

    def action_toggle_bold(self) -> None:
        if self._target_is_global():
            self._set_status("Global colors have no emphasis.")
            return
        self.state.toggle_bold(self.current_target)
        self._refresh_targets()
        self._refresh_preview()

    def action_toggle_italic(self) -> None:
        if self._target_is_global():
            self._set_status("Global colors have no emphasis.")
            return
        self.state.toggle_italic(self.current_target)
        self._refresh_targets()
        self._refresh_preview()

    def action_export_theme(self) -> None:
        try:
            path = write_archive(self.state, self.output_dir, self.formats)
        except OSError as exc:
            self._set_status(f"Export failed: {exc}")
            return
        self._set_status(f"Exported {path}")

    def action_import_theme(self) -> None:
        raw_path = self.query_one("#import-path", Input).value.strip()
        if not raw_path:
            self._set_status("Enter a theme file path to import.")
            return
        self.load_theme(Path(raw_path))

    def load_theme(self, path: Path) -> None:
        """Replace the current theme with the one stored at ``path``."""

        try:
            result = import_path(path, self.state, self.formats)
        except ThemeFormatError as exc:
            LOGGER.warning("Import of %s failed: %s", path, exc)
            self._set_status(f"Import failed: {exc}")
            return
        self.query_one("#theme-name", Input).value = self.state.get_name()
        self._refresh_targets()
        self._refresh_preview()
        self._set_status(f"Imported {result.source} ({result.format_key})")

    def _focus_target(self, item: TargetItem) -> None:
        self.current_target = item.target_id
        if item.is_global:
            color = self.state.get_global(item.target_id)
        else:
            color = self.state.get(item.target_id).color
        self.query_one("#color-input", Input).value = color

    def _target_is_global(self) -> bool:
        return any(
            setting.id == self.current_target for setting in GLOBAL_SETTINGS
        )

    def _target_items(self) -> list[TargetItem]:
        items = [
            TargetItem(setting.id, setting.label, is_global=True)
            for setting in GLOBAL_SETTINGS
        ]
        items.extend(
            TargetItem(category.id, category.label, is_global=False)
            for category in list_categories()
        )
        return items

    def _palette_items(self) -> list[PaletteItem]:
        return [
            PaletteItem(group, color)
            for group, colors in palette_groups()
            for color in colors
        ]

    def _target_list_items(self) -> list[TargetItem]:
        return list(self.query(TargetItem))

    def _refresh_targets(self) -> None:
        for item in self._target_list_items():
            item.show(self.state)

    def _refresh_preview(self) -> None:
        preview = self.query_one("#preview", Static)
        preview.update(build_syntax(self.state))

    def _set_status(self, message: str) -> None:
        self.last_status = message
        status = self.query_one("#status", Static)
        status.update(message)


def run(
    *,
    output_dir: Path,
    formats: Optional[Sequence[ThemeFormat]] = None,
    initial_theme: Optional[Path] = None,
) -> int:
    """Run the interactive theme studio."""

    app = ThemeStudio(
        output_dir=output_dir,
        formats=formats,
        initial_theme=initial_theme,
    )
    app.run()
    return 0
