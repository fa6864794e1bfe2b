from __future__ import annotations

from pathlib import Path

import pytest
from textual.widgets import Button, Input

from themesmith.formats import TmThemeFormat
from themesmith.model import ThemeState
from themesmith.ui.studio import TargetItem, ThemeStudio

SIZE = (160, 50)


def _write_theme(path: Path) -> ThemeState:
    state = ThemeState.default()
    state.set_name("Harbor")
    state.set_global("background", "#FDF8F2")
    state.set_color("comment", "#7A77AB")
    path.write_text(TmThemeFormat().serialize(state), encoding="utf-8")
    return state


@pytest.mark.asyncio
async def test_studio_lists_globals_then_categories(tmp_path: Path) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        items = list(app.query(TargetItem))

        assert [item.target_id for item in items[:3]] == [
            "background",
            "foreground",
            "keyword",
        ]
        assert len(items) == 14
        assert app.current_target == "background"


@pytest.mark.asyncio
async def test_apply_color_updates_state_and_reports_name(
    tmp_path: Path,
) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.select_target("string")
        app.apply_color("#5088C5")
        await pilot.pause()

        assert app.state.get("string").color == "#5088C5"
        assert app.state.get("string").emphasis.italic is True
        assert "aegean" in app.last_status
        assert app.query_one("#color-input", Input).value == "#5088C5"


@pytest.mark.asyncio
async def test_apply_color_adds_hash_and_rejects_garbage(
    tmp_path: Path,
) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.select_target("background")
        app.apply_color("fdf8f2")

        assert app.state.background == "#fdf8f2"

        app.apply_color("red")

        assert app.state.background == "#fdf8f2"
        assert "Not a 6-digit hex color" in app.last_status


@pytest.mark.asyncio
async def test_emphasis_toggles_apply_to_categories_only(
    tmp_path: Path,
) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.select_target("keyword")
        app.action_toggle_bold()
        app.action_toggle_italic()

        emphasis = app.state.get("keyword").emphasis
        assert emphasis.bold is True
        assert emphasis.italic is True

        app.select_target("foreground")
        before = app.state.copy()
        app.action_toggle_bold()

        assert app.state == before
        assert app.last_status == "Global colors have no emphasis."


@pytest.mark.asyncio
async def test_select_unknown_target_raises(tmp_path: Path) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        with pytest.raises(KeyError):
            app.select_target("markup")


@pytest.mark.asyncio
async def test_export_writes_archive_named_after_theme(tmp_path: Path) -> None:
    out_dir = tmp_path / "exports"
    app = ThemeStudio(output_dir=out_dir)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.query_one("#theme-name", Input).value = "Dune"
        await pilot.pause()
        app.query_one("#export-theme", Button).press()
        await pilot.pause()

        assert app.state.get_name() == "Dune"
        assert (out_dir / "Dune.zip").exists()
        assert app.last_status == f"Exported {out_dir / 'Dune.zip'}"


@pytest.mark.asyncio
async def test_import_replaces_theme_and_name(tmp_path: Path) -> None:
    source = tmp_path / "harbor.tmTheme"
    expected = _write_theme(source)
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.query_one("#import-path", Input).value = str(source)
        app.action_import_theme()
        await pilot.pause()

        assert app.state == expected
        assert app.query_one("#theme-name", Input).value == "Harbor"
        assert app.last_status == "Imported harbor.tmTheme (tmtheme)"


@pytest.mark.asyncio
async def test_failed_import_leaves_theme_unchanged(tmp_path: Path) -> None:
    source = tmp_path / "broken-vscode.json"
    source.write_text("{ not json", encoding="utf-8")
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.select_target("keyword")
        app.apply_color("#111111")
        before = app.state.copy()

        app.load_theme(source)
        await pilot.pause()

        assert app.state == before
        assert app.last_status.startswith("Import failed:")


@pytest.mark.asyncio
async def test_initial_theme_is_loaded_on_mount(tmp_path: Path) -> None:
    source = tmp_path / "harbor.tmTheme"
    expected = _write_theme(source)
    app = ThemeStudio(output_dir=tmp_path, initial_theme=source)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()

        assert app.state == expected


@pytest.mark.asyncio
async def test_quit_button_exits(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    app = ThemeStudio(output_dir=tmp_path)
    calls = []
    monkeypatch.setattr(app, "exit", lambda *args, **kwargs: calls.append(1))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.query_one("#quit-studio", Button).press()
        await pilot.pause()

        assert calls == [1]
        monkeypatch.undo()


@pytest.mark.asyncio
async def test_invalid_plist_value_is_reported_not_raised(
    tmp_path: Path,
) -> None:
    source = tmp_path / "dated.tmTheme"
    source.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<plist version="1.0"><dict>'
        "<key>name</key><date>x</date>"
        "</dict></plist>",
        encoding="utf-8",
    )
    app = ThemeStudio(output_dir=tmp_path)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.load_theme(source)
        await pilot.pause()

        assert app.state == ThemeState.default()
        assert app.last_status.startswith("Import failed:")
