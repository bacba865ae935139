"""Tests for proctop application."""

import io
import sys

import pytest
from textual.widgets import DataTable

from conftest import FakeProcessSource
from proctop.app import ProctopApp, ProcessTable, format_bytes, format_search, main
from proctop.controller import Mode
from proctop.theme import Palette


def test_format_bytes_bytes():
    """Test format_bytes with byte values."""
    assert "B" in format_bytes(500)


def test_format_bytes_kilobytes():
    """Test format_bytes with kilobyte values."""
    assert "K" in format_bytes(2048)


def test_format_bytes_megabytes():
    """Test format_bytes with megabyte values."""
    assert "M" in format_bytes(5242880)


def test_format_bytes_gigabytes():
    """Test format_bytes with gigabyte values."""
    assert "G" in format_bytes(1073741824)


def test_format_search_marks_caret():
    """Test the caret cell is wrapped in reverse markup."""
    assert format_search("abc", 1) == "Search: a[reverse]b[/reverse]c"
    assert format_search("abc", 3) == "Search: abc[reverse] [/reverse]"


def test_format_search_escapes_markup():
    """Test user text cannot inject markup."""
    assert "\\[bold]" in format_search("[bold]", 6)


def test_main_fails_without_terminal(monkeypatch):
    """Test main exits with status 1 when not attached to a terminal."""
    monkeypatch.setattr(sys, "stdin", io.StringIO())

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 1


@pytest.mark.asyncio
async def test_app_creation(fake_source):
    """Test ProctopApp can be instantiated."""
    app = ProctopApp(fake_source)
    assert app.title == "proctop"
    assert app.controller.mode is Mode.BROWSING


@pytest.mark.asyncio
async def test_app_loads_snapshot_on_mount(fake_source):
    """Test the table shows the sorted snapshot once mounted."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        table = pilot.app.query_one("#process-table", DataTable)

        assert table.row_count == 3
        assert [col.label.plain for col in table.columns.values()] == [
            "NAME",
            "PID",
            "CPU USAGE",
            "MEMORY",
        ]
        assert table.get_row_at(0)[1] == "1"
        assert table.cursor_row == 0


@pytest.mark.asyncio
async def test_app_quit_binding(fake_source):
    """Test that 'q' quits with status 0."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        await pilot.press("q")
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_app_navigation_moves_cursor(fake_source):
    """Test k and j move the table cursor through the controller."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        table = pilot.app.query_one("#process-table", DataTable)

        await pilot.press("k")
        assert app.controller.navigator.selected == 1
        assert table.cursor_row == 1

        await pilot.press("j", "j")
        assert app.controller.navigator.selected == 2
        assert table.cursor_row == 2


@pytest.mark.asyncio
async def test_app_search_flow(fake_source):
    """Test typing a search and submitting it filters the table."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        overlay = pilot.app.query_one("#search-overlay")
        assert not overlay.display

        await pilot.press("slash")
        assert app.controller.mode is Mode.SEARCHING
        assert overlay.display

        await pilot.press("a", "l", "p", "h", "a")
        assert app.controller.editor.text == "alpha"

        await pilot.press("enter")
        table = pilot.app.query_one("#process-table", DataTable)
        assert app.controller.mode is Mode.BROWSING
        assert not overlay.display
        assert table.row_count == 2
        assert [r.pid for r in app.controller.records] == [1, 3]


@pytest.mark.asyncio
async def test_app_q_types_while_searching(fake_source):
    """Test 'q' is search text, not quit, in search mode."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        await pilot.press("slash", "q")
        assert app.controller.editor.text == "q"
        assert app.return_code is None

        await pilot.press("escape")
        assert app.controller.mode is Mode.BROWSING


@pytest.mark.asyncio
async def test_app_kill_refreshes_table(fake_source):
    """Test d kills the selected process and reloads the table."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        await pilot.press("d")

        table = pilot.app.query_one(ProcessTable).query_one(DataTable)
        assert fake_source.terminated == [1]
        assert table.row_count == 2


@pytest.mark.asyncio
async def test_app_handles_empty_snapshot():
    """Test keys on an empty process list do not crash the app."""
    source = FakeProcessSource()
    app = ProctopApp(source)
    async with app.run_test() as pilot:
        await pilot.press("k", "j", "d", "r")
        assert source.terminated == []
        assert app.controller.navigator.selected is None


@pytest.mark.asyncio
async def test_app_palette_cycle(fake_source):
    """Test p switches the table palette."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        await pilot.press("p")

        assert app.controller.palette is Palette.EMERALD
        assert app.get_css_variables()["table-header-bg"] == Palette.EMERALD.value[0]


@pytest.mark.asyncio
async def test_app_click_selects_row_for_kill(fake_source):
    """Test a mouse click moves the selection, so d kills the highlighted row."""
    app = ProctopApp(fake_source)
    async with app.run_test() as pilot:
        table = pilot.app.query_one("#process-table", DataTable)

        # Header is line 0, so line 3 is the third process row
        await pilot.click("#process-table", offset=(3, 3))
        await pilot.pause()
        highlighted = int(table.get_row_at(table.cursor_row)[1])

        assert table.cursor_row == 2
        assert app.controller.navigator.selected == table.cursor_row

        await pilot.press("d")

        assert fake_source.terminated == [highlighted]
