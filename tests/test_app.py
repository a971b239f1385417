"""Tests for the Textual application."""

from __future__ import annotations

import pytest

from logtint.app import LogTintApp
from logtint.models import LogLine
from logtint.widgets.header_bar import HeaderBar
from logtint.widgets.help_screen import HelpScreen
from logtint.widgets.log_view import LogView


class TestLogTintApp:
    @pytest.mark.asyncio
    async def test_filter_and_recall(self, sample_lines: list[LogLine]) -> None:
        app = LogTintApp(lines=sample_lines, source="test.log")
        async with app.run_test(size=(80, 20)) as pilot:
            header = app.query_one("#header-bar", HeaderBar)
            assert header.render().plain == "Log Viewer - Searches: "

            await pilot.press("slash", "W", "A", "R", "N")
            assert app.state.is_editing_filter is True
            assert header.render().plain == "Search: WARN_"

            await pilot.press("enter")
            assert app.state.is_editing_filter is False
            assert [line.line_number for line in app.state.filtered_view()] == [4]
            assert header.render().plain == "Log Viewer - Searches: [1:'WARN'] "

            await pilot.press("0")
            assert app.state.compiled_filter is None
            await pilot.press("1")
            assert app.state.filter_pattern == "WARN"

    @pytest.mark.asyncio
    async def test_log_view_tracks_height(self, sample_lines: list[LogLine]) -> None:
        app = LogTintApp(lines=sample_lines)
        async with app.run_test(size=(80, 12)) as pilot:
            await pilot.pause()
            log_view = app.query_one("#log-view", LogView)
            assert log_view.viewport_height == 10
            assert app.state.viewport_height == 10

    @pytest.mark.asyncio
    async def test_help_and_quit(self, sample_lines: list[LogLine]) -> None:
        app = LogTintApp(lines=sample_lines)
        async with app.run_test() as pilot:
            await pilot.press("question_mark")
            assert isinstance(app.screen, HelpScreen)
            await pilot.press("escape")
            assert not isinstance(app.screen, HelpScreen)
            await pilot.press("q")
        assert app.return_code == 0
