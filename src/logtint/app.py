"""Textual application for logtint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import App, ComposeResult
from textual.screen import Screen

from logtint.keys import KeyOutcome, handle_key
from logtint.models import AppConfig
from logtint.view_state import ViewState
from logtint.widgets.header_bar import HeaderBar
from logtint.widgets.help_screen import HelpScreen
from logtint.widgets.log_view import LogView
from logtint.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from textual import events

    from logtint.models import LogLine

logger = logging.getLogger(__name__)


class LogScreen(Screen[None]):
    """Main screen: header, log lines and status bar.

    All keys go through ``handle_key`` so that filter editing can capture any
    printable character. Keys pressed while a modal is open never reach here.
    """

    def __init__(self, state: ViewState, source: str = "") -> None:
        super().__init__()
        self._state = state
        self._source = source

    def compose(self) -> ComposeResult:
        yield HeaderBar(id="header-bar")
        yield LogView(self._state, id="log-view")
        yield StatusBar(source=self._source, id="status-bar")

    def on_mount(self) -> None:
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        log_view = self.query_one("#log-view", LogView)
        character = event.character if event.is_printable else None
        outcome = handle_key(self._state, event.key, character, log_view.viewport_height)

        if outcome == KeyOutcome.IGNORED:
            return
        event.stop()
        event.prevent_default()
        if outcome == KeyOutcome.QUIT:
            self.app.exit()
        elif outcome == KeyOutcome.HELP:
            self.app.push_screen(HelpScreen())
        else:
            self.refresh_view()

    def refresh_view(self) -> None:
        """Repaint every widget from the current state."""
        log_view = self.query_one("#log-view", LogView)
        header_bar = self.query_one("#header-bar", HeaderBar)
        status_bar = self.query_one("#status-bar", StatusBar)

        log_view.refresh_window()
        header_bar.update_from_state(self._state)
        if self._state.has_filter:
            status_bar.update_counts(self._state.total_count, self._state.filtered_count, self._state.scroll_offset)
        else:
            status_bar.update_counts(self._state.total_count, first_visible=self._state.scroll_offset)

    def on_resize(self) -> None:
        self.call_after_refresh(self.refresh_view)


class LogTintApp(App[None]):
    """ANSI log viewer TUI application."""

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        lines: list[LogLine] | None = None,
        source: str = "",
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self._state = ViewState(lines or [])
        self._source = source
        self._config = config or AppConfig()

    @property
    def state(self) -> ViewState:
        return self._state

    def get_default_screen(self) -> Screen[None]:
        return LogScreen(self._state, source=self._source)

    def on_mount(self) -> None:
        if self._config.theme in self.available_themes:
            self.theme = self._config.theme
        else:
            logger.warning("Unknown theme %r, keeping %r", self._config.theme, self.theme)
        logger.info("Starting viewer with %d lines from %s", self._state.total_count, self._source or "<none>")

    def on_unmount(self) -> None:
        logger.info("Exiting viewer")
