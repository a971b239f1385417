"""Header bar showing the search buffer or saved patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

if TYPE_CHECKING:
    from logtint.view_state import ViewState


class HeaderBar(Widget):
    """One-line header above the log view."""

    DEFAULT_CSS = """
    HeaderBar {
        height: 1;
        dock: top;
        background: $surface-darken-1;
    }

    HeaderBar.editing {
        background: $accent-darken-2;
    }
    """

    editing: reactive[bool] = reactive(False)
    pattern: reactive[str] = reactive("")
    summary: reactive[str] = reactive("")

    def update_from_state(self, state: ViewState) -> None:
        """Mirror the parts of the state the header displays."""
        self.editing = state.is_editing_filter
        self.pattern = state.filter_pattern
        self.summary = state.status_text()
        self.set_class(state.is_editing_filter, "editing")

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        if self.editing:
            text.append("Search: ", style="bold")
            text.append(f"{self.pattern}_")
        else:
            text.append("Log Viewer", style="bold")
            text.append(f" - {self.summary}")
        return text
