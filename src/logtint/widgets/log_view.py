"""Log line display widget driven by the view state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from textual.strip import Strip
from textual.widget import Widget

from logtint.widgets.log_line import render_line_strip

if TYPE_CHECKING:
    from textual import events

    from logtint.models import LogLine
    from logtint.view_state import ViewState


class LogView(Widget):
    """Shows the window of filtered lines starting at the state's scroll offset.

    Scrolling is owned by ``ViewState``; this widget only paints what the
    state exposes and reports its height back on resize.
    """

    DEFAULT_CSS = """
    LogView {
        background: $surface;
        height: 1fr;
    }

    LogView > .logview--text {
        color: $text;
    }
    """

    COMPONENT_CLASSES: ClassVar[set[str]] = {
        "logview--text",
    }

    def __init__(self, state: ViewState, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._state = state
        self._window: list[LogLine] = []

    @property
    def viewport_height(self) -> int:
        return self.size.height

    def on_resize(self, event: events.Resize) -> None:
        self._state.set_viewport_height(event.size.height)
        self.refresh_window()

    def refresh_window(self) -> None:
        """Re-read the visible lines from the state and repaint."""
        self._window = self._state.visible_window()
        self.refresh()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        if width <= 0:
            return Strip.blank(0)
        if y >= len(self._window):
            return Strip.blank(width, self.rich_style)
        text_style = self.get_component_rich_style("logview--text")
        return render_line_strip(self._window[y], width, self.rich_style + text_style)
