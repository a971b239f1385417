"""Bottom status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget


class StatusBar(Widget):
    """Bottom status bar showing line counts, scroll position and source."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: #264f78;
        color: #ffffff;
        padding: 0 1;
    }
    """

    def __init__(self, source: str = "", id: str | None = None) -> None:
        super().__init__(id=id)
        self._total: int = 0
        self._filtered: int | None = None
        self._first_visible: int = 0
        self._source = source

    def update_counts(self, total: int, filtered: int | None = None, first_visible: int = 0) -> None:
        """Update the line counts and the index of the first visible line."""
        self._total = total
        self._filtered = filtered
        self._first_visible = first_visible
        self.refresh()

    def render(self) -> Text:
        text = Text()

        if self._filtered is not None:
            text.append(f"{self._filtered} of {self._total} lines")
            shown = self._filtered
        else:
            text.append(f"{self._total} lines")
            shown = self._total

        if shown:
            text.append(f"  @{self._first_visible + 1}", style="bold")

        right_part = self._source
        if right_part:
            used = len(text.plain)
            padding = max(1, self.size.width - used - len(right_part) - 2)
            text.append(" " * padding)
            text.append(right_part)

        return text
