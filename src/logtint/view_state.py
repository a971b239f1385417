"""Filter, scroll and pattern history state for the log view."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from logtint.history import HISTORY_CAPACITY, PatternHistory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logtint.models import LogLine

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a user-entered regex, returning None if it is malformed."""
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.info("Ignoring invalid filter pattern %r: %s", pattern, e)
        return None


class ViewState:
    """State behind the log view: loaded lines, active filter, history and scroll.

    Filters match against ``LogLine.raw``, so escape codes are part of the
    searchable text. Every mutation keeps ``scroll_offset`` within
    ``[0, max(0, filtered_count - viewport_height)]``.
    """

    def __init__(
        self,
        lines: Sequence[LogLine],
        viewport_height: int = 0,
        history_capacity: int = HISTORY_CAPACITY,
    ) -> None:
        self._lines: tuple[LogLine, ...] = tuple(lines)
        self.filter_pattern: str = ""
        self.is_editing_filter: bool = False
        self._compiled_filter: re.Pattern[str] | None = None
        self.history = PatternHistory(history_capacity)
        self._scroll_offset: int = 0
        self._viewport_height: int = max(0, viewport_height)

    @property
    def lines(self) -> tuple[LogLine, ...]:
        return self._lines

    @property
    def compiled_filter(self) -> re.Pattern[str] | None:
        return self._compiled_filter

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @property
    def total_count(self) -> int:
        return len(self._lines)

    @property
    def filtered_count(self) -> int:
        return len(self.filtered_view())

    @property
    def has_filter(self) -> bool:
        return self._compiled_filter is not None

    # --- Queries ---

    def filtered_view(self) -> list[LogLine]:
        """Lines matching the active filter, in file order."""
        regex = self._compiled_filter
        if regex is None:
            return list(self._lines)
        return [line for line in self._lines if regex.search(line.raw)]

    def max_scroll(self, viewport_height: int | None = None) -> int:
        height = self._viewport_height if viewport_height is None else viewport_height
        return max(0, self.filtered_count - height)

    def visible_window(self, viewport_height: int | None = None) -> list[LogLine]:
        """Lines currently on screen, starting at the scroll offset."""
        height = self._viewport_height if viewport_height is None else max(0, viewport_height)
        start = self._scroll_offset
        return self.filtered_view()[start : start + height]

    def status_text(self) -> str:
        """Summary of saved patterns with their recall slots."""
        saved = "".join(f"[{i}:'{pattern}'] " for i, pattern in enumerate(self.history, start=1))
        return f"Searches: {saved}"

    # --- Filter editing ---

    def begin_filter_edit(self) -> None:
        self.is_editing_filter = True

    def append_filter_char(self, char: str) -> None:
        if self.is_editing_filter:
            self.filter_pattern += char

    def backspace_filter_char(self) -> None:
        if self.is_editing_filter and self.filter_pattern:
            self.filter_pattern = self.filter_pattern[:-1]

    def cancel_filter_edit(self) -> None:
        """Leave edit mode and drop the filter entirely."""
        if not self.is_editing_filter:
            return
        self.is_editing_filter = False
        self.filter_pattern = ""
        self._compiled_filter = None
        self._clamp_scroll()

    def confirm_filter_edit(self) -> None:
        """Leave edit mode and apply the edited pattern if it compiles.

        A malformed or empty pattern keeps the previous filter in place.
        """
        if not self.is_editing_filter:
            return
        self.is_editing_filter = False
        if not self.filter_pattern:
            return

        regex = compile_pattern(self.filter_pattern)
        if regex is None:
            return

        self._compiled_filter = regex
        if self.history.add(self.filter_pattern):
            logger.debug("Saved filter pattern %r to history", self.filter_pattern)
        self._clamp_scroll()

    def recall_history_slot(self, slot: int) -> None:
        """Apply a saved pattern by slot. Slot 0 clears the filter."""
        if self.is_editing_filter:
            return
        if slot == 0:
            self.filter_pattern = ""
            self._compiled_filter = None
            self._clamp_scroll()
            return

        pattern = self.history.recall(slot)
        if pattern is None:
            return

        self.filter_pattern = pattern
        regex = compile_pattern(pattern)
        if regex is not None:
            self._compiled_filter = regex
            logger.debug("Recalled filter pattern %r from slot %d", pattern, slot)
        self._clamp_scroll()

    # --- Scrolling ---

    def set_viewport_height(self, viewport_height: int) -> None:
        self._viewport_height = max(0, viewport_height)
        self._clamp_scroll()

    def scroll_up(self) -> None:
        self._scroll_offset = max(0, self._scroll_offset - 1)
        self._clamp_scroll()

    def scroll_down(self, viewport_height: int) -> None:
        self._viewport_height = max(0, viewport_height)
        self._scroll_offset = min(self._scroll_offset + 1, self.max_scroll())

    def page_up(self, viewport_height: int) -> None:
        self._viewport_height = max(0, viewport_height)
        self._scroll_offset = max(0, self._scroll_offset - self._viewport_height)
        self._clamp_scroll()

    def page_down(self, viewport_height: int) -> None:
        self._viewport_height = max(0, viewport_height)
        self._scroll_offset = min(self._scroll_offset + self._viewport_height, self.max_scroll())

    def _clamp_scroll(self) -> None:
        self._scroll_offset = max(0, min(self._scroll_offset, self.max_scroll()))
