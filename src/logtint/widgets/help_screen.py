"""Help screen showing all keyboard shortcuts."""

from __future__ import annotations

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import BindingType
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

HELP_TEXT = """\
[bold]Navigation[/bold]
  Up/Down       Scroll one line
  PgUp/PgDn     Scroll one page
  Space         Scroll one page down

[bold]Filtering[/bold]
  /             Start typing a regex filter
  Enter         Apply the filter and save it to history
  Escape        Cancel editing and show all lines
  Backspace     Delete the last character
  1-9           Re-apply a saved filter
  0             Show all lines

  Filters match the raw line, escape codes included.
  Invalid patterns are ignored.

[bold]General[/bold]
  ?             Show this help
  q             Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 64;
        height: 80%;
        max-height: 24;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("q", "dismiss_help", "Close"),
        ("question_mark", "dismiss_help", "Close"),
    ]

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
