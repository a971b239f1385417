"""Key dispatch: map key events onto view state mutations."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logtint.view_state import ViewState


class KeyOutcome(StrEnum):
    """What the caller should do after a key was dispatched."""

    IGNORED = "ignored"
    UPDATED = "updated"
    QUIT = "quit"
    HELP = "help"


def _handle_scroll(state: ViewState, key: str, viewport_height: int) -> bool:
    """Arrow and page keys scroll in both modes."""
    if key == "up":
        state.scroll_up()
    elif key == "down":
        state.scroll_down(viewport_height)
    elif key == "pageup":
        state.page_up(viewport_height)
    elif key == "pagedown":
        state.page_down(viewport_height)
    else:
        return False
    return True


def _handle_editing(state: ViewState, key: str, character: str | None) -> KeyOutcome:
    if key == "enter":
        state.confirm_filter_edit()
    elif key == "escape":
        state.cancel_filter_edit()
    elif key == "backspace":
        state.backspace_filter_char()
    elif character:
        state.append_filter_char(character)
    else:
        return KeyOutcome.IGNORED
    return KeyOutcome.UPDATED


def _handle_browsing(state: ViewState, key: str, character: str | None, viewport_height: int) -> KeyOutcome:
    if key == "space":
        state.page_down(viewport_height)
        return KeyOutcome.UPDATED
    if character == "q":
        return KeyOutcome.QUIT
    if character == "?":
        return KeyOutcome.HELP
    if character == "/":
        state.begin_filter_edit()
        return KeyOutcome.UPDATED
    if character is not None and len(character) == 1 and character in "0123456789":
        state.recall_history_slot(int(character))
        return KeyOutcome.UPDATED
    return KeyOutcome.IGNORED


def handle_key(state: ViewState, key: str, character: str | None, viewport_height: int) -> KeyOutcome:
    """Apply one key event to the state.

    ``key`` is the Textual key name (``"up"``, ``"enter"``, ``"a"``...) and
    ``character`` the printable character it produced, or None.
    """
    if _handle_scroll(state, key, viewport_height):
        return KeyOutcome.UPDATED
    if state.is_editing_filter:
        return _handle_editing(state, key, character)
    return _handle_browsing(state, key, character, viewport_height)
