"""Map key presses in the configurator to application events."""

from __future__ import annotations

from enum import Enum


class AppEvent(Enum):
    """High-level actions the configurator reacts to."""

    QUIT = "quit"
    SAVE = "save"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    EDIT = "edit"
    TOGGLE = "toggle"
    SWITCH_PANEL = "switch_panel"
    OPEN_COLOR_PICKER = "open_color_picker"
    OPEN_ICON_SELECTOR = "open_icon_selector"
    UNKNOWN = "unknown"


_CHAR_EVENTS = {
    "q": AppEvent.QUIT,
    "s": AppEvent.SAVE,
    " ": AppEvent.TOGGLE,
    "c": AppEvent.OPEN_COLOR_PICKER,
    "i": AppEvent.OPEN_ICON_SELECTOR,
}

_NAMED_EVENTS = {
    "up": AppEvent.MOVE_UP,
    "down": AppEvent.MOVE_DOWN,
    "enter": AppEvent.EDIT,
    "tab": AppEvent.SWITCH_PANEL,
}


def handle_key_event(key: str) -> AppEvent:
    """Translate a key into an event.

    A single character is matched exactly (so ``"Q"`` is not ``"q"``);
    longer strings are key names such as ``"up"`` or ``"Enter"`` and are
    matched without regard to case.
    """
    if len(key) == 1:
        return _CHAR_EVENTS.get(key, AppEvent.UNKNOWN)
    return _NAMED_EVENTS.get(key.lower(), AppEvent.UNKNOWN)