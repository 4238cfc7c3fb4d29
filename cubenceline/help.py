"""Key-binding help shown at the bottom of the configurator."""

from __future__ import annotations

_COLOR_PICKER_BINDINGS: dict[str, str] = {
    "[↑↓]": "Navigate",
    "[Tab]": "Mode",
    "[Enter]": "Select",
    "[Esc]": "Cancel",
}

_ICON_SELECTOR_BINDINGS: dict[str, str] = {
    "[↑↓]": "Navigate",
    "[Tab]": "Style",
    "[C]": "Custom",
    "[Enter]": "Select",
    "[Esc]": "Cancel",
}

_MAIN_BINDINGS: dict[str, str] = {
    "[Tab]": "Switch Panel",
    "[Enter]": "Toggle/Edit",
    "[Shift+↑↓]": "Reorder",
    "[1-4]": "Theme",
    "[P]": "Switch Theme",
    "[R]": "Reset",
    "[E]": "Edit Separator",
    "[S]": "Save Config",
    "[W]": "Write Theme",
    "[Ctrl+S]": "Save Theme",
    "[Esc]": "Quit",
}

_GAP = "  "


def help_items(color_picker_open: bool, icon_selector_open: bool) -> list[tuple[str, str]]:
    """The (key, description) pairs that apply to what is on screen."""
    if color_picker_open:
        bindings = _COLOR_PICKER_BINDINGS
    elif icon_selector_open:
        bindings = _ICON_SELECTOR_BINDINGS
    else:
        bindings = _MAIN_BINDINGS
    return list(bindings.items())


def _display_width(item: tuple[str, str]) -> int:
    key, description = item
    return len(key) + 1 + len(description)


def wrap_help(items: list[tuple[str, str]], width: int) -> list[list[tuple[str, str]]]:
    """Group items into lines of at most ``width`` columns, never splitting an item.

    Items on one line are separated by two spaces. An item wider than
    ``width`` gets a line to itself.
    """
    rows: list[list[tuple[str, str]]] = []
    row: list[tuple[str, str]] = []
    filled = 0
    for item in items:
        needed = _display_width(item) + (len(_GAP) if row else 0)
        if filled + needed <= width:
            row.append(item)
            filled += needed
            continue
        if row:
            rows.append(row)
        row = [item]
        filled = _display_width(item)
    if row:
        rows.append(row)
    return rows


def help_lines(
    width: int,
    status_message: str | None = None,
    color_picker_open: bool = False,
    icon_selector_open: bool = False,
) -> list[str]:
    """Text lines of the help box for a box ``width`` columns wide, borders included.

    A non-empty status message follows the key help after a blank line.
    """
    inner_width = max(width - 2, 0)
    rows = wrap_help(help_items(color_picker_open, icon_selector_open), inner_width)
    text = [_GAP.join(f"{key} {what}" for key, what in row) for row in rows]
    if status_message:
        text += ["", status_message]
    return text