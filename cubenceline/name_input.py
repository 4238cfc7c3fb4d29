"""State of the popup that asks for a name."""

from __future__ import annotations

from dataclasses import dataclass

from .layout import Rect

_POPUP_MAX_WIDTH = 60
_POPUP_HEIGHT = 8
_HELP_RESERVE = 4
_MIN_TOP = 2


@dataclass
class NameInput:
    """A single-line name field accepting letters, digits, ``_`` and ``-``."""

    is_open: bool = False
    input: str = ""
    title: str = "Input Name"
    placeholder: str = "Enter name..."

    def open(self, title: str, placeholder: str) -> None:
        self.is_open = True
        self.input = ""
        self.title = title
        self.placeholder = placeholder

    def close(self) -> None:
        self.is_open = False
        self.input = ""

    def input_char(self, c: str) -> None:
        if len(c) == 1 and ((c.isascii() and c.isalnum()) or c in "_-"):
            self.input += c

    def backspace(self) -> None:
        self.input = self.input[:-1]

    def result(self) -> str | None:
        """The entered name, trimmed, or ``None`` if nothing was entered."""
        text = self.input.strip()
        return text or None

    @property
    def display_text(self) -> str:
        """Contents of the input box: the name, or the placeholder when empty."""
        return f"> {self.input or self.placeholder} <"

    def popup_area(self, area: Rect) -> Rect:
        """Where the popup goes, keeping clear of the help rows at the bottom."""
        width = min(_POPUP_MAX_WIDTH, max(area.width - _HELP_RESERVE, 0))
        max_y = max(area.height - (_POPUP_HEIGHT + _HELP_RESERVE), 0)
        if max_y > _MIN_TOP:
            y = max(area.height - _POPUP_HEIGHT, 0) // 2
        else:
            y = _MIN_TOP
        return Rect(
            x=max(area.width - width, 0) // 2,
            y=min(y, max_y),
            width=width,
            height=_POPUP_HEIGHT,
        )