"""State of the colour picker popup: basic, 256-colour and RGB entry."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum

from .colors import Color16, Color256, RgbColor, color_name

_BASIC_COUNT = 16
_EXTENDED_COUNT = 256
_BASIC_CELL_WIDTH = 6
_EXTENDED_CELL_WIDTH = 7
_MAX_DECIMAL_DIGITS = 3
_MAX_HEX_DIGITS = 6


class NavDirection(Enum):
    """Arrow-key directions inside the colour grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ColorPickerMode(Enum):
    """Which palette the picker currently shows."""

    BASIC16 = "basic16"
    EXTENDED256 = "extended256"
    RGB_INPUT = "rgb_input"


class RgbField(Enum):
    """Input fields of the RGB entry mode, in display order."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HEX = "hex"


_FIELD_ORDER = list(RgbField)

_MODE_CYCLE = {
    ColorPickerMode.BASIC16: ColorPickerMode.EXTENDED256,
    ColorPickerMode.EXTENDED256: ColorPickerMode.RGB_INPUT,
    ColorPickerMode.RGB_INPUT: ColorPickerMode.BASIC16,
}


@dataclass
class RgbInput:
    """Text typed into the RGB and hex fields."""

    r: str = ""
    g: str = ""
    b: str = ""
    hex: str = ""
    editing_field: RgbField = RgbField.RED


def _parse_byte(text: str) -> int | None:
    if not text or not text.isdigit():
        return None
    value = int(text)
    return value if value <= 255 else None


def _grid_move(selected: int, cols: int, count: int, direction: NavDirection) -> int:
    last = count - 1
    row, col = divmod(selected, cols)
    if direction is NavDirection.UP:
        return min((row - 1) * cols + col, last) if row > 0 else selected
    if direction is NavDirection.DOWN:
        total_rows = -(-count // cols)
        return min((row + 1) * cols + col, last) if row + 1 < total_rows else selected
    if direction is NavDirection.LEFT:
        return selected - 1 if selected > 0 else last
    return selected + 1 if selected < last else 0


@dataclass
class ColorPicker:
    """Selection state of the colour picker."""

    is_open: bool = False
    mode: ColorPickerMode = ColorPickerMode.BASIC16
    selected_basic: int = 0
    selected_extended: int = 0
    rgb_input: RgbInput = field(default_factory=RgbInput)
    current_color: Color16 | Color256 | RgbColor | None = None
    show_extended: bool = False
    cached_basic_cols: int = 4
    cached_extended_cols: int = 16

    @property
    def selected_color(self) -> Color16 | Color256 | RgbColor | None:
        """The colour the picker would return if confirmed now."""
        return self.current_color

    def open(self) -> None:
        self.is_open = True
        self.mode = ColorPickerMode.BASIC16
        self.selected_basic = 0

    def close(self) -> None:
        self.is_open = False

    def toggle_extended(self) -> None:
        self.show_extended = not self.show_extended
        self.mode = ColorPickerMode.EXTENDED256 if self.show_extended else ColorPickerMode.BASIC16

    def switch_to_rgb(self) -> None:
        self.mode = ColorPickerMode.RGB_INPUT

    def cycle_mode(self) -> None:
        """Advance basic -> extended -> RGB -> basic."""
        self.mode = _MODE_CYCLE[self.mode]
        self.show_extended = self.mode is ColorPickerMode.EXTENDED256

    def move_selection(self, delta: int) -> None:
        """Move the selection linearly; in RGB mode, step between fields."""
        if self.mode is ColorPickerMode.BASIC16:
            self._select_basic(max(0, min(self.selected_basic + delta, _BASIC_COUNT - 1)))
        elif self.mode is ColorPickerMode.EXTENDED256:
            self._select_extended(
                max(0, min(self.selected_extended + delta, _EXTENDED_COUNT - 1))
            )
        else:
            position = _FIELD_ORDER.index(self.rgb_input.editing_field)
            if delta > 0 and position < len(_FIELD_ORDER) - 1:
                self.rgb_input.editing_field = _FIELD_ORDER[position + 1]
            elif delta < 0 and position > 0:
                self.rgb_input.editing_field = _FIELD_ORDER[position - 1]

    def move_direction(self, direction: NavDirection) -> None:
        """Move through the colour grid, or cycle RGB fields with left/right."""
        if self.mode is ColorPickerMode.BASIC16:
            self._select_basic(
                _grid_move(self.selected_basic, self.cached_basic_cols, _BASIC_COUNT, direction)
            )
        elif self.mode is ColorPickerMode.EXTENDED256:
            self._select_extended(
                _grid_move(
                    self.selected_extended,
                    self.cached_extended_cols,
                    _EXTENDED_COUNT,
                    direction,
                )
            )
        elif direction in (NavDirection.LEFT, NavDirection.RIGHT):
            step = 1 if direction is NavDirection.RIGHT else -1
            position = _FIELD_ORDER.index(self.rgb_input.editing_field)
            self.rgb_input.editing_field = _FIELD_ORDER[(position + step) % len(_FIELD_ORDER)]

    def input_char(self, c: str) -> None:
        """Type a character into the RGB field being edited."""
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        rgb = self.rgb_input
        current = rgb.editing_field
        if current is RgbField.HEX:
            if len(rgb.hex) < _MAX_HEX_DIGITS and len(c) == 1 and c in string.hexdigits:
                rgb.hex += c.upper()
        elif len(c) == 1 and c in string.digits:
            attr = {RgbField.RED: "r", RgbField.GREEN: "g", RgbField.BLUE: "b"}[current]
            value = getattr(rgb, attr)
            if len(value) < _MAX_DECIMAL_DIGITS:
                setattr(rgb, attr, value + c)
        self._update_rgb_color()

    def backspace(self) -> None:
        """Delete the last character of the RGB field being edited."""
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        attr = {
            RgbField.RED: "r",
            RgbField.GREEN: "g",
            RgbField.BLUE: "b",
            RgbField.HEX: "hex",
        }[self.rgb_input.editing_field]
        setattr(self.rgb_input, attr, getattr(self.rgb_input, attr)[:-1])
        self._update_rgb_color()

    def fit_basic_grid(self, width: int) -> int:
        """Columns of basic colours that fit in ``width``; remembered for navigation."""
        self.cached_basic_cols = max(width // _BASIC_CELL_WIDTH, 1)
        return self.cached_basic_cols

    def fit_extended_grid(self, width: int) -> int:
        """Columns of 256-palette colours that fit in ``width``; remembered for navigation."""
        self.cached_extended_cols = max(width // _EXTENDED_CELL_WIDTH, 1)
        return self.cached_extended_cols

    def preview_text(self) -> str:
        """Line describing the current colour, as shown in the preview box."""
        color = self.current_color
        if isinstance(color, Color16):
            return f"████ Color 16: {color.c16} ({color_name(color.c16)})"
        if isinstance(color, Color256):
            return f"████ Color 256: {color.c256}"
        if isinstance(color, RgbColor):
            return f"████ RGB: ({color.r}, {color.g}, {color.b})"
        return "████ No color selected"

    def _select_basic(self, index: int) -> None:
        self.selected_basic = index
        self.current_color = Color16(index)

    def _select_extended(self, index: int) -> None:
        self.selected_extended = index
        self.current_color = Color256(index)

    def _update_rgb_color(self) -> None:
        hex_text = self.rgb_input.hex
        if len(hex_text) == _MAX_HEX_DIGITS:
            r, g, b = (int(hex_text[i : i + 2], 16) for i in (0, 2, 4))
            self.current_color = RgbColor(r, g, b)
            return
        values = [_parse_byte(v) for v in (self.rgb_input.r, self.rgb_input.g, self.rgb_input.b)]
        if None not in values:
            self.current_color = RgbColor(*values)