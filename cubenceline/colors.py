"""Colour values used by segments, colour names and popup placement."""

from __future__ import annotations

from dataclasses import dataclass

from .layout import Rect

_COLOR_NAMES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "Gray",
)


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Color16:
    """One of the basic ANSI colours, by index."""

    c16: int

    def __post_init__(self) -> None:
        _check_byte("c16", self.c16)


@dataclass(frozen=True)
class Color256:
    """A colour from the 256-colour palette, by index."""

    c256: int

    def __post_init__(self) -> None:
        _check_byte("c256", self.c256)


@dataclass(frozen=True)
class RgbColor:
    """A true-colour value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("r", self.r)
        _check_byte("g", self.g)
        _check_byte("b", self.b)


def color_name(index: int) -> str:
    """Name of a basic ANSI colour, or ``"Unknown"`` outside 0-15."""
    if 0 <= index < len(_COLOR_NAMES):
        return _COLOR_NAMES[index]
    return "Unknown"


def _percent_span(start: int, total: int, percent: int) -> tuple[int, int]:
    margin = (100 - percent) // 2
    offset = (total * margin + 50) // 100
    size = min((total * percent + 50) // 100, total - offset)
    return start + offset, size


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rectangle taking the given percentages of ``area``, centred in it."""
    for value in (percent_x, percent_y):
        if not 0 <= value <= 100:
            raise ValueError(f"percentage must be between 0 and 100, got {value}")
    x, width = _percent_span(area.x, area.width, percent_x)
    y, height = _percent_span(area.y, area.height, percent_y)
    return Rect(x, y, width, height)