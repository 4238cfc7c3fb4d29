"""How segment colours are described and shown in the settings panel."""

from __future__ import annotations

import re

from .colors import Color16, Color256, RgbColor, color_name

_BASIC_COUNT = 16
_FALLBACK_COLOR = "White"

TerminalColor = str | int | tuple[int, int, int]


def _spaced(name: str) -> str:
    return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", name)


def describe_color(color: Color16 | Color256 | RgbColor | None, default: str = "Default") -> str:
    """Human-readable description of a colour setting.

    Basic colours are named ("Light Red"), palette colours read ``256:<n>``,
    true colours ``RGB(r,g,b)``; an unset colour is described by ``default``.
    """
    if color is None:
        return default
    if isinstance(color, Color16):
        if color.c16 < _BASIC_COUNT:
            return _spaced(color_name(color.c16))
        return f"ANSI {color.c16}"
    if isinstance(color, Color256):
        return f"256:{color.c256}"
    if isinstance(color, RgbColor):
        return f"RGB({color.r},{color.g},{color.b})"
    raise TypeError(f"not a colour: {color!r}")


def terminal_color(color: Color16 | Color256 | RgbColor | None) -> TerminalColor:
    """The colour used to draw a swatch of ``color`` in the terminal.

    A basic colour becomes its name, a palette colour its index and a true
    colour an ``(r, g, b)`` tuple. Unset colours and basic indexes beyond
    the sixteen named ones are drawn white.
    """
    if color is None:
        return _FALLBACK_COLOR
    if isinstance(color, Color16):
        if color.c16 < _BASIC_COUNT:
            return color_name(color.c16)
        return _FALLBACK_COLOR
    if isinstance(color, Color256):
        return color.c256
    if isinstance(color, RgbColor):
        return (color.r, color.g, color.b)
    raise TypeError(f"not a colour: {color!r}")