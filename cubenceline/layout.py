"""Screen regions for the configurator."""

from __future__ import annotations

from dataclasses import dataclass

_HEADER_ROWS = 3
_CONTENT_MIN_ROWS = 10
_SEGMENT_LIST_PERCENT = 30


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must not be negative")


def _stack_rows(area: Rect, heights: list[int]) -> list[Rect]:
    rects = []
    y = area.y
    for height in heights:
        rects.append(Rect(area.x, y, area.width, height))
        y += height
    return rects


def main_layout(area: Rect) -> list[Rect]:
    """Split ``area`` into title, preview, style selector, content and help rows.

    Each fixed row is three lines high and the content row takes the rest,
    at least ten lines. When the area is too short, the content row keeps
    its minimum and the fixed rows are filled in order with what remains.
    """
    fixed_slots = 4
    fixed_total = fixed_slots * _HEADER_ROWS
    if area.height >= fixed_total + _CONTENT_MIN_ROWS:
        fixed = [_HEADER_ROWS] * fixed_slots
        content = area.height - fixed_total
    else:
        content = min(_CONTENT_MIN_ROWS, area.height)
        remaining = area.height - content
        fixed = []
        for _ in range(fixed_slots):
            share = min(_HEADER_ROWS, remaining)
            fixed.append(share)
            remaining -= share
    title, preview, style, help_row = fixed
    return _stack_rows(area, [title, preview, style, content, help_row])


def content_layout(area: Rect) -> list[Rect]:
    """Split ``area`` side by side: segment list (30%) and settings panel (70%)."""
    left = (area.width * _SEGMENT_LIST_PERCENT + 50) // 100
    right = area.width - left
    return [
        Rect(area.x, area.y, left, area.height),
        Rect(area.x + left, area.y, right, area.height),
    ]