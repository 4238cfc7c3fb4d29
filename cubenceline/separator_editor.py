"""State of the popup that edits the separator between segments."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SeparatorPreset:
    """A ready-made separator offered in the editor."""

    name: str
    value: str
    description: str


_DEFAULT_PRESETS = (
    SeparatorPreset("Pipe", " | ", "Classic pipe separator"),
    SeparatorPreset("Thin", " │ ", "Thin vertical line"),
    SeparatorPreset("Arrow", "\ue0b0", "Powerline arrow (seamless transition)"),
    SeparatorPreset("Space", "  ", "Double space"),
    SeparatorPreset("Dot", " • ", "Middle dot"),
)


def default_presets() -> list[SeparatorPreset]:
    """The presets the editor offers, in display order."""
    return list(_DEFAULT_PRESETS)


def _is_control(c: str) -> bool:
    return unicodedata.category(c) == "Cc"


@dataclass
class SeparatorEditor:
    """Free-text separator entry with a list of presets to pick from."""

    is_open: bool = False
    input: str = ""
    presets: list[SeparatorPreset] = field(default_factory=default_presets)
    selected_preset: int | None = None

    @property
    def separator(self) -> str:
        """The separator as currently entered."""
        return self.input

    def open(self, current: str) -> None:
        """Open on ``current``, marking the preset it matches, if any."""
        self.is_open = True
        self.input = current
        self.selected_preset = next(
            (i for i, preset in enumerate(self.presets) if preset.value == current),
            None,
        )

    def close(self) -> None:
        self.is_open = False
        self.input = ""
        self.selected_preset = None

    def input_char(self, c: str) -> None:
        """Append a printable character; manual editing clears the preset mark."""
        if len(c) == 1 and not _is_control(c):
            self.input += c
            self.selected_preset = None

    def backspace(self) -> None:
        self.input = self.input[:-1]
        self.selected_preset = None

    def move_preset_selection(self, delta: int) -> None:
        """Step through the presets, clamped to the ends, and take the chosen value.

        With no preset marked, a positive step picks the first one and any
        other step picks the last.
        """
        if not self.presets:
            return
        last = len(self.presets) - 1
        if self.selected_preset is not None:
            index = max(0, min(self.selected_preset + delta, last))
        elif delta > 0:
            index = 0
        else:
            index = last
        self.selected_preset = index
        self.input = self.presets[index].value

    def preset_lines(self) -> list[str]:
        """One line per preset with a marker showing which one is selected."""
        return [
            f"{'[•]' if i == self.selected_preset else '[ ]'} {preset.name} - {preset.description}"
            for i, preset in enumerate(self.presets)
        ]

    @property
    def display_text(self) -> str:
        """Contents of the input box."""
        return f"> {self.input} <"