"""State of the icon selector popup: emoji, Nerd Font glyphs or custom text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IconStyle(Enum):
    """Which icon family the selector lists."""

    PLAIN = "plain"
    NERD_FONT = "nerd_font"


@dataclass(frozen=True)
class IconInfo:
    """An icon and the name shown next to it."""

    icon: str
    name: str

    @property
    def label(self) -> str:
        """The list entry text: icon followed by its name."""
        return f"{self.icon} {self.name}"


_PLAIN_ICONS = (
    IconInfo("🤖", "Robot (Model)"),
    IconInfo("💻", "Laptop (Computer)"),
    IconInfo("🖥️", "Desktop"),
    IconInfo("⚙️", "Gear (Settings)"),
    IconInfo("📁", "Folder"),
    IconInfo("📂", "Open Folder"),
    IconInfo("🗿", "Card Index"),
    IconInfo("📊", "Bar Chart"),
    IconInfo("🌿", "Branch (Git)"),
    IconInfo("🌱", "Seedling"),
    IconInfo("🔧", "Wrench"),
    IconInfo("⚡", "Lightning (Usage)"),
    IconInfo("⭐", "Star"),
    IconInfo("✨", "Sparkles"),
    IconInfo("🔥", "Fire"),
    IconInfo("💎", "Gem"),
    IconInfo("✓", "Check Mark"),
    IconInfo("✗", "X Mark"),
    IconInfo("●", "Circle (Dirty)"),
    IconInfo("○", "Open Circle"),
    IconInfo("▶", "Play"),
    IconInfo("▼", "Down Triangle"),
    IconInfo("►", "Right Triangle"),
    IconInfo("◄", "Left Triangle"),
)

_NERD_FONT_ICONS = (
    IconInfo("\ue26d", "Robot (Model)"),
    IconInfo("\U000f02a2", "Git Branch"),
    IconInfo("\U000f024b", "Folder"),
    IconInfo("\uf111", "Circle"),
    IconInfo("\uf135", "Rocket"),
    IconInfo("\uf49b", "Chart"),
    IconInfo("\uf0c6", "Database"),
    IconInfo("\uf0c9", "List"),
    IconInfo("\uf013", "Cog"),
    IconInfo("\uf015", "Home"),
    IconInfo("\uf07b", "Folder Open"),
    IconInfo("\uf0e7", "Lightning"),
    IconInfo("\uf121", "Code"),
    IconInfo("\uf126", "Code Fork"),
    IconInfo("\uf1c0", "Database"),
    IconInfo("\uf251", "Headphones"),
    IconInfo("\uf252", "Terminal"),
    IconInfo("\uf269", "Map"),
    IconInfo("\uf2d0", "Chrome"),
    IconInfo("\uf31b", "Github"),
)

_STYLE_MODES = {
    "plain": IconStyle.PLAIN,
    "nerd_font": IconStyle.NERD_FONT,
    "nerdfont": IconStyle.NERD_FONT,
    "powerline": IconStyle.NERD_FONT,
}


def plain_icons() -> tuple[IconInfo, ...]:
    """Emoji and plain-text icons offered by the selector."""
    return _PLAIN_ICONS


def nerd_font_icons() -> tuple[IconInfo, ...]:
    """Nerd Font glyphs offered by the selector."""
    return _NERD_FONT_ICONS


def _icon_style_for(style_mode: object) -> IconStyle:
    key = style_mode.value if isinstance(style_mode, Enum) else style_mode
    normalized = str(key).lower().replace("-", "_")
    try:
        return _STYLE_MODES[normalized]
    except KeyError:
        raise ValueError(f"unknown style mode: {style_mode!r}") from None


def _follow(selected: int, offset: int, view_height: int) -> int:
    view = max(view_height, 1)
    if selected >= offset + view:
        return selected + 1 - view
    if selected < offset:
        return selected
    return offset


@dataclass
class IconSelector:
    """Selection state of the icon selector."""

    is_open: bool = False
    icon_style: IconStyle = IconStyle.PLAIN
    selected_plain: int = 0
    selected_nerd: int = 0
    custom_input: str = ""
    editing_custom: bool = False
    current_icon: str | None = None
    plain_offset: int = 0
    nerd_offset: int = 0

    @property
    def selected_icon(self) -> str | None:
        """The icon the selector would return if confirmed now."""
        return self.current_icon

    @property
    def icons(self) -> tuple[IconInfo, ...]:
        """Icons of the family currently shown."""
        return _PLAIN_ICONS if self.icon_style is IconStyle.PLAIN else _NERD_FONT_ICONS

    def open(self, style_mode: object) -> None:
        """Open the popup on the icon family matching a style mode.

        ``style_mode`` is ``"plain"``, ``"nerd_font"`` or ``"powerline"``
        (or an enum whose value is one of these).
        """
        self.icon_style = _icon_style_for(style_mode)
        self.is_open = True
        self._update_current_icon()

    def close(self) -> None:
        self.is_open = False
        self.editing_custom = False

    def toggle_style(self) -> None:
        self.icon_style = (
            IconStyle.NERD_FONT if self.icon_style is IconStyle.PLAIN else IconStyle.PLAIN
        )
        self._update_current_icon()

    def start_custom_input(self) -> None:
        self.editing_custom = True
        self.custom_input = ""

    def finish_custom_input(self) -> None:
        """Leave custom entry; a non-empty entry becomes the current icon."""
        self.editing_custom = False
        if self.custom_input:
            self.current_icon = self.custom_input

    def input_char(self, c: str) -> None:
        if self.editing_custom:
            self.custom_input += c

    def backspace(self) -> None:
        if self.editing_custom:
            self.custom_input = self.custom_input[:-1]

    def move_selection(self, delta: int) -> None:
        """Move through the current list, clamped to its ends."""
        if self.editing_custom:
            return
        last = len(self.icons) - 1
        if self.icon_style is IconStyle.PLAIN:
            self.selected_plain = max(0, min(self.selected_plain + delta, last))
        else:
            self.selected_nerd = max(0, min(self.selected_nerd + delta, last))
        self._update_current_icon()

    def scroll_offset(self, view_height: int) -> int:
        """Scroll the current list so the selection is visible; return the first row shown."""
        if self.icon_style is IconStyle.PLAIN:
            self.plain_offset = _follow(self.selected_plain, self.plain_offset, view_height)
            return self.plain_offset
        self.nerd_offset = _follow(self.selected_nerd, self.nerd_offset, view_height)
        return self.nerd_offset

    def _update_current_icon(self) -> None:
        index = self.selected_plain if self.icon_style is IconStyle.PLAIN else self.selected_nerd
        icons = self.icons
        if 0 <= index < len(icons):
            self.current_icon = icons[index].icon