"""State and key handling of the start-up menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

VERSION = "1.1.3"

_MENU_ITEMS = (
    (" Configuration Mode", "Enter TUI configuration interface"),
    (" Initialize Config", "Create default configuration"),
    (" Check Configuration", "Validate configuration file"),
    (" About", "Show application information"),
    (" Exit", "Exit CubenceLine"),
)

_ABOUT_INDEX = 3

_FEATURES = (
    "• 🎨 TUI Configuration Interface",
    "• 🎯 Multiple Built-in Themes",
    "• ⚡ Real-time Usage Tracking",
    "• 💰 Cost Monitoring",
    "• 📊 Session Statistics",
    "• 🎨 Nerd Font Support",
    "• 🔧 Highly Customizable",
)


class MenuResult(Enum):
    """What the user chose in the menu."""

    LAUNCH_CONFIGURATOR = "launch_configurator"
    INIT_CONFIG = "init_config"
    CHECK_CONFIG = "check_config"
    EXIT = "exit"


_SELECTIONS = {
    0: MenuResult.LAUNCH_CONFIGURATOR,
    1: MenuResult.INIT_CONFIG,
    2: MenuResult.CHECK_CONFIG,
}


@dataclass
class MainMenu:
    """Selection state of the start-up menu."""

    selected_item: int = 0
    should_quit: bool = False
    show_about: bool = False

    @property
    def items(self) -> list[tuple[str, str]]:
        """The (title, description) pairs of the menu, in order."""
        return list(_MENU_ITEMS)

    def handle_key(self, key: str) -> MenuResult | None:
        """React to a key press; return the menu's result once it ends.

        Keys are single characters or names such as ``"up"``, ``"down"``,
        ``"enter"`` and ``"esc"`` (names match without regard to case).
        While the about box is shown, any key only closes it.
        """
        if self.show_about:
            self.show_about = False
            return None
        name = key if len(key) == 1 else key.lower()
        if name in ("esc", "q"):
            self.should_quit = True
        elif name == "up":
            if self.selected_item > 0:
                self.selected_item -= 1
        elif name == "down":
            if self.selected_item < len(_MENU_ITEMS) - 1:
                self.selected_item += 1
        elif name == "enter":
            return self._select()
        return MenuResult.EXIT if self.should_quit else None

    def _select(self) -> MenuResult:
        if self.selected_item == _ABOUT_INDEX:
            # The about flag is raised, but the menu ends as with Exit.
            self.show_about = True
            return MenuResult.EXIT
        return _SELECTIONS.get(self.selected_item, MenuResult.EXIT)

    def header_lines(self) -> list[str]:
        """Text of the welcome box."""
        return [
            f"CubenceLine v{VERSION}",
            "",
            "High-performance Claude Code StatusLine Configuration",
        ]

    def about_lines(self) -> list[str]:
        """Text of the about box."""
        return [
            "",
            f"CubenceLine v{VERSION}",
            "",
            "Features:",
            *_FEATURES,
            "",
            "Press any key to continue...",
        ]