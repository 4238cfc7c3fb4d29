"""Pickers, dialogs, menu, help and layout state for a status line configurator."""

__version__ = "1.1.3"