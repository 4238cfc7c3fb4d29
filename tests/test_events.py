import pytest

from cubenceline.events import AppEvent, handle_key_event


@pytest.mark.parametrize(
    "key, expected",
    [
        ("q", AppEvent.QUIT),
        ("s", AppEvent.SAVE),
        ("up", AppEvent.MOVE_UP),
        ("down", AppEvent.MOVE_DOWN),
        ("enter", AppEvent.EDIT),
        (" ", AppEvent.TOGGLE),
        ("tab", AppEvent.SWITCH_PANEL),
        ("c", AppEvent.OPEN_COLOR_PICKER),
        ("i", AppEvent.OPEN_ICON_SELECTOR),
    ],
)
def test_known_keys(key, expected):
    assert handle_key_event(key) is expected


def test_named_keys_ignore_case():
    assert handle_key_event("Up") is AppEvent.MOVE_UP
    assert handle_key_event("ENTER") is AppEvent.EDIT


@pytest.mark.parametrize("key", ["Q", "x", "esc", "left", "1"])
def test_unmapped_keys_are_unknown(key):
    assert handle_key_event(key) is AppEvent.UNKNOWN