import pytest

from cubenceline.layout import Rect
from cubenceline.name_input import NameInput


def _typed(text):
    field = NameInput()
    for ch in text:
        field.input_char(ch)
    return field


def test_defaults():
    field = NameInput()
    assert field.title == "Input Name"
    assert field.placeholder == "Enter name..."
    assert field.is_open is False


def test_open_sets_title_and_clears_input():
    field = _typed("abc")
    field.open("Save Theme", "theme name")
    assert field.is_open
    assert field.input == ""
    assert field.title == "Save Theme"
    assert field.placeholder == "theme name"


def test_close_clears_input():
    field = _typed("abc")
    field.is_open = True
    field.close()
    assert field.is_open is False
    assert field.input == ""


def test_only_allowed_characters_kept():
    field = _typed("my theme!_v-2/é")
    assert field.input == "mytheme_v-2"


def test_backspace():
    field = _typed("ab")
    field.backspace()
    assert field.input == "a"
    field.backspace()
    field.backspace()
    assert field.input == ""


def test_result_empty_is_none():
    assert NameInput().result() is None


def test_result_returns_text():
    assert _typed("dark-2").result() == "dark-2"


def test_display_text_placeholder_then_input():
    field = NameInput()
    assert field.display_text == "> Enter name... <"
    field.input_char("x")
    assert field.display_text == "> x <"


@pytest.mark.parametrize("width,height", [(100, 40), (80, 24), (10, 10), (3, 3), (61, 13)])
def test_popup_area_invariants(width, height):
    area = NameInput().popup_area(Rect(0, 0, width, height))
    assert area.height == 8
    assert area.width <= 60
    assert area.width <= width
    assert area.x + area.width <= width
    assert area.y <= max(height - 12, 0)


def test_popup_area_centred_horizontally():
    area = NameInput().popup_area(Rect(0, 0, 100, 40))
    assert area.width == 60
    assert area.x * 2 + area.width == 100