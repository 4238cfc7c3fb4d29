import pytest

from cubenceline.help import help_items, help_lines, wrap_help


def test_main_items():
    items = help_items(False, False)
    assert len(items) == 11
    assert items[0] == ("[Tab]", "Switch Panel")
    assert items[-1] == ("[Esc]", "Quit")


def test_color_picker_items_take_priority():
    items = help_items(True, True)
    assert items[1] == ("[Tab]", "Mode")
    assert len(items) == 4


def test_icon_selector_items():
    items = help_items(False, True)
    assert ("[C]", "Custom") in items
    assert items[1] == ("[Tab]", "Style")


@pytest.mark.parametrize("width", [0, 5, 20, 40, 80, 500])
def test_wrap_keeps_all_items_in_order(width):
    items = help_items(False, False)
    wrapped = wrap_help(items, width)
    assert [item for line in wrapped for item in line] == items


@pytest.mark.parametrize("width", [20, 40, 80])
def test_wrapped_lines_fit_width(width):
    for line in help_lines(width + 2):
        assert len(line) <= width


def test_wide_box_gives_single_line():
    items = help_items(False, False)
    assert len(wrap_help(items, 1000)) == 1


def test_narrow_box_gives_one_item_per_line():
    items = help_items(False, False)
    wrapped = wrap_help(items, 1)
    assert all(len(line) == 1 for line in wrapped)
    assert len(wrapped) == len(items)


def test_line_text_format():
    first = help_lines(1000)[0]
    assert first.startswith("[Tab] Switch Panel  [Enter] Toggle/Edit")
    assert first.endswith("[Esc] Quit")


def test_status_message_appended():
    lines = help_lines(80, "Saved")
    assert lines[-1] == "Saved"
    assert lines[-2] == ""


def test_no_status_for_empty_message():
    assert "" not in help_lines(80, "")
    assert help_lines(80, None) == help_lines(80)