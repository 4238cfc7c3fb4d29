import pytest

from cubenceline.colors import Color16, Color256, RgbColor, centered_rect, color_name
from cubenceline.layout import Rect


@pytest.mark.parametrize(
    "index, name",
    [(0, "Black"), (1, "Red"), (8, "DarkGray"), (14, "LightCyan"), (15, "Gray")],
)
def test_color_names(index, name):
    assert color_name(index) == name


@pytest.mark.parametrize("index", [16, 200, 255, -1])
def test_unknown_color_name(index):
    assert color_name(index) == "Unknown"


def test_color_values_compare_by_content():
    assert Color16(3) == Color16(3)
    assert Color256(200) == Color256(200)
    assert RgbColor(1, 2, 3) == RgbColor(1, 2, 3)
    assert Color16(3) != Color256(3)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Color16(256),
        lambda: Color256(-1),
        lambda: RgbColor(0, 300, 0),
        lambda: RgbColor(-5, 0, 0),
    ],
)
def test_out_of_range_color_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_centered_rect_size_on_even_area():
    area = Rect(0, 0, 100, 100)
    popup = centered_rect(70, 75, area)
    assert popup.width == 70
    assert popup.height == 75


@pytest.mark.parametrize(
    "area, px, py",
    [
        (Rect(0, 0, 100, 100), 70, 75),
        (Rect(3, 7, 81, 43), 60, 70),
        (Rect(0, 0, 10, 5), 70, 75),
        (Rect(5, 5, 0, 0), 50, 50),
    ],
)
def test_centered_rect_is_inside_and_centered(area, px, py):
    popup = centered_rect(px, py, area)
    assert area.x <= popup.x
    assert popup.x + popup.width <= area.x + area.width
    assert area.y <= popup.y
    assert popup.y + popup.height <= area.y + area.height
    left_gap = popup.x - area.x
    right_gap = area.x + area.width - (popup.x + popup.width)
    assert abs(left_gap - right_gap) <= 2


def test_full_percentage_fills_area():
    area = Rect(2, 4, 37, 19)
    assert centered_rect(100, 100, area) == area


def test_centered_rect_rejects_bad_percentage():
    with pytest.raises(ValueError):
        centered_rect(120, 50, Rect(0, 0, 10, 10))