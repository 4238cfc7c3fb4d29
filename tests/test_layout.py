import pytest

from cubenceline.layout import Rect, content_layout, main_layout


def _assert_vertical_tiling(area, rects):
    assert sum(r.height for r in rects) == area.height
    y = area.y
    for r in rects:
        assert r.x == area.x
        assert r.width == area.width
        assert r.y == y
        y += r.height


def test_main_layout_fixed_rows_on_tall_area():
    area = Rect(0, 0, 80, 40)
    rects = main_layout(area)
    assert len(rects) == 5
    assert [rects[i].height for i in (0, 1, 2, 4)] == [3, 3, 3, 3]
    assert rects[3].height == area.height - 12
    _assert_vertical_tiling(area, rects)


def test_main_layout_content_gets_minimum_when_exact():
    area = Rect(2, 5, 50, 22)
    rects = main_layout(area)
    assert rects[3].height == 10
    _assert_vertical_tiling(area, rects)


@pytest.mark.parametrize("height", [0, 1, 5, 10, 11, 15, 21])
def test_main_layout_short_area_still_tiles(height):
    area = Rect(0, 0, 30, height)
    rects = main_layout(area)
    _assert_vertical_tiling(area, rects)
    assert rects[3].height == min(10, height)
    assert all(r.height <= 3 for i, r in enumerate(rects) if i != 3)


def test_content_layout_percentages():
    area = Rect(0, 0, 100, 20)
    left, right = content_layout(area)
    assert left.width == 30
    assert right.width == 70
    assert right.x == left.x + left.width


@pytest.mark.parametrize("width", [0, 1, 7, 33, 81, 199])
def test_content_layout_covers_area(width):
    area = Rect(4, 3, width, 12)
    left, right = content_layout(area)
    assert left.width + right.width == width
    assert left.x == area.x
    assert right.x == area.x + left.width
    assert left.height == right.height == area.height
    assert left.width <= right.width


def test_rect_rejects_negative_size():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 5)