import math

import pytest

from maze_env.maze.grid import InvalidDimensionError
from maze_env.maze.layout import MazeLayout, layout_for_viewport


class FixedSource:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def next_int(self, bound):
        self.calls += 1
        return min(self.value, bound - 1)


def test_column_range_and_aspect_ratio():
    lo = layout_for_viewport(1280, 720, FixedSource(0))
    assert (lo.columns, lo.rows) == (30, 17)
    hi = layout_for_viewport(1280, 720, FixedSource(99))
    assert (hi.columns, hi.rows) == (49, math.ceil(49 * 720 / 1280))
    assert hi.unit_x == pytest.approx(1280 / 49)
    assert hi.unit_y == pytest.approx(720 / hi.rows)


def test_portrait_viewport_has_more_rows():
    lo = layout_for_viewport(400, 800, FixedSource(0), min_cells=10, extra_cells=5)
    assert lo.columns == 10 and lo.rows == 20


def test_no_extra_cells_skips_draw():
    src = FixedSource(3)
    lo = layout_for_viewport(100, 100, src, min_cells=4, extra_cells=0)
    assert lo.columns == 4 and src.calls == 0


@pytest.mark.parametrize("w,h", [(0, 100), (100, 0), (-5, 10)])
def test_invalid_viewport(w, h):
    with pytest.raises(InvalidDimensionError):
        layout_for_viewport(w, h, FixedSource(0))


def test_layout_validates_and_centers_cells():
    with pytest.raises(InvalidDimensionError):
        MazeLayout(100.0, 100.0, 0, 3)
    lo = MazeLayout(200.0, 100.0, 2, 4)
    assert lo.cell_center(1, 3) == (175.0, 75.0)
