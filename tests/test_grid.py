import numpy as np
import pytest

from maze_env.maze.grid import (
    Edge,
    FrozenGridError,
    InvalidDimensionError,
    MazeGrid,
    Orientation,
    OutOfRangeError,
)


def test_fresh_grid_is_unvisited_and_closed():
    grid = MazeGrid(3, 4)
    assert grid.dimensions() == (3, 4)
    assert grid.visited_count() == 0
    assert grid.open_edge_count() == 0
    for r in range(3):
        for c in range(4):
            assert not grid.is_visited(r, c)
    for r in range(3):
        for c in range(3):
            assert not grid.is_vertical_open(r, c)
    for r in range(2):
        for c in range(4):
            assert not grid.is_horizontal_open(r, c)
    # rows*(cols-1) verticals + (rows-1)*cols horizontals
    assert len(list(grid.closed_edges())) == 3 * 3 + 2 * 4


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2), (0, 0)])
def test_invalid_dimensions_raise(rows, cols):
    with pytest.raises(InvalidDimensionError):
        MazeGrid(rows, cols)


@pytest.mark.parametrize("rows,cols", [(2.9, 3), (3, 4.0), (True, 3), (3, "4"), (None, 2)])
def test_non_integer_dimensions_raise(rows, cols):
    with pytest.raises(InvalidDimensionError):
        MazeGrid(rows, cols)


def test_numpy_integer_dimensions_accepted():
    grid = MazeGrid(np.int64(2), np.int32(3))
    assert grid.dimensions() == (2, 3)


def test_out_of_range_access_raises_index_error():
    grid = MazeGrid(2, 3)
    with pytest.raises(OutOfRangeError):
        grid.is_visited(2, 0)
    with pytest.raises(OutOfRangeError):
        grid.mark_visited(0, -1)
    # Vertical edges only exist up to columns - 2
    with pytest.raises(OutOfRangeError):
        grid.open_vertical_edge(0, 2)
    # Horizontal edges only exist up to rows - 2
    with pytest.raises(OutOfRangeError):
        grid.open_horizontal_edge(1, 0)
    with pytest.raises(IndexError):
        grid.is_horizontal_open(-1, 0)


def test_mark_visited_is_idempotent_and_queries_are_stable():
    grid = MazeGrid(2, 2)
    grid.mark_visited(1, 1)
    grid.mark_visited(1, 1)
    assert grid.visited_count() == 1
    assert all(grid.is_visited(1, 1) for _ in range(5))
    grid.open_vertical_edge(0, 0)
    assert [grid.is_vertical_open(0, 0) for _ in range(3)] == [True] * 3
    assert [grid.is_horizontal_open(0, 0) for _ in range(3)] == [False] * 3


def test_single_row_and_column_grids_have_no_cross_edges():
    row = MazeGrid(1, 4)
    assert len(list(row.closed_edges())) == 3
    assert all(e.orientation is Orientation.VERTICAL for e in row.closed_edges())
    col = MazeGrid(4, 1)
    assert all(e.orientation is Orientation.HORIZONTAL for e in col.closed_edges())
    single = MazeGrid(1, 1)
    assert list(single.closed_edges()) == []


def test_open_and_closed_edges_partition():
    grid = MazeGrid(2, 2)
    grid.open_horizontal_edge(0, 1)
    assert list(grid.open_edges()) == [Edge(Orientation.HORIZONTAL, 0, 1)]
    closed = set(grid.closed_edges())
    assert Edge(Orientation.HORIZONTAL, 0, 1) not in closed
    assert len(closed) == 3


def test_edge_cells():
    assert Edge(Orientation.VERTICAL, 1, 2).cells() == ((1, 2), (1, 3))
    assert Edge(Orientation.HORIZONTAL, 1, 2).cells() == ((1, 2), (2, 2))


def test_freeze_blocks_mutation_but_not_reads():
    grid = MazeGrid(2, 2)
    grid.mark_visited(0, 0)
    grid.freeze()
    assert grid.frozen
    assert grid.is_visited(0, 0)
    with pytest.raises(FrozenGridError):
        grid.mark_visited(1, 1)
    with pytest.raises(FrozenGridError):
        grid.open_vertical_edge(0, 0)
    with pytest.raises(FrozenGridError):
        grid.open_horizontal_edge(0, 0)


def test_ascii_single_cell():
    assert MazeGrid(1, 1).to_ascii() == "+---+\n|   |\n+---+"
