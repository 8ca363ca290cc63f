import pytest

from maze_env.maze.generator import generate
from maze_env.maze.grid import MazeGrid, OutOfRangeError
from maze_env.maze.paths import is_perfect, open_neighbors, reachable_cells, solve


class IdentitySource:
    def next_int(self, bound):
        return bound - 1


def make_snake():
    grid = MazeGrid(2, 2)
    generate(grid, 0, 0, IdentitySource())
    return grid


def test_open_neighbors_follow_open_edges():
    grid = make_snake()
    assert open_neighbors(grid, 0, 0) == [(0, 1)]
    assert sorted(open_neighbors(grid, 1, 1)) == [(0, 1), (1, 0)]


def test_solve_returns_unique_corridor():
    grid = make_snake()
    assert solve(grid, (0, 0), (1, 0)) == [(0, 0), (0, 1), (1, 1), (1, 0)]
    assert solve(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_solve_disconnected_and_out_of_range():
    grid = MazeGrid(2, 2)
    assert solve(grid, (0, 0), (1, 1)) == []
    with pytest.raises(OutOfRangeError):
        solve(grid, (0, 0), (2, 2))
    with pytest.raises(OutOfRangeError):
        solve(grid, (-1, 0), (1, 1))


def test_is_perfect():
    assert is_perfect(make_snake())
    assert not is_perfect(MazeGrid(2, 2))
    assert is_perfect(MazeGrid(1, 1))

    loop = MazeGrid(2, 2)
    loop.open_vertical_edge(0, 0)
    loop.open_vertical_edge(1, 0)
    loop.open_horizontal_edge(0, 0)
    loop.open_horizontal_edge(0, 1)
    assert not is_perfect(loop)
    assert reachable_cells(loop, (0, 0)).all()
