from __future__ import annotations

from collections import deque
from typing import Tuple

import numpy as np

from .grid import MazeGrid, OutOfRangeError

Cell = Tuple[int, int]


def open_neighbors(grid: MazeGrid, row: int, column: int) -> list[Cell]:
    """Cells reachable from (row, column) through one open edge."""
    rows, cols = grid.dimensions()
    out: list[Cell] = []
    if row > 0 and grid.is_horizontal_open(row - 1, column):
        out.append((row - 1, column))
    if column < cols - 1 and grid.is_vertical_open(row, column):
        out.append((row, column + 1))
    if row < rows - 1 and grid.is_horizontal_open(row, column):
        out.append((row + 1, column))
    if column > 0 and grid.is_vertical_open(row, column - 1):
        out.append((row, column - 1))
    return out


def reachable_cells(grid: MazeGrid, start: Cell) -> np.ndarray:
    """Boolean (rows, cols) mask of cells connected to `start` by open edges."""
    rows, cols = grid.dimensions()
    seen = np.zeros((rows, cols), dtype=bool)
    si, sj = start
    seen[si, sj] = True
    q: deque[Cell] = deque([(si, sj)])
    while q:
        i, j = q.popleft()
        for ni, nj in open_neighbors(grid, i, j):
            if not seen[ni, nj]:
                seen[ni, nj] = True
                q.append((ni, nj))
    return seen


def solve(grid: MazeGrid, start: Cell, goal: Cell) -> list[Cell]:
    """Return the cell path from start to goal, or [] when they are not connected.

    In a perfect maze this is the unique simple path.
    """
    if not grid.in_bounds(*start) or not grid.in_bounds(*goal):
        raise OutOfRangeError(f"start {start} or goal {goal} outside grid")
    parent: dict[Cell, Cell | None] = {start: None}
    q: deque[Cell] = deque([start])
    while q:
        u = q.popleft()
        if u == goal:
            break
        for v in open_neighbors(grid, *u):
            if v not in parent:
                parent[v] = u
                q.append(v)
    if goal not in parent:
        return []
    path = []
    cur: Cell | None = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    return list(reversed(path))


def is_perfect(grid: MazeGrid) -> bool:
    """True when open edges form a spanning tree: connected with n - 1 edges."""
    rows, cols = grid.dimensions()
    if grid.open_edge_count() != rows * cols - 1:
        return False
    return bool(reachable_cells(grid, (0, 0)).all())


__all__ = [
    "open_neighbors",
    "reachable_cells",
    "solve",
    "is_perfect",
]
