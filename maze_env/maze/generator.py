"""Recursive-backtracker maze generation.

Randomized depth-first traversal from a start cell. Each visited cell
shuffles its four candidate neighbours (up, right, down, left), then for
each in turn opens the wall to any in-bounds, unvisited neighbour and
descends into it before looking at the next candidate. The open edges end
up forming a spanning tree of the grid.

The traversal keeps its own stack of frames instead of recursing, so the
order of visits and random draws matches the recursive formulation while
large grids stay clear of the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, TypeVar

from .grid import Direction, InvalidStartCellError, MazeGrid
from .random_source import RandomSource, draw

logger = logging.getLogger(__name__)

T = TypeVar("T")

Candidate = tuple[int, int, Direction]

NEIGHBOR_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


def shuffle(items: MutableSequence[T], source: RandomSource) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place, walking from the last index down to 0.

    Index i is swapped with one drawn uniformly from [0, i]. Every index
    (including 0) consumes one draw, so a list of n items uses n draws.
    """
    for i in range(len(items) - 1, -1, -1):
        j = draw(source, i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def neighbor_candidates(row: int, column: int) -> list[Candidate]:
    """Candidate moves from a cell in up, right, down, left order; unchecked bounds."""
    out: list[Candidate] = []
    for d in NEIGHBOR_ORDER:
        dr, dc = d.delta
        out.append((row + dr, column + dc, d))
    return out


def open_between(grid: MazeGrid, row: int, column: int, direction: Direction) -> None:
    """Open the canonical edge leaving (row, column) towards `direction`."""
    if direction is Direction.LEFT:
        grid.open_vertical_edge(row, column - 1)
    elif direction is Direction.RIGHT:
        grid.open_vertical_edge(row, column)
    elif direction is Direction.UP:
        grid.open_horizontal_edge(row - 1, column)
    elif direction is Direction.DOWN:
        grid.open_horizontal_edge(row, column)
    else:
        raise ValueError(f"unknown direction {direction!r}")


def _enter(grid: MazeGrid, row: int, column: int, source: RandomSource) -> list | None:
    if grid.is_visited(row, column):
        return None
    grid.mark_visited(row, column)
    candidates = shuffle(neighbor_candidates(row, column), source)
    # Frame: [row, column, shuffled candidates, index of next candidate]
    return [row, column, candidates, 0]


def generate(
    grid: MazeGrid,
    start_row: int,
    start_column: int,
    source: RandomSource,
    *,
    freeze: bool = True,
) -> None:
    """Carve a perfect maze into `grid`, starting at (start_row, start_column).

    Args:
        grid: freshly created grid; mutated in place.
        start_row, start_column: start cell, must lie inside the grid.
        source: uniform random source (`next_int(bound)`).
        freeze: freeze the grid once the traversal is done.
    """
    if not grid.in_bounds(start_row, start_column):
        rows, cols = grid.dimensions()
        raise InvalidStartCellError(
            f"start cell ({start_row}, {start_column}) outside {rows}x{cols} grid"
        )

    root = _enter(grid, start_row, start_column, source)
    stack = [root] if root is not None else []
    max_depth = len(stack)
    while stack:
        frame = stack[-1]
        row, column, candidates, i = frame
        if i >= len(candidates):
            stack.pop()
            continue
        frame[3] = i + 1

        next_row, next_column, direction = candidates[i]
        if not grid.in_bounds(next_row, next_column):
            continue
        if grid.is_visited(next_row, next_column):
            continue

        open_between(grid, row, column, direction)
        stack.append(_enter(grid, next_row, next_column, source))
        max_depth = max(max_depth, len(stack))

    if freeze:
        grid.freeze()
    logger.debug(
        "Generated %dx%d maze from (%d, %d): %d open edges, max depth %d",
        grid.rows,
        grid.columns,
        start_row,
        start_column,
        grid.open_edge_count(),
        max_depth,
    )


def random_start_cell(rows: int, columns: int, source: RandomSource) -> tuple[int, int]:
    """Pick a uniform start cell; the row is drawn before the column."""
    return draw(source, rows), draw(source, columns)


def generate_maze(
    rows: int,
    columns: int,
    source: RandomSource,
    start: tuple[int, int] | None = None,
) -> tuple[MazeGrid, tuple[int, int]]:
    """Build a grid, generate a maze in it and return (frozen grid, start cell)."""
    grid = MazeGrid(rows, columns)
    if start is None:
        start = random_start_cell(grid.rows, grid.columns, source)
    generate(grid, start[0], start[1], source)
    return grid, (int(start[0]), int(start[1]))
