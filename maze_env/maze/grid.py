"""Grid model for perfect-maze generation.

Holds one visited flag per cell plus one open flag per interior edge:

- vertical edges sit between (row, col) and (row, col + 1); shape (rows, cols - 1)
- horizontal edges sit between (row, col) and (row + 1, col); shape (rows - 1, cols)

Edges are canonical: a vertical edge is indexed by its left cell, a
horizontal edge by its upper cell. Opening "right" from (r, c) and "left"
from (r, c + 1) touch the same entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np


class InvalidDimensionError(ValueError):
    """Grid built with a non-positive number of rows or columns."""


class OutOfRangeError(IndexError):
    """Cell or edge accessed with indices outside the grid."""


class InvalidStartCellError(ValueError):
    """Generation started from a cell outside the grid."""


class FrozenGridError(RuntimeError):
    """Mutation attempted after generation finished."""


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Direction(str, Enum):
    """Moves between cells; (d_row, d_column) with rows growing downwards."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Edge:
    """A wall slot between two adjacent cells."""

    orientation: Orientation
    row: int
    column: int

    def cells(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return the two cells this edge separates."""
        if self.orientation is Orientation.VERTICAL:
            return (self.row, self.column), (self.row, self.column + 1)
        return (self.row, self.column), (self.row + 1, self.column)


class MazeGrid:
    """Visitation and connectivity state for a rows x columns maze."""

    def __init__(self, rows: int, columns: int) -> None:
        for value in (rows, columns):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensionError(
                    f"rows and columns must be integers, got {rows!r}x{columns!r}"
                )
        if rows <= 0 or columns <= 0:
            raise InvalidDimensionError(
                f"rows and columns must be > 0, got {rows}x{columns}"
            )
        self.rows = int(rows)
        self.columns = int(columns)
        self._visited = np.zeros((self.rows, self.columns), dtype=bool)
        self._verticals = np.zeros((self.rows, self.columns - 1), dtype=bool)
        self._horizontals = np.zeros((self.rows - 1, self.columns), dtype=bool)
        self._frozen = False

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def _check_cell(self, row: int, column: int) -> None:
        if not self.in_bounds(row, column):
            raise OutOfRangeError(
                f"cell ({row}, {column}) outside {self.rows}x{self.columns} grid"
            )

    def _check_vertical(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns - 1):
            raise OutOfRangeError(
                f"vertical edge ({row}, {column}) outside {self.rows}x{self.columns} grid"
            )

    def _check_horizontal(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows - 1 and 0 <= column < self.columns):
            raise OutOfRangeError(
                f"horizontal edge ({row}, {column}) outside {self.rows}x{self.columns} grid"
            )

    def _check_writable(self) -> None:
        if self._frozen:
            raise FrozenGridError("maze grid is frozen after generation")

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.columns

    def is_visited(self, row: int, column: int) -> bool:
        self._check_cell(row, column)
        return bool(self._visited[row, column])

    def mark_visited(self, row: int, column: int) -> None:
        self._check_cell(row, column)
        self._check_writable()
        self._visited[row, column] = True

    def visited_count(self) -> int:
        return int(self._visited.sum())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------
    def open_vertical_edge(self, row: int, column: int) -> None:
        self._check_vertical(row, column)
        self._check_writable()
        self._verticals[row, column] = True

    def open_horizontal_edge(self, row: int, column: int) -> None:
        self._check_horizontal(row, column)
        self._check_writable()
        self._horizontals[row, column] = True

    def is_vertical_open(self, row: int, column: int) -> bool:
        self._check_vertical(row, column)
        return bool(self._verticals[row, column])

    def is_horizontal_open(self, row: int, column: int) -> bool:
        self._check_horizontal(row, column)
        return bool(self._horizontals[row, column])

    def _edges(self, is_open: bool) -> Iterator[Edge]:
        for r, c in zip(*np.nonzero(self._horizontals == is_open)):
            yield Edge(Orientation.HORIZONTAL, int(r), int(c))
        for r, c in zip(*np.nonzero(self._verticals == is_open)):
            yield Edge(Orientation.VERTICAL, int(r), int(c))

    def open_edges(self) -> Iterator[Edge]:
        return self._edges(True)

    def closed_edges(self) -> Iterator[Edge]:
        """Yield every interior wall, horizontals first (row-major), then verticals."""
        return self._edges(False)

    def open_edge_count(self) -> int:
        return int(self._verticals.sum() + self._horizontals.sum())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True
        self._visited.flags.writeable = False
        self._verticals.flags.writeable = False
        self._horizontals.flags.writeable = False

    def to_ascii(self) -> str:
        """Draw the maze with '+', '-' and '|' characters."""
        top = "+" + "---+" * self.columns
        lines = [top]
        for r in range(self.rows):
            row_line = "|"
            for c in range(self.columns):
                row_line += "   "
                if c < self.columns - 1 and self._verticals[r, c]:
                    row_line += " "
                else:
                    row_line += "|"
            lines.append(row_line)
            below = "+"
            for c in range(self.columns):
                if r < self.rows - 1 and self._horizontals[r, c]:
                    below += "   +"
                else:
                    below += "---+"
            lines.append(below)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MazeGrid(rows={self.rows}, columns={self.columns}, "
            f"open_edges={self.open_edge_count()}, frozen={self._frozen})"
        )
