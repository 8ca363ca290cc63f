"""Viewport sizing: how many cells fit and how large each one is."""

from __future__ import annotations

import math
from dataclasses import dataclass

from maze_env.constants import EXTRA_CELLS_HORIZONTAL, MIN_CELLS_HORIZONTAL

from .grid import InvalidDimensionError
from .random_source import RandomSource, draw


@dataclass(frozen=True)
class MazeLayout:
    """Pixel extent of the playfield and its cell grid.

    - width, height: viewport size in pixels
    - rows, columns: cell counts (vertical, horizontal)
    - unit_x, unit_y: cell size in pixels
    """

    width: float
    height: float
    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionError(
                f"viewport must be positive, got {self.width}x{self.height}"
            )
        if self.rows <= 0 or self.columns <= 0:
            raise InvalidDimensionError(
                f"rows and columns must be > 0, got {self.rows}x{self.columns}"
            )

    @property
    def unit_x(self) -> float:
        return self.width / self.columns

    @property
    def unit_y(self) -> float:
        return self.height / self.rows

    def cell_center(self, row: int, column: int) -> tuple[float, float]:
        return (column + 0.5) * self.unit_x, (row + 0.5) * self.unit_y


def layout_for_viewport(
    width: float,
    height: float,
    source: RandomSource,
    min_cells: int = MIN_CELLS_HORIZONTAL,
    extra_cells: int = EXTRA_CELLS_HORIZONTAL,
) -> MazeLayout:
    """Pick a random column count and derive rows from the aspect ratio.

    columns is uniform in [min_cells, min_cells + extra_cells); rows is
    ceil(columns * height / width) so cells stay roughly square.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"viewport must be positive, got {width}x{height}")
    if min_cells <= 0:
        raise InvalidDimensionError(f"min_cells must be > 0, got {min_cells}")
    columns = int(min_cells) + (draw(source, extra_cells) if extra_cells > 0 else 0)
    rows = math.ceil(columns * float(height) / float(width))
    return MazeLayout(float(width), float(height), rows, columns)
