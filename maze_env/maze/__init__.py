"""Maze core: grid model, random sources and the recursive-backtracker generator."""

from .grid import (
    Direction,
    Edge,
    FrozenGridError,
    InvalidDimensionError,
    InvalidStartCellError,
    MazeGrid,
    Orientation,
    OutOfRangeError,
)
from .generator import generate, generate_maze, random_start_cell, shuffle
from .layout import MazeLayout, layout_for_viewport
from .random_source import (
    GeneratorRandomSource,
    PyRandomSource,
    RandomSource,
    as_random_source,
)

__all__ = [
    "Direction",
    "Edge",
    "FrozenGridError",
    "InvalidDimensionError",
    "InvalidStartCellError",
    "MazeGrid",
    "Orientation",
    "OutOfRangeError",
    "generate",
    "generate_maze",
    "random_start_cell",
    "shuffle",
    "MazeLayout",
    "layout_for_viewport",
    "GeneratorRandomSource",
    "PyRandomSource",
    "RandomSource",
    "as_random_source",
]
