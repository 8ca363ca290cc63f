"""Geometry adapter and physics world for the maze game."""

from .geometry import (
    BallSpec,
    MazeGeometry,
    WallSpec,
    build_geometry,
)
from .world import MazeWorld

__all__ = [
    "BallSpec",
    "MazeGeometry",
    "WallSpec",
    "build_geometry",
    "MazeWorld",
]
