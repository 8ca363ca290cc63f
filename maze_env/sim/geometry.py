"""Maze-to-geometry adapter.

Turns a generated grid plus a pixel layout into axis-aligned rectangles
and a disc for the physics world. Screen convention: origin top-left,
x to the right, y downwards; row r spans [r * unit_y, (r + 1) * unit_y].
"""

from __future__ import annotations

from dataclasses import dataclass, field

from maze_env.constants import (
    BALL_RADIUS_RATIO,
    BORDER_THICKNESS_PX,
    GOAL_SIZE_RATIO,
    WALL_THICKNESS_PX,
)
from maze_env.maze.grid import Edge, MazeGrid, Orientation
from maze_env.maze.layout import MazeLayout

WALL_LABEL = "wall"
BORDER_LABEL = "border"
GOAL_LABEL = "goal"


@dataclass(frozen=True)
class WallSpec:
    """Axis-aligned rectangle given by its center and full extents (pixels)."""

    center_x: float
    center_y: float
    width: float
    height: float
    label: str = WALL_LABEL
    edge: Edge | None = None


@dataclass(frozen=True)
class BallSpec:
    center_x: float
    center_y: float
    radius: float


@dataclass
class MazeGeometry:
    walls: list[WallSpec] = field(default_factory=list)
    borders: list[WallSpec] = field(default_factory=list)
    goal: WallSpec | None = None
    ball: BallSpec | None = None

    def all_rects(self) -> list[WallSpec]:
        rects = list(self.borders) + list(self.walls)
        if self.goal is not None:
            rects.append(self.goal)
        return rects


def wall_for_edge(edge: Edge, layout: MazeLayout, thickness: float) -> WallSpec:
    """Rectangle covering one closed edge.

    Horizontal edge (r, c) lies on the bottom side of cell (r, c); vertical
    edge (r, c) lies on its right side.
    """
    ux, uy = layout.unit_x, layout.unit_y
    r, c = edge.row, edge.column
    if edge.orientation is Orientation.HORIZONTAL:
        return WallSpec(c * ux + ux / 2.0, r * uy + uy, ux, float(thickness), WALL_LABEL, edge)
    return WallSpec(c * ux + ux, r * uy + uy / 2.0, float(thickness), uy, WALL_LABEL, edge)


def inner_walls(grid: MazeGrid, layout: MazeLayout, thickness: float = WALL_THICKNESS_PX) -> list[WallSpec]:
    if grid.dimensions() != (layout.rows, layout.columns):
        raise ValueError(
            f"grid {grid.dimensions()} does not match layout {(layout.rows, layout.columns)}"
        )
    return [wall_for_edge(e, layout, thickness) for e in grid.closed_edges()]


def border_walls(layout: MazeLayout, thickness: float = BORDER_THICKNESS_PX) -> list[WallSpec]:
    """Top, bottom, left, right, centered on the viewport edges."""
    w, h = layout.width, layout.height
    t = float(thickness)
    return [
        WallSpec(w / 2.0, 0.0, w, t, BORDER_LABEL),
        WallSpec(w / 2.0, h, w, t, BORDER_LABEL),
        WallSpec(0.0, h / 2.0, t, h, BORDER_LABEL),
        WallSpec(w, h / 2.0, t, h, BORDER_LABEL),
    ]


def goal_square(layout: MazeLayout, ratio: float = GOAL_SIZE_RATIO) -> WallSpec:
    """Square in the bottom-right cell."""
    ux, uy = layout.unit_x, layout.unit_y
    side = min(ux, uy) * float(ratio)
    return WallSpec(layout.width - ux / 2.0, layout.height - uy / 2.0, side, side, GOAL_LABEL)


def ball_disc(layout: MazeLayout, ratio: float = BALL_RADIUS_RATIO) -> BallSpec:
    """Disc in the top-left cell."""
    ux, uy = layout.unit_x, layout.unit_y
    return BallSpec(ux / 2.0, uy / 2.0, min(ux, uy) * float(ratio))


def build_geometry(
    grid: MazeGrid,
    layout: MazeLayout,
    wall_thickness: float = WALL_THICKNESS_PX,
    border_thickness: float = BORDER_THICKNESS_PX,
    goal_ratio: float = GOAL_SIZE_RATIO,
    ball_ratio: float = BALL_RADIUS_RATIO,
) -> MazeGeometry:
    return MazeGeometry(
        walls=inner_walls(grid, layout, wall_thickness),
        borders=border_walls(layout, border_thickness),
        goal=goal_square(layout, goal_ratio),
        ball=ball_disc(layout, ball_ratio),
    )
