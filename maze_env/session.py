"""One playthrough: layout, generated maze, geometry and physics world."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .maze.generator import generate_maze
from .maze.grid import MazeGrid
from .maze.layout import MazeLayout, layout_for_viewport
from .maze.random_source import SourceLike, as_random_source
from .sim.geometry import MazeGeometry, build_geometry
from .sim.world import MazeWorld

logger = logging.getLogger(__name__)


@dataclass
class MazeSession:
    config: GameConfig
    layout: MazeLayout
    grid: MazeGrid
    start_cell: tuple[int, int]
    geometry: MazeGeometry
    world: MazeWorld

    @classmethod
    def create(cls, config: Optional[GameConfig] = None, source: SourceLike = None) -> "MazeSession":
        """Sample a layout, generate the maze and build the world.

        Draw order from `source`: column count, start row, start column, then
        four draws per visited cell during generation.
        """
        cfg = config or GameConfig()
        rnd = as_random_source(source)
        layout = layout_for_viewport(
            cfg.viewport.width,
            cfg.viewport.height,
            rnd,
            min_cells=cfg.maze.min_cells_horizontal,
            extra_cells=cfg.maze.extra_cells_horizontal,
        )
        grid, start = generate_maze(layout.rows, layout.columns, rnd)
        geometry = build_geometry(
            grid,
            layout,
            wall_thickness=cfg.maze.wall_thickness,
            border_thickness=cfg.maze.border_thickness,
            goal_ratio=cfg.maze.goal_size_ratio,
            ball_ratio=cfg.maze.ball_radius_ratio,
        )
        world = MazeWorld(geometry, cfg.physics)
        logger.info(
            "New maze %dx%d (cell %.1fx%.1f px), start %s, %d walls",
            layout.rows,
            layout.columns,
            layout.unit_x,
            layout.unit_y,
            start,
            len(geometry.walls),
        )
        return cls(cfg, layout, grid, start, geometry, world)

    @property
    def won(self) -> bool:
        return self.world.won
