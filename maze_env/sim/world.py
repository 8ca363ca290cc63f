"""Rigid-body world for the maze game, built on pymunk.

Screen coordinates throughout (y grows downwards), so gravity points to +y.
Maze walls and borders are static boxes, the goal is a static sensor and
the ball is the only dynamic body until the goal is reached. Reaching the
goal removes it and turns every maze wall dynamic so the maze collapses;
borders stay put.
"""

from __future__ import annotations

import logging
from typing import Optional

import pymunk

from maze_env.config import PhysicsConfig
from maze_env.maze.grid import Direction

from .geometry import BallSpec, MazeGeometry, WallSpec

logger = logging.getLogger(__name__)


class MazeWorld:
    """pymunk space holding one maze, its goal and the player ball.

    Interface:
    - steer(direction) sets one velocity component of the ball
    - step(dt?) -> bool (won)
    - ball_state() -> (x, y, vx, vy)
    """

    def __init__(self, geometry: MazeGeometry, cfg: Optional[PhysicsConfig] = None) -> None:
        if geometry.goal is None or geometry.ball is None:
            raise ValueError("geometry needs a goal and a ball")
        self.cfg = cfg or PhysicsConfig()
        self.space = pymunk.Space()
        self.space.gravity = (0.0, float(self.cfg.gravity_y))
        self.space.damping = float(self.cfg.damping)

        self.border_shapes: list[pymunk.Poly] = [
            self._add_static_box(spec) for spec in geometry.borders
        ]
        self.wall_shapes: list[pymunk.Poly] = [
            self._add_static_box(spec) for spec in geometry.walls
        ]
        self.goal_shape: Optional[pymunk.Poly] = self._add_static_box(geometry.goal, sensor=True)
        self.ball_body, self.ball_shape = self._add_ball(geometry.ball)

        self.won = False
        self.walls_released = False
        self.time_s = 0.0

    def _add_static_box(self, spec: WallSpec, sensor: bool = False) -> pymunk.Poly:
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = (spec.center_x, spec.center_y)
        shape = pymunk.Poly.create_box(body, (spec.width, spec.height))
        shape.friction = float(self.cfg.wall_friction)
        shape.elasticity = float(self.cfg.wall_elasticity)
        # Only matters once the body turns dynamic
        shape.density = float(self.cfg.wall_density)
        shape.sensor = sensor
        self.space.add(body, shape)
        return shape

    def _add_ball(self, spec: BallSpec) -> tuple[pymunk.Body, pymunk.Circle]:
        mass = float(self.cfg.ball_mass)
        moment = pymunk.moment_for_circle(mass, 0.0, spec.radius)
        body = pymunk.Body(mass, moment)
        body.position = (spec.center_x, spec.center_y)
        shape = pymunk.Circle(body, spec.radius)
        shape.friction = float(self.cfg.wall_friction)
        shape.elasticity = float(self.cfg.wall_elasticity)
        self.space.add(body, shape)
        return body, shape

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def steer(self, direction: Direction) -> None:
        """Set the ball speed along one axis; the other component is kept."""
        vx, vy = self.ball_body.velocity
        speed = float(self.cfg.ball_speed)
        if direction is Direction.UP:
            vy = -speed
        elif direction is Direction.DOWN:
            vy = speed
        elif direction is Direction.LEFT:
            vx = -speed
        elif direction is Direction.RIGHT:
            vx = speed
        else:
            raise ValueError(f"unknown direction {direction!r}")
        self.ball_body.velocity = (vx, vy)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def touching_goal(self) -> bool:
        if self.goal_shape is None:
            return False
        return any(info.shape is self.goal_shape for info in self.space.shape_query(self.ball_shape))

    def step(self, dt: Optional[float] = None) -> bool:
        """Advance the space by dt seconds and return whether the game is won."""
        h = float(self.cfg.dt if dt is None else dt)
        self.space.step(h)
        self.time_s += h
        if not self.won and self.touching_goal():
            self.won = True
            logger.info("Goal reached after %.2f s", self.time_s)
            if self.cfg.release_walls_on_win:
                self.release_walls()
        return self.won

    def release_walls(self) -> None:
        """Drop the goal and let every maze wall fall under gravity."""
        if self.walls_released:
            return
        if self.goal_shape is not None:
            self.space.remove(self.goal_shape, self.goal_shape.body)
            self.goal_shape = None
        for shape in self.wall_shapes:
            # Mass and moment are recomputed from the shape density
            shape.body.body_type = pymunk.Body.DYNAMIC
        self.walls_released = True
        logger.debug("Released %d maze walls", len(self.wall_shapes))

    def ball_state(self) -> tuple[float, float, float, float]:
        x, y = self.ball_body.position
        vx, vy = self.ball_body.velocity
        return float(x), float(y), float(vx), float(vy)

    @property
    def ball_radius(self) -> float:
        return float(self.ball_shape.radius)
