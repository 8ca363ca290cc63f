"""Maze ball Gymnasium environment.

Observation: (x, y, vx, vy) of the ball in pixels, screen convention.
Action: Discrete(5) = none, up, right, down, left; a move sets the ball
speed along one axis exactly like the keyboard does.
Reward: 1.0 on the step the goal is reached, else 0.0.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from maze_env.config import GameConfig
from maze_env.maze.grid import Direction
from maze_env.maze.random_source import GeneratorRandomSource
from maze_env.session import MazeSession

logger = logging.getLogger(__name__)

ACTION_DIRECTIONS: tuple[Optional[Direction], ...] = (
    None,
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


class MazeBallEnv(gym.Env):
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: GameConfig | dict[str, Any] | None = None,
        render_mode: Optional[str] = None,
    ):
        super().__init__()
        if isinstance(config, dict) or config is None:
            config = GameConfig.from_dict(config)
        self.cfg = config
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode {render_mode!r}")
        self.render_mode = render_mode
        self.metadata = {**self.metadata, "render_fps": int(self.cfg.render.fps)}

        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(4,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(len(ACTION_DIRECTIONS))
        self._size_px = (int(self.cfg.viewport.width), int(self.cfg.viewport.height))

        self._session: MazeSession | None = None
        self._renderer = None
        self.window_closed = False
        self._steps = 0
        self._max_steps = int(self.cfg.run.max_steps)
        self._substeps = int(self.cfg.run.substeps)

    @property
    def session(self) -> MazeSession | None:
        return self._session

    def reset(self, *, seed: int | None = None, options: dict[str, Any] | None = None):
        super().reset(seed=seed)
        self._session = MazeSession.create(self.cfg, GeneratorRandomSource(self.np_random))
        self._steps = 0
        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        if self._session is None:
            raise RuntimeError("Environment must be reset before stepping")
        direction = ACTION_DIRECTIONS[int(action)]
        world = self._session.world
        if direction is not None:
            world.steer(direction)

        was_won = world.won
        dt = float(self.cfg.physics.dt) / self._substeps
        for _ in range(self._substeps):
            world.step(dt)

        self._steps += 1
        terminated = bool(world.won)
        truncated = bool(self._steps >= self._max_steps and not terminated)
        reward = 1.0 if terminated and not was_won else 0.0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, truncated, self._info()

    def _get_obs(self) -> np.ndarray:
        return np.asarray(self._session.world.ball_state(), dtype=np.float32)

    def _info(self) -> dict[str, Any]:
        s = self._session
        return {
            "won": bool(s.world.won),
            "rows": s.layout.rows,
            "columns": s.layout.columns,
            "steps": self._steps,
        }

    def render(self):
        if self.render_mode is None or self._session is None or self.window_closed:
            return None
        if self._renderer is None:
            from maze_env.viz.pygame_renderer import Renderer

            self._renderer = Renderer(
                self._size_px,
                self.cfg.render,
                display=self.render_mode == "human",
            )
        self._renderer.render_frame(self._session.world, hud={"t": self._session.world.time_s})
        if self.render_mode == "rgb_array":
            return self._renderer.frame_array()
        import pygame

        if any(event.type == pygame.QUIT for event in self._renderer.poll_events()):
            logger.info("Render window closed; human rendering stopped")
            self.window_closed = True
            self.close()
        return None

    def close(self):
        if self._renderer is not None:
            self._renderer.close()
            self._renderer = None
