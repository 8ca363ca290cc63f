"""Pygame renderer for the maze game.

Renders:
- Border and maze walls (drawn from the physics shapes, so released walls tumble)
- Goal square
- Ball
- Win banner and optional HUD

Supports windowed (interactive) and headless modes. Returns frames for recording.
"""

from __future__ import annotations

from typing import Optional
import os

import numpy as np
import pygame

from maze_env.config import RenderConfig
from maze_env.sim.world import MazeWorld

WIN_TEXT = "You won! Press R for a new maze"


class Renderer:
    def __init__(
        self,
        size_px: tuple[int, int],
        render_cfg: Optional[RenderConfig] = None,
        display: bool = True,
    ) -> None:
        self.cfg = render_cfg or RenderConfig()
        self.width, self.height = int(size_px[0]), int(size_px[1])
        self.display = bool(display)

        if not self.display:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        pygame.init()
        if self.display:
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.cfg.caption)
        else:
            self.screen = pygame.Surface((self.width, self.height))
        self.clock = pygame.time.Clock()
        pygame.font.init()
        self.font = pygame.font.SysFont("Arial", 14)
        self.banner_font = pygame.font.SysFont("Arial", 48, bold=True)

    @staticmethod
    def _to_px(x: float, y: float) -> tuple[int, int]:
        return int(round(x)), int(round(y))

    def draw_poly(self, shape, color: tuple[int, int, int]) -> None:
        body = shape.body
        pts = [self._to_px(*body.local_to_world(v)) for v in shape.get_vertices()]
        pygame.draw.polygon(self.screen, color, pts)

    def draw_walls(self, world: MazeWorld) -> None:
        for shape in world.border_shapes:
            self.draw_poly(shape, self.cfg.wall)
        for shape in world.wall_shapes:
            self.draw_poly(shape, self.cfg.wall)

    def draw_goal(self, world: MazeWorld) -> None:
        if world.goal_shape is not None:
            self.draw_poly(world.goal_shape, self.cfg.goal)

    def draw_ball(self, world: MazeWorld) -> None:
        x, y, _, _ = world.ball_state()
        r_px = max(1, int(round(world.ball_radius)))
        pygame.draw.circle(self.screen, self.cfg.ball, self._to_px(x, y), r_px)

    def draw_banner(self, text: str = WIN_TEXT) -> None:
        surf = self.banner_font.render(text, True, self.cfg.text)
        rect = surf.get_rect(center=(self.width // 2, self.height // 2))
        backdrop = rect.inflate(24, 16)
        pygame.draw.rect(self.screen, self.cfg.background, backdrop)
        self.screen.blit(surf, rect)

    def draw_hud(self, text_lines: dict[str, float], y0: int = 10) -> None:
        x, y = 10, y0
        for k, v in text_lines.items():
            surf = self.font.render(f"{k}: {v:.3f}", True, self.cfg.text)
            self.screen.blit(surf, (x, y))
            y += 18

    def render_frame(
        self,
        world: MazeWorld,
        hud: Optional[dict[str, float]] = None,
    ) -> "pygame.Surface":
        self.screen.fill(self.cfg.background)

        self.draw_goal(world)
        self.draw_walls(world)
        self.draw_ball(world)

        if hud and self.cfg.show_hud:
            self.draw_hud(hud)
        if world.won:
            self.draw_banner()

        if self.display:
            pygame.display.flip()
            self.clock.tick(self.cfg.fps)
        return self.screen

    def frame_array(self) -> np.ndarray:
        """Current frame as an (H, W, 3) uint8 array."""
        # pygame returns (W, H, 3); transpose to (H, W, 3)
        arr = pygame.surfarray.array3d(self.screen)
        return np.ascontiguousarray(arr.transpose(1, 0, 2), dtype=np.uint8)

    def poll_events(self) -> list:
        """Return pending events; empty in headless mode."""
        if not self.display:
            return []
        return pygame.event.get()

    def close(self) -> None:
        if self.display and pygame is not None:
            pygame.display.quit()
        if pygame is not None:
            pygame.quit()
