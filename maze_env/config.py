from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import (
    BACKGROUND_RGB,
    BALL_MASS,
    BALL_RADIUS_RATIO,
    BALL_RGB,
    BALL_SPEED_PXPS,
    BORDER_THICKNESS_PX,
    DT_S,
    EPISODE_MAX_STEPS,
    EXTRA_CELLS_HORIZONTAL,
    GOAL_RGB,
    GOAL_SIZE_RATIO,
    GRAVITY_Y_PXPS2,
    MIN_CELLS_HORIZONTAL,
    PHYSICS_SUBSTEPS,
    SPACE_DAMPING,
    TEXT_RGB,
    VIEWPORT_HEIGHT_PX,
    VIEWPORT_WIDTH_PX,
    WALL_DENSITY,
    WALL_ELASTICITY,
    WALL_FRICTION,
    WALL_RGB,
    WALL_THICKNESS_PX,
)


@dataclass
class ViewportConfig:
    width: int = VIEWPORT_WIDTH_PX
    height: int = VIEWPORT_HEIGHT_PX

    def __post_init__(self) -> None:
        assert self.width > 0, "width must be > 0"
        assert self.height > 0, "height must be > 0"


@dataclass
class MazeConfig:
    min_cells_horizontal: int = MIN_CELLS_HORIZONTAL
    extra_cells_horizontal: int = EXTRA_CELLS_HORIZONTAL
    wall_thickness: float = WALL_THICKNESS_PX
    border_thickness: float = BORDER_THICKNESS_PX
    goal_size_ratio: float = GOAL_SIZE_RATIO
    ball_radius_ratio: float = BALL_RADIUS_RATIO

    def __post_init__(self) -> None:
        assert self.min_cells_horizontal > 0, "min_cells_horizontal must be > 0"
        assert self.extra_cells_horizontal >= 0, "extra_cells_horizontal must be >= 0"
        assert self.wall_thickness > 0.0, "wall_thickness must be > 0"
        assert self.border_thickness > 0.0, "border_thickness must be > 0"
        assert 0.0 < self.goal_size_ratio <= 1.0, "goal_size_ratio in (0,1]"
        assert 0.0 < self.ball_radius_ratio < 0.5, "ball_radius_ratio in (0,0.5)"


@dataclass
class PhysicsConfig:
    dt: float = DT_S
    gravity_y: float = GRAVITY_Y_PXPS2
    ball_speed: float = BALL_SPEED_PXPS
    ball_mass: float = BALL_MASS
    damping: float = SPACE_DAMPING
    wall_friction: float = WALL_FRICTION
    wall_elasticity: float = WALL_ELASTICITY
    wall_density: float = WALL_DENSITY
    release_walls_on_win: bool = True

    def __post_init__(self) -> None:
        assert self.dt > 0.0, "dt must be > 0"
        assert self.ball_speed > 0.0, "ball_speed must be > 0"
        assert self.ball_mass > 0.0, "ball_mass must be > 0"
        assert 0.0 < self.damping <= 1.0, "damping in (0,1]"
        assert self.wall_friction >= 0.0, "wall_friction must be >= 0"
        assert self.wall_elasticity >= 0.0, "wall_elasticity must be >= 0"
        assert self.wall_density > 0.0, "wall_density must be > 0"


@dataclass
class RenderConfig:
    fps: int = 60
    caption: str = "Maze"
    show_hud: bool = False
    background: tuple[int, int, int] = BACKGROUND_RGB
    wall: tuple[int, int, int] = WALL_RGB
    ball: tuple[int, int, int] = BALL_RGB
    goal: tuple[int, int, int] = GOAL_RGB
    text: tuple[int, int, int] = TEXT_RGB

    def __post_init__(self) -> None:
        assert self.fps > 0, "fps must be > 0"
        for name in ("background", "wall", "ball", "goal", "text"):
            rgb = tuple(int(v) for v in getattr(self, name))
            assert len(rgb) == 3 and all(0 <= v <= 255 for v in rgb), f"{name} must be RGB"
            setattr(self, name, rgb)


@dataclass
class RunConfig:
    seed: Optional[int] = None
    max_steps: int = EPISODE_MAX_STEPS
    substeps: int = PHYSICS_SUBSTEPS

    def __post_init__(self) -> None:
        assert self.max_steps > 0, "max_steps must be > 0"
        assert self.substeps > 0, "substeps must be > 0"


@dataclass
class GameConfig:
    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    maze: MazeConfig = field(default_factory=MazeConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    run: RunConfig = field(default_factory=RunConfig)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "GameConfig":
        d = cfg or {}
        return cls(
            viewport=ViewportConfig(**(d.get("viewport") or {})),
            maze=MazeConfig(**(d.get("maze") or {})),
            physics=PhysicsConfig(**(d.get("physics") or {})),
            render=RenderConfig(**(d.get("render") or {})),
            run=RunConfig(**(d.get("run") or {})),
        )
