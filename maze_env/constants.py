from __future__ import annotations

# Viewport (pixels)
VIEWPORT_WIDTH_PX: int = 1280
VIEWPORT_HEIGHT_PX: int = 720

# Maze sizing
MIN_CELLS_HORIZONTAL: int = 30
EXTRA_CELLS_HORIZONTAL: int = 20

# Geometry (pixels)
WALL_THICKNESS_PX: float = 3.5
BORDER_THICKNESS_PX: float = 5.0
GOAL_SIZE_RATIO: float = 0.7
BALL_RADIUS_RATIO: float = 0.25

# Physics (pixels, seconds)
DT_S: float = 1.0 / 60.0
GRAVITY_Y_PXPS2: float = 1000.0
BALL_SPEED_PXPS: float = 300.0
BALL_MASS: float = 1.0
SPACE_DAMPING: float = 0.99
WALL_FRICTION: float = 0.1
WALL_ELASTICITY: float = 0.0
WALL_DENSITY: float = 0.001

# Episode
EPISODE_MAX_STEPS: int = 3600
PHYSICS_SUBSTEPS: int = 1

# Colors (RGB)
BACKGROUND_RGB: tuple[int, int, int] = (20, 21, 31)
WALL_RGB: tuple[int, int, int] = (204, 51, 51)  # hsl(0, 60%, 50%)
BALL_RGB: tuple[int, int, int] = (51, 102, 204)  # hsl(220, 60%, 50%)
GOAL_RGB: tuple[int, int, int] = (41, 163, 41)  # hsl(120, 60%, 40%)
TEXT_RGB: tuple[int, int, int] = (255, 255, 255)
