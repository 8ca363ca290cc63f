"""Headless renderer smoke test to validate basic frame generation."""

import pytest
import numpy as np

from maze_env.config import GameConfig, RenderConfig
from maze_env.session import MazeSession


def test_headless_renderer_smoke():
    try:
        from maze_env.viz.pygame_renderer import Renderer
    except Exception:
        pytest.skip("pygame not available")
    cfg = GameConfig.from_dict(
        {
            "viewport": {"width": 200, "height": 150},
            "maze": {"min_cells_horizontal": 5, "extra_cells_horizontal": 0},
        }
    )
    session = MazeSession.create(cfg, 0)
    rend = Renderer((200, 150), RenderConfig(fps=5, show_hud=True), display=False)
    frame = rend.render_frame(session.world, hud={"t": 0.0})
    assert frame.get_width() == 200 and frame.get_height() == 150

    arr = rend.frame_array()
    assert arr.shape == (150, 200, 3)
    # Ball color shows up near the top-left cell center
    ball = np.array(cfg.render.ball)
    assert (np.abs(arr[:75, :100].astype(int) - ball).sum(axis=-1) == 0).any()

    # Winning frame draws the banner and no goal
    session.world.release_walls()
    session.world.won = True
    frame = rend.render_frame(session.world)
    assert frame.get_width() == 200
    assert rend.poll_events() == []
    rend.close()
