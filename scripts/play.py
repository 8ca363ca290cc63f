"""Play the maze: W/A/S/D steer the ball, R new maze, Q or Escape quit.

Usage:
  python scripts/play.py
  python scripts/play.py --seed 7 physics.gravity_y=0 viewport.width=960
"""

from __future__ import annotations

import argparse
import logging

import numpy as np

from maze_env.controls import KeyController, QuitRequested, ResetRequested
from maze_env.logging_config import setup_logging
from maze_env.session import MazeSession
from maze_env.utils.config import load_game_config
from maze_env.viz.pygame_renderer import Renderer

logger = logging.getLogger("maze_env.play")


def main():
    parser = argparse.ArgumentParser(description="Steer a ball through a random maze.")
    parser.add_argument("--config", type=str, default=None, help="YAML config (default configs/maze.yaml)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("overrides", nargs="*", help="dotlist overrides, e.g. physics.gravity_y=0")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
    cfg = load_game_config(args.config, args.overrides)
    seed = args.seed if args.seed is not None else cfg.run.seed
    rng = np.random.default_rng(seed)

    renderer = Renderer((cfg.viewport.width, cfg.viewport.height), cfg.render, display=True)
    controller = KeyController()
    session = MazeSession.create(cfg, rng)
    controller.attach(session.world)

    try:
        while True:
            try:
                for event in renderer.poll_events():
                    controller.handle_event(event)
            except ResetRequested:
                session = MazeSession.create(cfg, rng)
                controller.attach(session.world)
                continue
            except QuitRequested:
                break

            # Keep simulating after a win so the released walls fall
            session.world.step()
            renderer.render_frame(session.world, hud={"t": session.world.time_s})
    finally:
        renderer.close()
    logger.info("Bye")


if __name__ == "__main__":
    main()
