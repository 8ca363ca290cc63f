"""Keyboard steering for the ball."""

from __future__ import annotations

from typing import Optional

import pygame

from .maze.grid import Direction

KEY_DIRECTIONS: dict[str, Direction] = {
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Map W/A/S/D (either case) to a steering direction."""
    if not key:
        return None
    return KEY_DIRECTIONS.get(key.lower())


class ResetRequested(Exception):
    pass


class QuitRequested(Exception):
    pass


class KeyController:
    """Turns pygame KEYDOWN events into steering calls on a MazeWorld.

    r starts a new maze, q or Escape quits; both are signalled by raising.
    """

    def __init__(self, world=None) -> None:
        self.world = world

    def attach(self, world) -> None:
        self.world = world

    def on_key(self, key: str) -> Optional[Direction]:
        k = (key or "").lower()
        if k == "r":
            raise ResetRequested()
        if k in ("q", "escape"):
            raise QuitRequested()
        direction = direction_for_key(k)
        if direction is not None and self.world is not None:
            self.world.steer(direction)
        return direction

    def handle_event(self, event) -> Optional[Direction]:
        """Dispatch one pygame event; non-key events are ignored."""
        if event.type == pygame.QUIT:
            raise QuitRequested()
        if event.type != pygame.KEYDOWN:
            return None
        return self.on_key(pygame.key.name(event.key))
