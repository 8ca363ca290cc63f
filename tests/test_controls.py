import pygame
import pytest

from maze_env.controls import (
    KeyController,
    QuitRequested,
    ResetRequested,
    direction_for_key,
)
from maze_env.maze.grid import Direction


class FakeWorld:
    def __init__(self):
        self.steered = []

    def steer(self, direction):
        self.steered.append(direction)


@pytest.mark.parametrize(
    "key,expected",
    [
        ("w", Direction.UP),
        ("W", Direction.UP),
        ("d", Direction.RIGHT),
        ("s", Direction.DOWN),
        ("A", Direction.LEFT),
        ("x", None),
        ("", None),
    ],
)
def test_direction_for_key(key, expected):
    assert direction_for_key(key) is expected


def test_controller_steers_attached_world():
    world = FakeWorld()
    ctl = KeyController(world)
    assert ctl.on_key("d") is Direction.RIGHT
    assert ctl.on_key("w") is Direction.UP
    assert ctl.on_key("space") is None
    assert world.steered == [Direction.RIGHT, Direction.UP]


def test_controller_without_world_only_maps():
    assert KeyController().on_key("s") is Direction.DOWN


def test_reset_and_quit_keys():
    ctl = KeyController(FakeWorld())
    with pytest.raises(ResetRequested):
        ctl.on_key("r")
    with pytest.raises(QuitRequested):
        ctl.on_key("q")
    with pytest.raises(QuitRequested):
        ctl.on_key("escape")


def test_handle_event_quit_and_ignored_events():
    ctl = KeyController(FakeWorld())
    assert ctl.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0))) is None
    with pytest.raises(QuitRequested):
        ctl.handle_event(pygame.event.Event(pygame.QUIT))
