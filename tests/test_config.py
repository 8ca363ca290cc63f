from pathlib import Path

import pytest

from maze_env.config import GameConfig, MazeConfig, PhysicsConfig
from maze_env.constants import BALL_SPEED_PXPS, MIN_CELLS_HORIZONTAL
from maze_env.utils.config import load_config_dict, load_game_config

CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "maze.yaml"


def test_defaults_from_empty_dict():
    cfg = GameConfig.from_dict({})
    assert cfg.maze.min_cells_horizontal == MIN_CELLS_HORIZONTAL
    assert cfg.physics.ball_speed == BALL_SPEED_PXPS
    assert cfg.run.seed is None


def test_yaml_loads_with_overrides():
    cfg = load_game_config(str(CONFIG_PATH), ["physics.gravity_y=0", "run.seed=3", "viewport.width=960"])
    assert cfg.physics.gravity_y == 0
    assert cfg.run.seed == 3
    assert cfg.viewport.width == 960
    assert cfg.viewport.height == 720
    assert cfg.render.wall == (204, 51, 51)
    assert isinstance(cfg.render.ball, tuple)


def test_default_path_is_repo_config():
    cfg = load_game_config()
    assert cfg.maze.wall_thickness == pytest.approx(3.5)


def test_overrides_without_file():
    d = load_config_dict(None, ["maze.extra_cells_horizontal=0"])
    assert d == {"maze": {"extra_cells_horizontal": 0}}


def test_non_mapping_yaml_raises(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n")
    with pytest.raises(TypeError):
        load_config_dict(str(p))


def test_invalid_values_assert():
    with pytest.raises(AssertionError):
        MazeConfig(min_cells_horizontal=0)
    with pytest.raises(AssertionError):
        PhysicsConfig(dt=0.0)
    with pytest.raises(AssertionError):
        GameConfig.from_dict({"render": {"wall": [300, 0, 0]}})


def test_utils_package_exports_loaders():
    import maze_env.utils as utils

    assert sorted(utils.__all__) == ["load_config_dict", "load_game_config"]
    cfg = utils.load_game_config(None, ["run.max_steps=7"])
    assert cfg.run.max_steps == 7
