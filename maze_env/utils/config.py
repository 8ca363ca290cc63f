"""Config loading helpers built around OmegaConf."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

from omegaconf import OmegaConf

from maze_env.config import GameConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "maze.yaml"


def load_config_dict(
    path: str | None, overrides: Sequence[str] | None = None
) -> Dict[str, Any]:
    """Load a config file, apply `key=value` dotlist overrides, return a `dict`.

    With `path=None` only the overrides are used.
    """
    base = OmegaConf.load(path) if path is not None else OmegaConf.create({})
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    cfg = OmegaConf.to_container(base, resolve=True)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def load_game_config(
    path: str | None = None, overrides: Sequence[str] | None = None
) -> GameConfig:
    """Build a GameConfig; defaults to configs/maze.yaml when it is present."""
    if path is None and DEFAULT_CONFIG_PATH.is_file():
        path = str(DEFAULT_CONFIG_PATH)
    return GameConfig.from_dict(load_config_dict(path, overrides))
