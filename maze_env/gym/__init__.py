from .maze_ball_env import ACTION_DIRECTIONS, MazeBallEnv

__all__ = ["ACTION_DIRECTIONS", "MazeBallEnv"]
