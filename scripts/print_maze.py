from __future__ import annotations

import argparse

import numpy as np

from maze_env.maze.generator import generate_maze
from maze_env.maze.paths import is_perfect, solve
from maze_env.maze.random_source import GeneratorRandomSource


def main():
    parser = argparse.ArgumentParser(description="Generate a maze and print it as ASCII.")
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--columns", type=int, default=12)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    source = GeneratorRandomSource(np.random.default_rng(args.seed))
    grid, start = generate_maze(args.rows, args.columns, source)
    path = solve(grid, (0, 0), (grid.rows - 1, grid.columns - 1))

    print(grid.to_ascii())
    print(
        f"[MAZE] {grid.rows}x{grid.columns} start={start} "
        f"open_edges={grid.open_edge_count()} perfect={is_perfect(grid)} "
        f"solution_len={len(path)}"
    )


if __name__ == "__main__":
    main()
