"""Procedural perfect-maze generation with a pymunk ball game on top."""

__version__ = "0.1.0"
