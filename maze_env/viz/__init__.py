"""Pygame rendering for the maze game."""
