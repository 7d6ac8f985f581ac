"""Optimal A* solver for rectangular sliding tile puzzles: boards, search and command line."""

__version__ = "0.1.0"
__all__ = ["board", "solver", "cli"]