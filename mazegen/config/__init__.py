"""
Configuration for mazegen.

>>> from mazegen.config import MazeConfig, load_maze_config
>>> config = MazeConfig(rows=8, cols=12, seed=7)
"""

from .core import LoggingConfig, MazeConfig, create_default_config, create_square_cell_config
from .io import load_maze_config, save_maze_config

__all__ = [
    "LoggingConfig",
    "MazeConfig",
    "create_default_config",
    "create_square_cell_config",
    "load_maze_config",
    "save_maze_config",
]
