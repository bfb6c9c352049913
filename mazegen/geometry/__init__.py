"""Geometry for mazegen: maze grids and their wall rectangles."""

from .mazes import (
    MazeGrids,
    MazeLayout,
    PerfectMazeGenerator,
    WallSegment,
    build_maze_layout,
    derive_wall_segments,
    generate_maze_grids,
    verify_perfect_maze,
)

__all__ = [
    "MazeGrids",
    "MazeLayout",
    "PerfectMazeGenerator",
    "WallSegment",
    "build_maze_layout",
    "derive_wall_segments",
    "generate_maze_grids",
    "verify_perfect_maze",
]
