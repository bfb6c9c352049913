"""
Maze generation and geometry.

Perfect mazes are carved with a randomized depth-first traversal over a
rows x cols grid; the resulting opening grids are turned into wall
rectangles for a physics or rendering collaborator.

Examples
--------
>>> from mazegen.geometry.mazes import generate_maze_grids, walls_for_grids
>>> grids = generate_maze_grids(5, 10, seed=42)
>>> walls = walls_for_grids(grids, unit_width=80.0, unit_height=120.0)
"""

from .maze_generator import (
    Cell,
    MazeGrids,
    PerfectMazeGenerator,
    allocate_grids,
    carve_passages,
    generate_maze,
    generate_maze_grids,
    grids_to_occupancy,
    make_rng,
    random_start_cell,
    shuffle,
    verify_perfect_maze,
)
from .maze_layout import Marker, MazeLayout, build_maze_layout
from .wall_geometry import (
    BOUNDARY_TAG,
    WALL_TAG,
    WallSegment,
    boundary_segments,
    count_internal_walls,
    derive_wall_segments,
    walls_for_grids,
)

__all__ = [
    # Core generation
    "Cell",
    "MazeGrids",
    "PerfectMazeGenerator",
    "allocate_grids",
    "carve_passages",
    "generate_maze",
    "generate_maze_grids",
    "grids_to_occupancy",
    "make_rng",
    "random_start_cell",
    "shuffle",
    "verify_perfect_maze",
    # Geometry
    "BOUNDARY_TAG",
    "WALL_TAG",
    "WallSegment",
    "boundary_segments",
    "count_internal_walls",
    "derive_wall_segments",
    "walls_for_grids",
    # Layout
    "Marker",
    "MazeLayout",
    "build_maze_layout",
]
