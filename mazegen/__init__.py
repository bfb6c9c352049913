from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazegen")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import LoggingConfig, MazeConfig, load_maze_config, save_maze_config  # noqa: E402
from .geometry.mazes import (  # noqa: E402
    MazeGrids,
    MazeLayout,
    PerfectMazeGenerator,
    WallSegment,
    build_maze_layout,
    carve_passages,
    derive_wall_segments,
    generate_maze,
    generate_maze_grids,
    shuffle,
    verify_perfect_maze,
)
from .utils.exceptions import (  # noqa: E402
    ConflictingRandomSourceError,
    InvalidDimensionsError,
    InvalidGeometryError,
    InvalidStartCellError,
    MazeGenerationError,
    MazeNotGeneratedError,
)
from .utils.maze_logging import configure_logging, get_logger  # noqa: E402

__all__ = [
    "ConflictingRandomSourceError",
    "InvalidDimensionsError",
    "InvalidGeometryError",
    "InvalidStartCellError",
    "LoggingConfig",
    "MazeConfig",
    "MazeGenerationError",
    "MazeGrids",
    "MazeLayout",
    "MazeNotGeneratedError",
    "PerfectMazeGenerator",
    "WallSegment",
    "__version__",
    "build_maze_layout",
    "carve_passages",
    "configure_logging",
    "derive_wall_segments",
    "generate_maze",
    "generate_maze_grids",
    "get_logger",
    "load_maze_config",
    "save_maze_config",
    "shuffle",
    "verify_perfect_maze",
]
