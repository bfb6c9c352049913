"""
mazegen utilities.

Organization:
- exceptions: structured error taxonomy
- maze_logging/: logging manager and helpers
"""

from .exceptions import (
    ConflictingRandomSourceError,
    InvalidDimensionsError,
    InvalidGeometryError,
    InvalidStartCellError,
    MazeGenerationError,
    MazeNotGeneratedError,
    validate_dimensions,
    validate_positive,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "ConflictingRandomSourceError",
    "InvalidDimensionsError",
    "InvalidGeometryError",
    "InvalidStartCellError",
    "LoggedOperation",
    "MazeGenerationError",
    "MazeNotGeneratedError",
    "configure_logging",
    "get_logger",
    "validate_dimensions",
    "validate_positive",
]
