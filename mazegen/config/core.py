"""
Maze configuration classes.

Configurations describe the grid, the viewport it is laid out in and the
wall thicknesses used for geometry derivation. Defaults reproduce the classic
layout: 10 cells across, 5 cells down, 5-unit internal walls and a 2-unit
enclosure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pathlib import Path


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: INFO)
    use_colors : bool
        Colored console output (default: True)
    log_file : str | None
        Also write logs to this file (default: None)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    use_colors: bool = True
    log_file: str | None = None

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def apply(self) -> None:
        """Configure the package loggers with these settings."""
        from mazegen.utils.maze_logging import configure_logging

        configure_logging(level=self.level, use_colors=self.use_colors, log_file_path=self.log_file)


class MazeConfig(BaseModel):
    """
    Configuration for one maze.

    Attributes
    ----------
    rows : int
        Number of cell rows (>= 1)
    cols : int
        Number of cell columns (>= 1)
    width : float
        Total width of the maze area
    height : float
        Total height of the maze area
    wall_thickness : float
        Thickness of internal walls
    boundary_thickness : float
        Thickness of the four enclosing walls
    goal_scale : float
        Goal marker size as a fraction of one cell
    agent_radius_ratio : float
        Agent marker radius as a fraction of the smaller cell side
    seed : int | None
        Random seed; None draws a different maze each time
    logging : LoggingConfig
        Logging settings
    """

    rows: int = Field(5, ge=1, description="Number of cell rows")
    cols: int = Field(10, ge=1, description="Number of cell columns")
    width: float = Field(800.0, gt=0, description="Total width of the maze area")
    height: float = Field(600.0, gt=0, description="Total height of the maze area")
    wall_thickness: float = Field(5.0, gt=0, description="Thickness of internal walls")
    boundary_thickness: float = Field(2.0, gt=0, description="Thickness of enclosing walls")
    goal_scale: float = Field(0.7, gt=0, le=1, description="Goal size relative to a cell")
    agent_radius_ratio: float = Field(0.25, gt=0, le=0.5, description="Agent radius relative to a cell")
    seed: int | None = Field(None, description="Random seed for reproducibility")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @property
    def unit_width(self) -> float:
        return self.width / self.cols

    @property
    def unit_height(self) -> float:
        return self.height / self.rows

    @property
    def walls_swallow_cells(self) -> bool:
        """Whether internal walls are at least as thick as the smaller cell side."""
        return self.wall_thickness >= min(self.unit_width, self.unit_height)

    def to_yaml(self, path: str | Path) -> None:
        from .io import save_maze_config

        save_maze_config(self, path)


def create_default_config(rows: int = 5, cols: int = 10, **kwargs) -> MazeConfig:
    """Create a configuration for the given grid with default geometry."""
    return MazeConfig(rows=rows, cols=cols, **kwargs)


def create_square_cell_config(rows: int, cols: int, cell_size: float = 50.0, **kwargs) -> MazeConfig:
    """Create a configuration whose viewport is sized for square cells."""
    return MazeConfig(rows=rows, cols=cols, width=cols * cell_size, height=rows * cell_size, **kwargs)
