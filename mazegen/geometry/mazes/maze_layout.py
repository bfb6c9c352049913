"""
Maze layout assembly.

Combines generation and wall derivation into the complete description a
physics or rendering collaborator consumes: the wall list, the start and
goal cells, and placement markers for the goal area and the movable agent.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from mazegen.config.core import MazeConfig
from mazegen.utils.maze_logging import LoggedOperation, get_logger

from .maze_generator import Cell, MazeGrids, generate_maze_grids, make_rng
from .wall_geometry import WallSegment, count_internal_walls, walls_for_grids

if TYPE_CHECKING:
    import random

logger = get_logger(__name__)

GOAL_LABEL = "goal"
AGENT_LABEL = "ball"


@dataclass(frozen=True)
class Marker:
    """
    Placement descriptor for an interactive entity.

    Rectangular markers set ``width`` and ``height``; circular markers set
    ``radius``.
    """

    label: str
    x: float
    y: float
    width: float | None = None
    height: float | None = None
    radius: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(eq=False)
class MazeLayout:
    """Generated maze together with its derived geometry."""

    config: MazeConfig
    grids: MazeGrids
    walls: list[WallSegment]
    goal_marker: Marker
    agent_marker: Marker

    @property
    def start(self) -> Cell:
        return self.grids.start

    @property
    def goal(self) -> Cell:
        return self.grids.goal

    @property
    def unit_width(self) -> float:
        return self.config.unit_width

    @property
    def unit_height(self) -> float:
        return self.config.unit_height

    @property
    def boundary_walls(self) -> list[WallSegment]:
        return [wall for wall in self.walls if wall.is_boundary]

    @property
    def internal_walls(self) -> list[WallSegment]:
        return [wall for wall in self.walls if not wall.is_boundary]

    def cell_center(self, cell: Cell) -> tuple[float, float]:
        """(x, y) of the center of a cell."""
        row, col = cell
        return (col * self.unit_width + self.unit_width / 2, row * self.unit_height + self.unit_height / 2)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable description of the layout."""
        return {
            "rows": self.grids.rows,
            "cols": self.grids.cols,
            "width": self.config.width,
            "height": self.config.height,
            "unit_width": self.unit_width,
            "unit_height": self.unit_height,
            "start": list(self.start),
            "goal": list(self.goal),
            "verticals": self.grids.verticals.tolist(),
            "horizontals": self.grids.horizontals.tolist(),
            "walls": [wall.to_dict() for wall in self.walls],
            "markers": [self.goal_marker.to_dict(), self.agent_marker.to_dict()],
        }


def goal_marker_for(config: MazeConfig, goal: Cell) -> Marker:
    """Square-ish goal area centered in the goal cell."""
    row, col = goal
    return Marker(
        label=GOAL_LABEL,
        x=col * config.unit_width + config.unit_width / 2,
        y=row * config.unit_height + config.unit_height / 2,
        width=config.unit_width * config.goal_scale,
        height=config.unit_height * config.goal_scale,
    )


def agent_marker_for(config: MazeConfig, start: Cell) -> Marker:
    """Circular agent spawned in the center of the start cell."""
    row, col = start
    return Marker(
        label=AGENT_LABEL,
        x=col * config.unit_width + config.unit_width / 2,
        y=row * config.unit_height + config.unit_height / 2,
        radius=min(config.unit_width, config.unit_height) * config.agent_radius_ratio,
    )


def build_maze_layout(config: MazeConfig | None = None, rng: random.Random | None = None) -> MazeLayout:
    """
    Generate a maze and derive everything needed to place it in a scene.

    Args:
        config: Maze configuration (defaults to MazeConfig())
        rng: Random source; when omitted one is seeded from ``config.seed``

    Returns:
        Complete MazeLayout
    """
    config = config or MazeConfig()
    rng = rng if rng is not None else make_rng(seed=config.seed)

    if config.walls_swallow_cells:
        logger.warning(
            f"wall_thickness {config.wall_thickness} is not smaller than a "
            f"{config.unit_width:.3f} x {config.unit_height:.3f} cell; walls will overlap passages"
        )

    with LoggedOperation(logger, f"maze layout {config.rows}x{config.cols}"):
        grids = generate_maze_grids(config.rows, config.cols, rng=rng)
        walls = walls_for_grids(
            grids,
            config.unit_width,
            config.unit_height,
            wall_thickness=config.wall_thickness,
            boundary_thickness=config.boundary_thickness,
        )
        logger.debug(f"Derived {len(walls)} walls ({count_internal_walls(grids)} internal)")

    return MazeLayout(
        config=config,
        grids=grids,
        walls=walls,
        goal_marker=goal_marker_for(config, grids.goal),
        agent_marker=agent_marker_for(config, grids.start),
    )
