"""
Wall geometry derivation for generated mazes.

Turns the opening grids of a maze into axis-aligned rectangles that a
physics or rendering collaborator can instantiate as static obstacles.
Rectangles are described by their center, so a wall between two cells sits
exactly on the shared cell border.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

import numpy as np

from mazegen.utils.exceptions import InvalidGeometryError, validate_dimensions, validate_positive

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .maze_generator import MazeGrids

WALL_TAG = "wall"
BOUNDARY_TAG = "boundary"

DEFAULT_WALL_THICKNESS = 5.0
DEFAULT_BOUNDARY_THICKNESS = 2.0


@dataclass(frozen=True)
class WallSegment:
    """
    Rectangular obstacle description.

    Attributes:
        x: Center x coordinate
        y: Center y coordinate
        width: Extent along x
        height: Extent along y
        tag: Semantic label ("wall" for internal walls, "boundary" for the enclosure)

    The enclosure carries its own tag rather than "wall" so that consumers can
    release the internal walls while keeping the outer frame in place.
    """

    x: float
    y: float
    width: float
    height: float
    tag: str = WALL_TAG

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the rectangle."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)

    @property
    def is_boundary(self) -> bool:
        return self.tag == BOUNDARY_TAG

    def to_dict(self) -> dict:
        return asdict(self)


def boundary_segments(
    total_width: float,
    total_height: float,
    thickness: float = DEFAULT_BOUNDARY_THICKNESS,
) -> list[WallSegment]:
    """
    The four walls enclosing the whole maze: top, bottom, left, right.

    Each is centered on the outer edge of the grid.
    """
    validate_positive(total_width, "total_width")
    validate_positive(total_height, "total_height")
    validate_positive(thickness, "boundary_thickness")

    return [
        WallSegment(total_width / 2, 0.0, total_width, thickness, BOUNDARY_TAG),
        WallSegment(total_width / 2, total_height, total_width, thickness, BOUNDARY_TAG),
        WallSegment(0.0, total_height / 2, thickness, total_height, BOUNDARY_TAG),
        WallSegment(total_width, total_height / 2, thickness, total_height, BOUNDARY_TAG),
    ]


def _opening_grids(horizontals, verticals, rows: int | None, cols: int | None):
    """
    Coerce opening grids to 2-D bool arrays and recover the grid size.

    An empty grid may arrive flattened (``[]`` from JSON for a single row or
    column), so each dimension is read from whichever array still carries it.
    """
    horizontals = np.asarray(horizontals, dtype=bool)
    verticals = np.asarray(verticals, dtype=bool)

    if rows is None:
        if verticals.ndim == 2:
            rows = verticals.shape[0]
        elif horizontals.ndim == 2:
            rows = horizontals.shape[0] + 1
        else:
            rows = 1
    if cols is None:
        if horizontals.ndim == 2:
            cols = horizontals.shape[1]
        elif verticals.ndim == 2:
            cols = verticals.shape[1] + 1
        else:
            cols = 1
    validate_dimensions(rows, cols, component="WallGeometry")

    expected_horizontals = (rows - 1, cols)
    expected_verticals = (rows, cols - 1)
    if horizontals.ndim != 2 and horizontals.size == 0 and rows == 1:
        horizontals = horizontals.reshape(expected_horizontals)
    if verticals.ndim != 2 and verticals.size == 0 and cols == 1:
        verticals = verticals.reshape(expected_verticals)

    if horizontals.shape != expected_horizontals:
        raise InvalidGeometryError(
            "horizontals",
            horizontals.shape,
            suggested_action=f"horizontals must have shape {expected_horizontals} for a {rows} x {cols} grid",
        )
    if verticals.shape != expected_verticals:
        raise InvalidGeometryError(
            "verticals",
            verticals.shape,
            suggested_action=f"verticals must have shape {expected_verticals} for a {rows} x {cols} grid",
        )

    return horizontals, verticals, rows, cols


def derive_wall_segments(
    horizontals: NDArray[np.bool_],
    verticals: NDArray[np.bool_],
    unit_width: float,
    unit_height: float,
    wall_thickness: float = DEFAULT_WALL_THICKNESS,
    boundary_thickness: float = DEFAULT_BOUNDARY_THICKNESS,
    rows: int | None = None,
    cols: int | None = None,
) -> list[WallSegment]:
    """
    Build the wall list for a maze from its opening grids.

    The grids are only read. Output order is the four boundary walls, then
    one horizontal wall per closed entry of ``horizontals`` (row-major), then
    one vertical wall per closed entry of ``verticals`` (row-major).

    Args:
        horizontals: Openings between (r, c) and (r + 1, c), shape (rows - 1, cols)
        verticals: Openings between (r, c) and (r, c + 1), shape (rows, cols - 1)
        unit_width: Width of one cell
        unit_height: Height of one cell
        wall_thickness: Thickness of internal walls
        boundary_thickness: Thickness of the enclosing walls
        rows: Grid rows; inferred from the grids when omitted
        cols: Grid columns; inferred from the grids when omitted

    Returns:
        Ordered list of WallSegment

    Raises:
        InvalidGeometryError: If the grid shapes disagree with each other or
            with ``rows`` / ``cols``
        InvalidDimensionsError: If the recovered grid size is not at least 1 x 1
    """
    validate_positive(unit_width, "unit_width")
    validate_positive(unit_height, "unit_height")
    validate_positive(wall_thickness, "wall_thickness")

    horizontals, verticals, rows, cols = _opening_grids(horizontals, verticals, rows, cols)

    walls = boundary_segments(cols * unit_width, rows * unit_height, boundary_thickness)

    for row_index, col_index in np.argwhere(~horizontals):
        walls.append(
            WallSegment(
                float(col_index * unit_width + unit_width / 2),
                float(row_index * unit_height + unit_height),
                unit_width,
                wall_thickness,
                WALL_TAG,
            )
        )

    for row_index, col_index in np.argwhere(~verticals):
        walls.append(
            WallSegment(
                float(col_index * unit_width + unit_width),
                float(row_index * unit_height + unit_height / 2),
                wall_thickness,
                unit_height,
                WALL_TAG,
            )
        )

    return walls


def walls_for_grids(
    grids: MazeGrids,
    unit_width: float,
    unit_height: float,
    wall_thickness: float = DEFAULT_WALL_THICKNESS,
    boundary_thickness: float = DEFAULT_BOUNDARY_THICKNESS,
) -> list[WallSegment]:
    """Convenience wrapper around derive_wall_segments for a MazeGrids result."""
    return derive_wall_segments(
        grids.horizontals,
        grids.verticals,
        unit_width,
        unit_height,
        wall_thickness=wall_thickness,
        boundary_thickness=boundary_thickness,
        rows=grids.rows,
        cols=grids.cols,
    )


def count_internal_walls(grids: MazeGrids) -> int:
    """Closed internal edges: every possible internal wall minus the openings."""
    return grids.possible_internal_walls - grids.passage_count
