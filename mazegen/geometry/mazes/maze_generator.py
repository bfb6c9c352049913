"""
Perfect Maze Generation by Randomized Depth-First Traversal

Carves passages between adjacent cells of a rows x cols grid so that the
opened walls form a spanning tree of the grid graph:

1. Fully Connected: a path exists between any two cells
2. No Loops: exactly one path between any pair of cells

The generation state is three boolean grids:

- visited[row, col]      shape (rows, cols)
- verticals[row, col]    shape (rows, cols - 1), True = no wall between
                         (row, col) and (row, col + 1)
- horizontals[row, col]  shape (rows - 1, cols), True = no wall between
                         (row, col) and (row + 1, col)

Mathematical Foundation:
A perfect maze on R x C cells is a spanning tree with R*C - 1 edges. An edge
is only ever opened when the traversal steps into an unvisited cell, so the
result cannot contain a cycle, and depth-first backtracking does not stop
until every reachable cell has been entered.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import numbers
import random
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from mazegen.utils.exceptions import (
    ConflictingRandomSourceError,
    InvalidGeometryError,
    InvalidStartCellError,
    MazeGenerationError,
    MazeNotGeneratedError,
    validate_dimensions,
)
from mazegen.utils.maze_logging import get_logger, log_maze_generation

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

T = TypeVar("T")
Cell = tuple[int, int]

UP = "up"
RIGHT = "right"
DOWN = "down"
LEFT = "left"


def shuffle(items: list[T], rng: random.Random) -> list[T]:
    """
    Shuffle a list in place with the Fisher-Yates (Knuth) algorithm.

    For counter from N down to 1 an index is drawn uniformly from
    [0, counter) and swapped with position counter - 1, so every one of the
    N! orderings is equally likely given a fair source.

    Args:
        items: List to permute; its previous order is consumed
        rng: Uniform random source

    Returns:
        The same list object, permuted
    """
    counter = len(items)
    while counter > 0:
        index = rng.randrange(counter)
        counter -= 1
        items[counter], items[index] = items[index], items[counter]
    return items


def make_rng(seed: int | None = None, rng: random.Random | None = None) -> random.Random:
    """Resolve the random source from an explicit generator or a seed."""
    if rng is not None and seed is not None:
        raise ConflictingRandomSourceError(seed, rng)
    if rng is not None:
        return rng
    return random.Random(seed)


@dataclass(eq=False)
class MazeGrids:
    """
    Result of one maze generation.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        start: Cell the traversal started from
        visited: Visited markers, shape (rows, cols)
        verticals: Openings between horizontally adjacent cells, shape (rows, cols - 1)
        horizontals: Openings between vertically adjacent cells, shape (rows - 1, cols)
    """

    rows: int
    cols: int
    start: Cell
    visited: NDArray[np.bool_]
    verticals: NDArray[np.bool_]
    horizontals: NDArray[np.bool_]

    @property
    def goal(self) -> Cell:
        """Goal cell, fixed at the far corner of the grid."""
        return (self.rows - 1, self.cols - 1)

    @property
    def num_cells(self) -> int:
        return self.rows * self.cols

    @property
    def passage_count(self) -> int:
        """Number of removed walls across both opening grids."""
        return int(np.count_nonzero(self.verticals) + np.count_nonzero(self.horizontals))

    @property
    def possible_internal_walls(self) -> int:
        return self.rows * (self.cols - 1) + (self.rows - 1) * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def opened_edges(self) -> Iterator[tuple[Cell, Cell]]:
        """Yield every passage as a pair of adjacent cells."""
        for row, col in np.argwhere(self.verticals):
            yield (int(row), int(col)), (int(row), int(col) + 1)
        for row, col in np.argwhere(self.horizontals):
            yield (int(row), int(col)), (int(row) + 1, int(col))

    def passages_from(self, cell: Cell) -> list[Cell]:
        """Cells reachable from ``cell`` in one step through an opening."""
        row, col = cell
        reachable = []
        if row > 0 and self.horizontals[row - 1, col]:
            reachable.append((row - 1, col))
        if col < self.cols - 1 and self.verticals[row, col]:
            reachable.append((row, col + 1))
        if row < self.rows - 1 and self.horizontals[row, col]:
            reachable.append((row + 1, col))
        if col > 0 and self.verticals[row, col - 1]:
            reachable.append((row, col - 1))
        return reachable


def allocate_grids(rows: int, cols: int) -> tuple[NDArray[np.bool_], NDArray[np.bool_], NDArray[np.bool_]]:
    """Allocate unvisited, fully walled generation grids."""
    validate_dimensions(rows, cols)
    visited = np.zeros((rows, cols), dtype=bool)
    verticals = np.zeros((rows, cols - 1), dtype=bool)
    horizontals = np.zeros((rows - 1, cols), dtype=bool)
    return visited, verticals, horizontals


def random_start_cell(rows: int, cols: int, rng: random.Random) -> Cell:
    """Pick a start cell uniformly at random, row first."""
    row = rng.randrange(rows)
    col = rng.randrange(cols)
    return (row, col)


def _normalize_start(start: Sequence[int], rows: int, cols: int) -> Cell:
    try:
        row, col = start
    except (TypeError, ValueError) as e:
        raise InvalidStartCellError(start, rows, cols) from e

    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidStartCellError(start, rows, cols)

    if not (0 <= row < rows and 0 <= col < cols):
        raise InvalidStartCellError(start, rows, cols)

    return (int(row), int(col))


def _open_wall(
    verticals: NDArray[np.bool_],
    horizontals: NDArray[np.bool_],
    row: int,
    col: int,
    direction: str,
) -> None:
    if direction == LEFT:
        verticals[row, col - 1] = True
    elif direction == RIGHT:
        verticals[row, col] = True
    elif direction == UP:
        horizontals[row - 1, col] = True
    elif direction == DOWN:
        horizontals[row, col] = True


def carve_passages(
    visited: NDArray[np.bool_],
    verticals: NDArray[np.bool_],
    horizontals: NDArray[np.bool_],
    start: Cell,
    rng: random.Random,
) -> None:
    """
    Randomized depth-first traversal that opens walls in place.

    On entering a cell it is marked visited and its four neighbors
    (up, right, down, left) are shuffled. Neighbors are then taken in that
    order: out-of-bounds and already visited ones are skipped, otherwise the
    wall between the two cells is removed and the traversal descends into
    the neighbor. A cell is left only once every neighbor has been handled.

    The call stack of the recursive formulation is kept as an explicit list
    of (row, col, remaining neighbors) frames, so grid size is not limited by
    the interpreter's recursion depth. Random draws happen in the same order
    as the recursive version: one shuffle per cell, at the moment it is
    entered.

    Args:
        visited: Visited markers, shape (rows, cols)
        verticals: Vertical wall openings, shape (rows, cols - 1)
        horizontals: Horizontal wall openings, shape (rows - 1, cols)
        start: Cell to start from
        rng: Random source used for shuffling
    """
    rows, cols = visited.shape
    row, col = _normalize_start(start, rows, cols)

    if visited[row, col]:
        return

    def enter(row: int, col: int) -> tuple[int, int, Iterator[tuple[int, int, str]]]:
        visited[row, col] = True
        neighbors = shuffle(
            [
                (row - 1, col, UP),
                (row, col + 1, RIGHT),
                (row + 1, col, DOWN),
                (row, col - 1, LEFT),
            ],
            rng,
        )
        return row, col, iter(neighbors)

    stack = [enter(row, col)]

    while stack:
        row, col, pending = stack[-1]
        for next_row, next_col, direction in pending:
            if next_row < 0 or next_row >= rows or next_col < 0 or next_col >= cols:
                continue
            if visited[next_row, next_col]:
                continue
            _open_wall(verticals, horizontals, row, col, direction)
            stack.append(enter(next_row, next_col))
            break
        else:
            stack.pop()


def generate_maze_grids(
    rows: int,
    cols: int,
    start: Sequence[int] | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> MazeGrids:
    """
    Generate a perfect maze and return its freshly allocated grids.

    Args:
        rows: Number of rows (>= 1)
        cols: Number of columns (>= 1)
        start: Start cell; chosen uniformly at random when omitted
        rng: Random source to draw from
        seed: Seed for a new random source (mutually exclusive with rng)

    Returns:
        MazeGrids owned by the caller

    Raises:
        InvalidDimensionsError: If rows or cols is not an integer >= 1
        InvalidStartCellError: If start lies outside the grid
    """
    visited, verticals, horizontals = allocate_grids(rows, cols)
    rng = make_rng(seed=seed, rng=rng)

    if start is None:
        start_cell = random_start_cell(rows, cols, rng)
    else:
        start_cell = _normalize_start(start, rows, cols)

    carve_passages(visited, verticals, horizontals, start_cell, rng)

    grids = MazeGrids(
        rows=rows,
        cols=cols,
        start=start_cell,
        visited=visited,
        verticals=verticals,
        horizontals=horizontals,
    )
    log_maze_generation(logger, rows, cols, start_cell, grids.passage_count)
    return grids


class PerfectMazeGenerator:
    """
    Perfect maze generator using randomized depth-first traversal.

    Each call to generate() allocates new grids; the generator only remembers
    the latest result for export helpers.
    """

    def __init__(self, rows: int, cols: int):
        """
        Initialize maze generator.

        Args:
            rows: Number of rows in maze
            cols: Number of columns in maze
        """
        validate_dimensions(rows, cols, component=type(self).__name__)
        self.rows = rows
        self.cols = cols
        self._grids: MazeGrids | None = None

    def generate(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        start: Sequence[int] | None = None,
    ) -> MazeGrids:
        """
        Generate a perfect maze.

        Args:
            seed: Random seed for reproducibility
            rng: Random source (alternative to seed)
            start: Optional start cell

        Returns:
            Generated maze grids
        """
        self._grids = generate_maze_grids(self.rows, self.cols, start=start, rng=rng, seed=seed)
        return self._grids

    @property
    def grids(self) -> MazeGrids:
        if self._grids is None:
            raise MazeNotGeneratedError("grids", component=type(self).__name__)
        return self._grids

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert the latest maze to a numpy occupancy array.

        Args:
            wall_thickness: Thickness of walls and passages in array cells

        Returns:
            Numpy array where 1 = wall, 0 = passage
        """
        if self._grids is None:
            raise MazeNotGeneratedError("to_numpy_array", component=type(self).__name__)
        return grids_to_occupancy(self._grids, wall_thickness=wall_thickness)


def grids_to_occupancy(grids: MazeGrids, wall_thickness: int = 1) -> NDArray[np.int32]:
    """
    Rasterize maze grids into an occupancy array.

    Cells and walls are both ``wall_thickness`` wide, giving shape
    (2*w*rows + w, 2*w*cols + w).
    """
    if isinstance(wall_thickness, bool) or not isinstance(wall_thickness, numbers.Integral) or wall_thickness < 1:
        raise InvalidGeometryError(
            "wall_thickness",
            wall_thickness,
            component="OccupancyExport",
            suggested_action="wall_thickness must be an integer >= 1",
        )

    w = wall_thickness
    pitch = 2 * w
    maze = np.ones((grids.rows * pitch + w, grids.cols * pitch + w), dtype=np.int32)

    for row in range(grids.rows):
        for col in range(grids.cols):
            r_start = row * pitch + w
            c_start = col * pitch + w
            maze[r_start : r_start + w, c_start : c_start + w] = 0

            if col < grids.cols - 1 and grids.verticals[row, col]:
                maze[r_start : r_start + w, c_start + w : c_start + pitch] = 0
            if row < grids.rows - 1 and grids.horizontals[row, col]:
                maze[r_start + w : r_start + pitch, c_start : c_start + w] = 0

    return maze


def verify_perfect_maze(grids: MazeGrids) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    Connectivity is checked with a breadth-first search over openings from
    cell (0, 0); acyclicity with a union-find pass over every opening, where
    a union between cells already in the same set is a redundant edge.

    Args:
        grids: Maze grids to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Every cell reachable from (0, 0)
        - is_no_loops: No redundant edges
        - all_visited: Every visited marker set
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of openings
        - expected_passages: Openings expected for a perfect maze
        - redundant_edges: Openings that closed a cycle
    """
    total_cells = grids.num_cells

    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        current = queue.popleft()
        for neighbor in grids.passages_from(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    parent = list(range(total_cells))

    def find(index: int) -> int:
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    redundant_edges = 0
    for (row_a, col_a), (row_b, col_b) in grids.opened_edges():
        root_a = find(row_a * grids.cols + col_a)
        root_b = find(row_b * grids.cols + col_b)
        if root_a == root_b:
            redundant_edges += 1
        else:
            parent[root_b] = root_a

    passage_count = grids.passage_count
    expected_passages = total_cells - 1
    is_connected = len(seen) == total_cells
    is_no_loops = redundant_edges == 0 and passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "all_visited": bool(np.all(grids.visited)),
        "visited_cells": len(seen),
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
        "redundant_edges": redundant_edges,
    }


def generate_maze(
    rows: int,
    cols: int,
    seed: int | None = None,
    wall_thickness: int = 1,
) -> NDArray[np.int32]:
    """
    High-level function to generate a perfect maze.

    Args:
        rows: Number of rows
        cols: Number of columns
        seed: Random seed for reproducibility
        wall_thickness: Thickness of walls in the returned array

    Returns:
        Numpy array maze representation (1 = wall, 0 = passage)

    Example:
        >>> maze = generate_maze(20, 20, seed=42)
        >>> print(f"Maze shape: {maze.shape}")
        Maze shape: (41, 41)
    """
    grids = generate_maze_grids(rows, cols, seed=seed)

    verification = verify_perfect_maze(grids)
    if not verification["is_perfect"]:
        raise MazeGenerationError(
            "Generated maze is not perfect",
            error_code="NOT_PERFECT",
            diagnostic_data=verification,
        )

    return grids_to_occupancy(grids, wall_thickness=wall_thickness)
