"""
Exception classes for mazegen with helpful error messages and user guidance.

Every error carries the component that raised it, an optional suggested
action, a stable error code and a dictionary of diagnostic values, so callers
can both show a readable message and branch on ``error_code``.
"""

from __future__ import annotations

import numbers
from typing import Any


class MazeGenerationError(Exception):
    """
    Base exception for maze generation errors with context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "MazeGenerator"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensionsError(MazeGenerationError, ValueError):
    """Exception raised when grid dimensions are not positive integers."""

    def __init__(self, rows: Any, cols: Any, component: str | None = None):
        self.rows = rows
        self.cols = cols

        diagnostic_data = {
            "rows": repr(rows),
            "cols": repr(cols),
            "rows_type": type(rows).__name__,
            "cols_type": type(cols).__name__,
        }

        super().__init__(
            message=f"Invalid maze dimensions {rows!r} x {cols!r}",
            component=component,
            suggested_action=_generate_dimension_suggestions(rows, cols),
            error_code="INVALID_DIMENSIONS",
            diagnostic_data=diagnostic_data,
        )


class InvalidStartCellError(MazeGenerationError, ValueError):
    """Exception raised when an explicit start cell lies outside the grid."""

    def __init__(self, start: Any, rows: int, cols: int, component: str | None = None):
        self.start = start

        diagnostic_data = {
            "start": repr(start),
            "valid_rows": f"[0, {rows})",
            "valid_cols": f"[0, {cols})",
        }

        super().__init__(
            message=f"Start cell {start!r} is outside the {rows} x {cols} grid",
            component=component,
            suggested_action="Pass a (row, col) pair inside the grid, or omit start to pick one at random",
            error_code="INVALID_START_CELL",
            diagnostic_data=diagnostic_data,
        )


class InvalidGeometryError(MazeGenerationError, ValueError):
    """Exception raised when cell size or wall thickness is not positive."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        component: str | None = None,
        suggested_action: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        super().__init__(
            message=f"Invalid geometry parameter '{parameter_name}'",
            component=component or "WallGeometry",
            suggested_action=suggested_action or f"{parameter_name} must be a positive number",
            error_code="INVALID_GEOMETRY",
            diagnostic_data={"parameter": parameter_name, "provided_value": repr(provided_value)},
        )


class ConflictingRandomSourceError(MazeGenerationError, ValueError):
    """Exception raised when both a seed and a random generator are supplied."""

    def __init__(self, seed: Any, rng: Any, component: str | None = None):
        self.seed = seed
        self.rng = rng

        super().__init__(
            message="Pass either seed or rng, not both",
            component=component,
            suggested_action="Seed the generator yourself, or drop rng and pass seed only",
            error_code="CONFLICTING_RANDOM_SOURCE",
            diagnostic_data={"seed": repr(seed), "rng_type": type(rng).__name__},
        )


class MazeNotGeneratedError(MazeGenerationError):
    """Exception raised when trying to access a maze before generating it."""

    def __init__(self, operation_attempted: str, component: str | None = None):
        self.operation_attempted = operation_attempted

        super().__init__(
            message=f"Cannot perform '{operation_attempted}' - maze has not been generated",
            component=component,
            suggested_action=f"Call generate() first before attempting '{operation_attempted}'",
            error_code="NOT_GENERATED",
            diagnostic_data={"attempted_operation": operation_attempted},
        )


def _generate_dimension_suggestions(rows: Any, cols: Any) -> str:
    """Generate specific suggestions for dimension errors."""

    suggestions = []
    for name, value in (("rows", rows), ("cols", cols)):
        if not _is_integer(value):
            suggestions.append(f"Convert {name} to int")
        elif value < 1:
            suggestions.append(f"Increase {name} to at least 1")

    return " | ".join(suggestions) if suggestions else "Check rows and cols and try again"


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but never a meaningful grid size
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_dimensions(rows: Any, cols: Any, component: str | None = None) -> None:
    """Validate that rows and cols are integers >= 1."""
    if not (_is_integer(rows) and _is_integer(cols)) or rows < 1 or cols < 1:
        raise InvalidDimensionsError(rows, cols, component=component)


def validate_positive(value: Any, parameter_name: str, component: str | None = None) -> None:
    """Validate that a geometric quantity is a positive real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not value > 0:
        raise InvalidGeometryError(parameter_name, value, component=component)
