"""
Unit tests for maze layout assembly (grids, walls, start/goal and markers).
"""

import json
import random

import pytest

from mazegen.config import MazeConfig
from mazegen.geometry.mazes import Marker, build_maze_layout, count_internal_walls, verify_perfect_maze
from mazegen.utils.maze_logging import configure_logging


class TestBuildMazeLayout:
    """Test the high-level layout builder."""

    def test_default_layout(self, default_config):
        layout = build_maze_layout(default_config)

        assert layout.grids.rows == 5
        assert layout.grids.cols == 10
        assert layout.unit_width == 80.0
        assert layout.unit_height == 120.0
        assert verify_perfect_maze(layout.grids)["is_perfect"]

    def test_wall_counts(self, small_config):
        layout = build_maze_layout(small_config)

        assert len(layout.boundary_walls) == 4
        assert len(layout.internal_walls) == count_internal_walls(layout.grids)
        assert len(layout.walls) == 4 + len(layout.internal_walls)

    def test_start_and_goal(self, small_config):
        layout = build_maze_layout(small_config)
        row, col = layout.start

        assert 0 <= row < 3
        assert 0 <= col < 4
        assert layout.goal == (2, 3)

    def test_goal_marker(self, default_config):
        layout = build_maze_layout(default_config)

        marker = layout.goal_marker

        assert marker.label == "goal"
        assert (marker.x, marker.y) == (760.0, 540.0)
        assert marker.width == pytest.approx(56.0)
        assert marker.height == pytest.approx(84.0)
        assert marker.radius is None

    def test_agent_marker_at_start(self, default_config):
        layout = build_maze_layout(default_config)
        x, y = layout.cell_center(layout.start)

        assert layout.agent_marker.label == "ball"
        assert (layout.agent_marker.x, layout.agent_marker.y) == (x, y)
        assert layout.agent_marker.radius == 20.0

    def test_cell_center(self, small_config):
        layout = build_maze_layout(small_config)
        assert layout.cell_center((0, 0)) == (5.0, 5.0)
        assert layout.cell_center((2, 3)) == (35.0, 25.0)

    def test_seeded_config_is_reproducible(self, small_config):
        first = build_maze_layout(small_config)
        second = build_maze_layout(small_config)

        assert first.to_dict() == second.to_dict()

    def test_explicit_rng_overrides_seed(self, small_config):
        first = build_maze_layout(small_config, rng=random.Random(100))
        second = build_maze_layout(small_config, rng=random.Random(100))

        assert first.walls == second.walls
        assert first.start == second.start

    def test_default_config_used_when_missing(self):
        layout = build_maze_layout()
        assert (layout.grids.rows, layout.grids.cols) == (5, 10)

    @pytest.mark.parametrize(("rows", "cols"), [(1, 1), (1, 5)])
    def test_degenerate_layouts(self, rows, cols):
        layout = build_maze_layout(MazeConfig(rows=rows, cols=cols, width=100.0 * cols, height=100.0 * rows, seed=0))

        assert len(layout.boundary_walls) == 4
        assert layout.internal_walls == []

    def test_large_grid_with_default_viewport(self, tmp_path):
        log_file = tmp_path / "layout.log"
        configure_logging(level="WARNING", log_file_path=log_file, use_colors=False)

        layout = build_maze_layout(MazeConfig(rows=150, cols=10, seed=0))

        assert verify_perfect_maze(layout.grids)["is_perfect"]
        assert len(layout.internal_walls) == count_internal_walls(layout.grids)
        assert "walls will overlap passages" in log_file.read_text()


class TestLayoutSerialization:
    """Test the JSON description of a layout."""

    def test_to_dict_is_json_serializable(self, small_config):
        data = build_maze_layout(small_config).to_dict()
        restored = json.loads(json.dumps(data))

        assert restored["rows"] == 3
        assert restored["cols"] == 4
        assert restored["goal"] == [2, 3]
        assert len(restored["verticals"]) == 3
        assert len(restored["horizontals"]) == 2
        assert {marker["label"] for marker in restored["markers"]} == {"goal", "ball"}

    def test_wall_entries(self, small_config):
        data = build_maze_layout(small_config).to_dict()

        assert data["walls"][0]["tag"] == "boundary"
        assert all(set(wall) == {"x", "y", "width", "height", "tag"} for wall in data["walls"])

    def test_marker_dict_omits_unused_fields(self):
        marker = Marker(label="ball", x=1.0, y=2.0, radius=0.5)
        assert marker.to_dict() == {"label": "ball", "x": 1.0, "y": 2.0, "radius": 0.5}
