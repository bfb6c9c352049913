"""
Command-line interface for mazegen.

Provides CLI tools for generating mazes, exporting their wall geometry as
JSON, and checking that generated mazes are perfect.
"""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from mazegen import __version__
from mazegen.config import MazeConfig, load_maze_config
from mazegen.geometry.mazes import build_maze_layout, generate_maze_grids, grids_to_occupancy, verify_perfect_maze
from mazegen.utils.maze_logging import configuration_summary, configure_logging, get_logger, log_validation_error

WALL_CHAR = "#"
PASSAGE_CHAR = " "

logger = get_logger(__name__)


def _resolve_config(config_path, **overrides) -> MazeConfig:
    """Load the YAML config (if any) and apply explicit command-line overrides."""
    try:
        base = load_maze_config(config_path) if config_path else MazeConfig()
    except ValueError as e:
        log_validation_error(logger, "MazeConfig", str(e), suggestion="Fix the YAML file or drop --config")
        raise click.UsageError(str(e)) from e

    data = base.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return MazeConfig.model_validate(data)
    except ValidationError as e:
        log_validation_error(
            logger,
            "MazeConfig",
            f"{e.error_count()} invalid field(s)",
            suggestion="Run with --help to see accepted ranges",
        )
        raise click.UsageError(f"Invalid maze configuration:\n{e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="mazegen")
def main():
    """
    mazegen: perfect maze generation

    Carves a random spanning-tree maze with a depth-first traversal and
    derives the wall rectangles needed to build it in a scene.
    """


@main.command()
@click.option("--rows", "-r", type=click.IntRange(min=1), default=None, help="Number of cell rows")
@click.option("--cols", "-c", type=click.IntRange(min=1), default=None, help="Number of cell columns")
@click.option("--width", type=float, default=None, help="Total width of the maze area")
@click.option("--height", type=float, default=None, help="Total height of the maze area")
@click.option("--wall-thickness", type=float, default=None, help="Thickness of internal walls")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML maze configuration; explicit options override it",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write JSON here instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def generate(rows, cols, width, height, wall_thickness, seed, config_path, output, verbose):
    """
    Generate a maze and print its layout as JSON.

    Examples:
        mazegen generate --rows 5 --cols 10 --seed 42
        mazegen generate --config maze.yaml -o layout.json
    """
    config = _resolve_config(
        config_path,
        rows=rows,
        cols=cols,
        width=width,
        height=height,
        wall_thickness=wall_thickness,
        seed=seed,
    )
    configure_logging(
        level="DEBUG" if verbose else "ERROR",
        use_colors=config.logging.use_colors,
        log_file_path=config.logging.log_file,
    )
    logger.debug(f"Logging configuration: {configuration_summary()}")

    if config.walls_swallow_cells:
        click.echo(
            f"Warning: wall thickness {config.wall_thickness} is not smaller than a "
            f"{config.unit_width:.3f} x {config.unit_height:.3f} cell; walls will overlap passages",
            err=True,
        )

    layout = build_maze_layout(config)
    payload = json.dumps(layout.to_dict(), indent=2)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n")
        click.echo(f"Wrote {len(layout.walls)} walls for a {config.rows}x{config.cols} maze to {output_path}")
    else:
        click.echo(payload)


@main.command()
@click.option("--rows", "-r", type=click.IntRange(min=1), default=5, help="Number of cell rows")
@click.option("--cols", "-c", type=click.IntRange(min=1), default=10, help="Number of cell columns")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
def verify(rows, cols, seed):
    """Generate a maze and report whether it is a perfect maze."""
    grids = generate_maze_grids(rows, cols, seed=seed)
    report = verify_perfect_maze(grids)

    click.echo(f"Maze {rows}x{cols}, start {grids.start}")
    for key, value in report.items():
        click.echo(f"  {key}: {value}")

    if not report["is_perfect"]:
        click.echo("Maze is NOT perfect", err=True)
        sys.exit(1)


@main.command()
@click.option("--rows", "-r", type=click.IntRange(min=1), default=5, help="Number of cell rows")
@click.option("--cols", "-c", type=click.IntRange(min=1), default=10, help="Number of cell columns")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
@click.option("--wall-thickness", type=click.IntRange(min=1), default=1, help="Wall thickness in characters")
def show(rows, cols, seed, wall_thickness):
    """Print a maze as text ('#' = wall)."""
    grids = generate_maze_grids(rows, cols, seed=seed)
    occupancy = grids_to_occupancy(grids, wall_thickness=wall_thickness)

    for line in occupancy:
        click.echo("".join(WALL_CHAR if value else PASSAGE_CHAR for value in line))


if __name__ == "__main__":
    main()
