"""Utilities for building and rendering cleaning grids."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .grid import CellState, Grid
from .schemas import GridLayout


ROBOT_SYMBOL = "R"

_DEFAULT_CELL_SYMBOLS: Dict[CellState, str] = {
    CellState.EMPTY: ".",
    CellState.DIRT: "D",
    CellState.OBSTACLE: "#",
    CellState.CLEANED: "C",
}

LEGEND = "Legends: #=Obstacles, D=Dirt, .=Empty, R=Robot, C=Cleaned"


def build_grid(
    width: int,
    height: int,
    *,
    dirt: Iterable[Tuple[int, int]] = (),
    obstacles: Iterable[Tuple[int, int]] = (),
) -> Grid:
    """Create a grid and seed it. Obstacles are applied after dirt, so a cell
    listed in both ends up as an obstacle."""

    grid = Grid(width, height)
    for x, y in dirt:
        grid.mark_dirt(x, y)
    for x, y in obstacles:
        grid.mark_obstacle(x, y)
    return grid


def grid_from_layout(layout: GridLayout) -> Grid:
    return build_grid(
        layout.width,
        layout.height,
        dirt=layout.dirt,
        obstacles=layout.obstacles,
    )


def parse_coordinate(text: str) -> Tuple[int, int]:
    """Parse ``"x,y"`` (whitespace tolerated) into an ``(x, y)`` tuple.

    Raises:
        ValueError: If the text is not two comma separated integers.
    """

    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected coordinate as 'x,y', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Coordinate values must be integers, got {text!r}") from None


def render_grid(
    grid: Grid,
    robot_position: Optional[Tuple[int, int]] = None,
    *,
    symbols: Optional[Dict[CellState, str]] = None,
) -> str:
    """Render the whole grid as text, one row per line, top row first.

    Each cell is a symbol followed by a space. The robot's cell shows ``R``
    whatever lies underneath; the grid itself is not touched.
    """

    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    lines: List[str] = []
    for y in range(grid.height):
        row_chars: List[str] = []
        for x in range(grid.width):
            if robot_position == (x, y):
                row_chars.append(f"{ROBOT_SYMBOL} ")
            else:
                row_chars.append(f"{mapping[grid.cell(x, y)]} ")
        lines.append("".join(row_chars))

    return "\n".join(lines)
