"""Grid environment for cleanerbot."""

from .grid import (
    CellState,
    CleanerbotError,
    Grid,
    InvalidDimensionsError,
    OutOfRangeError,
)
from .schemas import CleaningReport, GridLayout, GridState
from .helpers import (
    LEGEND,
    ROBOT_SYMBOL,
    build_grid,
    grid_from_layout,
    parse_coordinate,
    render_grid,
)

__all__ = [
    "CellState",
    "CleanerbotError",
    "Grid",
    "InvalidDimensionsError",
    "OutOfRangeError",
    "CleaningReport",
    "GridLayout",
    "GridState",
    "LEGEND",
    "ROBOT_SYMBOL",
    "build_grid",
    "grid_from_layout",
    "parse_coordinate",
    "render_grid",
]
