"""
Cleanerbot - grid-cleaning robot simulation.

A robot walks a rectangular grid of empty, dirty and obstacle cells using a
fixed traversal strategy and cleans the dirt it lands on.
"""

__version__ = "0.1.0"

from .environment import (
    CellState,
    CleanerbotError,
    CleaningReport,
    Grid,
    GridLayout,
    GridState,
    InvalidDimensionsError,
    OutOfRangeError,
    build_grid,
    render_grid,
)
from .robot import Robot
from .strategies import (
    CleaningStrategy,
    PerimeterHuggerStrategy,
    SerpentineStrategy,
    SpiralStrategy,
    STRATEGIES,
    resolve_strategy,
)
from .display import ConsoleRenderer
from .layout import LayoutLoader
from .config import Config

__all__ = [
    "CellState",
    "CleanerbotError",
    "CleaningReport",
    "Grid",
    "GridLayout",
    "GridState",
    "InvalidDimensionsError",
    "OutOfRangeError",
    "build_grid",
    "render_grid",
    "Robot",
    "CleaningStrategy",
    "PerimeterHuggerStrategy",
    "SerpentineStrategy",
    "SpiralStrategy",
    "STRATEGIES",
    "resolve_strategy",
    "ConsoleRenderer",
    "LayoutLoader",
    "Config",
]
