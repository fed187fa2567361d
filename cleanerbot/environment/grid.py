"""Cell-state grid for cleaning simulations.

The grid is the single authority on bounds and cell contents. Queries on
coordinates outside the grid answer ``False`` instead of raising, so movement
code can treat a blocked edge exactly like an obstacle.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .schemas import GridState


class CleanerbotError(Exception):
    """Base class for setup errors raised by cleanerbot."""


class InvalidDimensionsError(CleanerbotError, ValueError):
    """Raised when a grid is created with a non-positive width or height."""


class OutOfRangeError(CleanerbotError, IndexError):
    """Raised when seeding a cell that lies outside the grid."""


class CellState(str, Enum):
    """Contents of a single grid cell."""

    EMPTY = "empty"
    DIRT = "dirt"
    OBSTACLE = "obstacle"
    CLEANED = "cleaned"


class Grid:
    """Fixed-size rectangular grid of :class:`CellState` values.

    Coordinates are ``(x, y)`` with ``x`` along the width and ``y`` along the
    height; ``(0, 0)`` is the top-left cell.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self._cells: Dict[Tuple[int, int], CellState] = {
            (x, y): CellState.EMPTY for x in range(width) for y in range(height)
        }

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Optional[CellState]:
        """Return the state at ``(x, y)`` or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[(x, y)]

    def is_dirt(self, x: int, y: int) -> bool:
        return self.cell(x, y) is CellState.DIRT

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.cell(x, y) is CellState.OBSTACLE

    def mark_obstacle(self, x: int, y: int) -> None:
        self._seed(x, y, CellState.OBSTACLE)

    def mark_dirt(self, x: int, y: int) -> None:
        self._seed(x, y, CellState.DIRT)

    def mark_cleaned(self, x: int, y: int) -> None:
        """Set ``(x, y)`` to cleaned. Out-of-range coordinates are ignored."""
        if self.in_bounds(x, y):
            self._cells[(x, y)] = CellState.CLEANED

    def has_remaining_dirt(self) -> bool:
        """Return True while any cell still holds dirt (full scan)."""
        return any(state is CellState.DIRT for state in self._cells.values())

    def dirt_count(self) -> int:
        return sum(1 for state in self._cells.values() if state is CellState.DIRT)

    def cells(self) -> Iterator[Tuple[Tuple[int, int], CellState]]:
        """Yield ``((x, y), state)`` in row-major order (y outer, x inner)."""
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y), self._cells[(x, y)]

    def to_state(self) -> GridState:
        """Return a sparse, serializable snapshot (empty cells omitted)."""
        return GridState(
            width=self._width,
            height=self._height,
            cells={
                coord: state.value
                for coord, state in self.cells()
                if state is not CellState.EMPTY
            },
        )

    @classmethod
    def from_state(cls, state: GridState) -> "Grid":
        grid = cls(state.width, state.height)
        for (x, y), value in state.cells.items():
            grid._seed(x, y, CellState(value))
        return grid

    def _seed(self, x: int, y: int, state: CellState) -> None:
        if not self.in_bounds(x, y):
            raise OutOfRangeError(
                f"({x}, {y}) is outside the {self._width}x{self._height} grid"
            )
        self._cells[(x, y)] = state

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, dirt={self.dirt_count()})"
