"""
Cleaning strategies: fixed, deterministic traversal patterns for a Robot.

A strategy takes full control of a robot for one run and returns when its
pattern is finished. Strategies hold no state between runs; cursors and
bounds live in local variables of ``clean()`` so one instance can drive any
number of robots.

Available patterns:
- ``PerimeterHuggerStrategy``: one lap around the outer ring, stopping each
  sweep where an edge or obstacle blocks the next step.
- ``SpiralStrategy``: concentric rings moving inward, stopping as soon as the
  grid has no dirt left.
- ``SerpentineStrategy``: row-by-row sweep alternating direction each row.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Optional, Type

if TYPE_CHECKING:
    from .robot import Robot


class CleaningStrategy(ABC):
    """Abstract base class for a robot traversal pattern."""

    name: str = "strategy"

    @abstractmethod
    def clean(self, robot: "Robot") -> None:
        """Drive ``robot`` until the pattern terminates."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PerimeterHuggerStrategy(CleaningStrategy):
    """Single lap of the outer perimeter.

    Starts at the origin, then sweeps right, down, left and up. Each sweep
    keeps stepping until the next cell is off the grid or an obstacle, so an
    obstacle on the edge shortens the lap instead of being walked around.
    Interior cells are never visited.
    """

    name = "perimeter"

    def clean(self, robot: "Robot") -> None:
        robot.move_to(0, 0)
        robot.clean_here()

        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            while robot.move_by(dx, dy):
                robot.clean_here()


class SpiralStrategy(CleaningStrategy):
    """Inward spiral over shrinking ring bounds.

    Every single step is preceded by a dirt check on the whole grid, so the
    run ends the moment the last dirty cell is cleaned. Obstacles are not
    detoured: a refused move is skipped and the sweep cursor carries on to
    the next coordinate.
    """

    name = "spiral"

    def clean(self, robot: "Robot") -> None:
        grid = robot.grid
        left, right = 0, grid.width - 1
        top, bottom = 0, grid.height - 1

        while left <= right and top <= bottom:
            for x in range(left, right + 1):
                if not self._step(robot, x, top):
                    return
            top += 1

            for y in range(top, bottom + 1):
                if not self._step(robot, right, y):
                    return
            right -= 1

            # Inner ring may have collapsed to a single row or column.
            if top <= bottom:
                for x in range(right, left - 1, -1):
                    if not self._step(robot, x, bottom):
                        return
            bottom -= 1

            if left <= right:
                for y in range(bottom, top - 1, -1):
                    if not self._step(robot, left, y):
                        return
            left += 1

    @staticmethod
    def _step(robot: "Robot", x: int, y: int) -> bool:
        """Visit one cell. Returns False once there is nothing left to clean."""
        if not robot.grid.has_remaining_dirt():
            return False
        if robot.move_to(x, y):
            robot.clean_here()
        return True


class SerpentineStrategy(CleaningStrategy):
    """Boustrophedon sweep: even rows left to right, odd rows right to left."""

    name = "serpentine"

    def clean(self, robot: "Robot") -> None:
        grid = robot.grid
        for y in range(grid.height):
            xs = range(grid.width) if y % 2 == 0 else range(grid.width - 1, -1, -1)
            for x in xs:
                if robot.move_to(x, y):
                    robot.clean_here()


# Menu choices and names accepted by resolve_strategy()
STRATEGIES: Dict[str, Type[CleaningStrategy]] = {
    "1": PerimeterHuggerStrategy,
    "perimeter": PerimeterHuggerStrategy,
    "perimeter-hugger": PerimeterHuggerStrategy,
    "2": SpiralStrategy,
    "spiral": SpiralStrategy,
    "3": SerpentineStrategy,
    "serpentine": SerpentineStrategy,
}

DEFAULT_STRATEGY: Type[CleaningStrategy] = PerimeterHuggerStrategy


def resolve_strategy(choice: Optional[str]) -> CleaningStrategy:
    """Map a menu choice or strategy name to a new strategy instance.

    Matching ignores case and surrounding whitespace. Anything unrecognized,
    including an empty answer, falls back to the perimeter hugger.
    """
    key = (choice or "").strip().lower()
    return STRATEGIES.get(key, DEFAULT_STRATEGY)()


def is_known_strategy(choice: Optional[str]) -> bool:
    return (choice or "").strip().lower() in STRATEGIES
