"""Robot that walks a :class:`~cleanerbot.environment.Grid` and cleans it.

The robot is the only thing strategies talk to. It keeps its own position,
asks the grid whether a destination is enterable and delegates cell changes
back to the grid. The grid is borrowed, not owned: whoever built it keeps it
after the run and can inspect the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from .environment import CleaningReport, Grid
from .logging_utils import EMOJI_INFO, EMOJI_SUCCESS, log_info, log_success

if TYPE_CHECKING:
    from .strategies import CleaningStrategy

# Called with the grid and the robot's position after every visible change.
Observer = Callable[[Grid, Tuple[int, int]], None]


class Robot:
    """Single cleaning robot bound to one grid and one strategy."""

    def __init__(
        self,
        grid: Grid,
        strategy: "CleaningStrategy",
        *,
        observer: Optional[Observer] = None,
        quiet: bool = False,
    ):
        self._grid = grid
        self._strategy = strategy
        self._observer = observer
        self._quiet = quiet
        self.x = 0
        self.y = 0
        # Position after every successful move, in order. Revisits are kept.
        self.path: List[Tuple[int, int]] = []
        self.moves = 0
        self.blocked_moves = 0
        self.cells_cleaned = 0

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def strategy(self) -> "CleaningStrategy":
        return self._strategy

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> bool:
        """Move to ``(x, y)`` if it is inside the grid and not an obstacle.

        Returns True on success. A refused move leaves the position untouched
        and does not notify the observer.
        """
        if not self._grid.in_bounds(x, y) or self._grid.is_obstacle(x, y):
            self.blocked_moves += 1
            return False

        self.x = x
        self.y = y
        self.moves += 1
        self.path.append((x, y))
        self._notify()
        return True

    def move_by(self, dx: int, dy: int) -> bool:
        return self.move_to(self.x + dx, self.y + dy)

    def clean_here(self) -> None:
        """Clean the current cell if it holds dirt; otherwise do nothing."""
        if self._grid.is_dirt(self.x, self.y):
            self._grid.mark_cleaned(self.x, self.y)
            self.cells_cleaned += 1
            self._notify()

    def run(self) -> CleaningReport:
        """Hand control to the strategy until it finishes, then summarize."""
        name = self._strategy.name
        if not self._quiet:
            log_info(f"{EMOJI_INFO} Starting {name} run on {self._grid.width}x{self._grid.height} grid")

        self._strategy.clean(self)

        report = self.report()
        if not self._quiet:
            log_success(
                f"{EMOJI_SUCCESS} {name} finished at {report.final_position}: "
                f"{report.moves} moves, {report.cells_cleaned} cleaned, "
                f"{report.remaining_dirt} dirt left"
            )
        return report

    start_cleaning = run

    def report(self) -> CleaningReport:
        return CleaningReport(
            strategy=self._strategy.name,
            moves=self.moves,
            blocked_moves=self.blocked_moves,
            cells_cleaned=self.cells_cleaned,
            remaining_dirt=self._grid.dirt_count(),
            final_position=self.position,
        )

    def _notify(self) -> None:
        if self._observer is not None:
            self._observer(self._grid, self.position)
