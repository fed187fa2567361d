"""Console renderer that redraws the grid after every robot change."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from .config import Config
from .environment import LEGEND, Grid, render_grid

CLEAR_SEQUENCE = "\033[2J\033[H"

TITLE = "Vacuum cleaner robot simulation"


class ConsoleRenderer:
    """Robot observer that prints a titled grid snapshot and then pauses.

    The pause is purely for animation. Pass ``delay_seconds=0`` (or a fake
    ``sleep``) to render without waiting on the wall clock.
    """

    def __init__(
        self,
        *,
        delay_seconds: Optional[float] = None,
        clear_screen: Optional[bool] = None,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.delay_seconds = Config.STEP_DELAY_SECONDS if delay_seconds is None else delay_seconds
        self.clear_screen = Config.CLEAR_SCREEN if clear_screen is None else clear_screen
        self._stream = stream
        self._sleep = sleep
        self.frames = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output.
        return self._stream or sys.stdout

    def frame(self, grid: Grid, robot_position: Tuple[int, int]) -> str:
        lines = [
            TITLE,
            "-" * 32,
            LEGEND,
            render_grid(grid, robot_position),
        ]
        return "\n".join(lines)

    def __call__(self, grid: Grid, robot_position: Tuple[int, int]) -> None:
        out = self.stream
        if self.clear_screen:
            out.write(CLEAR_SEQUENCE)
        out.write(self.frame(grid, robot_position) + "\n")
        out.flush()
        self.frames += 1
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
