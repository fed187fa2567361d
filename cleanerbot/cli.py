"""
Command-line driver for the cleaning simulation.

Builds a grid (from a layout file, command-line seeds or the built-in
default room), asks which strategy to use unless one is given, runs the
robot with a console renderer attached and prints a summary.

Run: cleanerbot --strategy spiral --delay 0
"""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional, Sequence, Tuple

from .config import Config
from .display import ConsoleRenderer
from .environment import CellState, CleanerbotError, CleaningReport, Grid, build_grid, parse_coordinate
from .layout import LayoutLoader
from .logging_utils import (
    EMOJI_DETERMINISTIC,
    EMOJI_ERROR,
    EMOJI_INFO,
    log_deterministic,
    log_error,
    log_info,
)
from .robot import Robot
from .strategies import CleaningStrategy, is_known_strategy, resolve_strategy

DEFAULT_DIRT: List[Tuple[int, int]] = [(5, 3), (8, 2)]
DEFAULT_OBSTACLES: List[Tuple[int, int]] = [(2, 4), (7, 1)]

STRATEGY_PROMPT = (
    "Select cleaning strategy:\n"
    "  1) Perimeter hugger\n"
    "  2) Spiral\n"
    "  3) Serpentine\n"
    "Choice [1]: "
)


def _coordinate(text: str) -> Tuple[int, int]:
    try:
        return parse_coordinate(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Grid-cleaning robot simulation")
    parser.add_argument("--strategy", help="perimeter, spiral or serpentine (prompted if omitted)")
    parser.add_argument("--layout", help="Layout name under examples/layouts or path to a .json file")
    parser.add_argument("--width", type=int, help=f"Grid width (default {Config.GRID_WIDTH})")
    parser.add_argument("--height", type=int, help=f"Grid height (default {Config.GRID_HEIGHT})")
    parser.add_argument("--dirt", type=_coordinate, action="append", metavar="X,Y", help="Seed dirt at X,Y (repeatable)")
    parser.add_argument("--obstacle", type=_coordinate, action="append", metavar="X,Y", help="Seed an obstacle at X,Y (repeatable)")
    parser.add_argument("--delay", type=float, help=f"Seconds between frames (default {Config.STEP_DELAY_SECONDS})")
    parser.add_argument("--no-prompt", action="store_true", help=f"Skip the prompt and use CLEANERBOT_STRATEGY ({Config.STRATEGY})")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames")
    return parser.parse_args(argv)


def prompt_strategy(input_fn: Callable[[str], str] = input) -> CleaningStrategy:
    """Ask the user for a strategy; unknown or empty answers pick the perimeter hugger."""
    try:
        answer = input_fn(STRATEGY_PROMPT)
    except EOFError:
        answer = ""

    if answer.strip() and not is_known_strategy(answer):
        log_error(f"{EMOJI_ERROR} Unknown strategy {answer.strip()!r}, using perimeter hugger")
    return resolve_strategy(answer)


def build_grid_from_args(args: argparse.Namespace) -> Grid:
    """Build the starting grid.

    A layout wins over everything else. Otherwise explicit ``--dirt`` /
    ``--obstacle`` seeds are used, falling back to the default room seeds
    that fit inside the requested size.
    """
    if args.layout:
        return LayoutLoader().load_grid(args.layout)

    width = args.width if args.width is not None else Config.GRID_WIDTH
    height = args.height if args.height is not None else Config.GRID_HEIGHT

    if args.dirt or args.obstacle:
        return build_grid(width, height, dirt=args.dirt or [], obstacles=args.obstacle or [])

    grid = Grid(width, height)
    for x, y in DEFAULT_DIRT:
        if grid.in_bounds(x, y):
            grid.mark_dirt(x, y)
    for x, y in DEFAULT_OBSTACLES:
        if grid.in_bounds(x, y):
            grid.mark_obstacle(x, y)
    return grid


def run_cleaning(
    grid: Grid,
    strategy: CleaningStrategy,
    renderer: Optional[ConsoleRenderer] = None,
) -> CleaningReport:
    """Run one cleaning pass with ``renderer`` observing every change."""
    renderer = renderer or ConsoleRenderer()
    # Show the starting room before the robot moves.
    renderer(grid, (0, 0))
    robot = Robot(grid, strategy, observer=renderer)
    return robot.run()


def main(argv: Optional[Sequence[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        Config.validate()
        grid = build_grid_from_args(args)
    except (CleanerbotError, ValueError, FileNotFoundError) as exc:
        log_error(f"{EMOJI_ERROR} {exc}")
        return 1

    log_info(f"{EMOJI_INFO} Initialize robot")
    obstacles = sum(1 for _, state in grid.cells() if state is CellState.OBSTACLE)
    log_deterministic(
        f"{EMOJI_DETERMINISTIC} Grid {grid.width}x{grid.height}: "
        f"{grid.dirt_count()} dirt, {obstacles} obstacles"
    )
    choice = args.strategy
    if choice is None and args.no_prompt:
        choice = Config.STRATEGY
    if choice is not None:
        if not is_known_strategy(choice):
            log_error(f"{EMOJI_ERROR} Unknown strategy {choice!r}, using perimeter hugger")
        strategy = resolve_strategy(choice)
    else:
        strategy = prompt_strategy(input_fn)

    renderer = ConsoleRenderer(
        delay_seconds=args.delay,
        clear_screen=False if args.no_clear else None,
    )
    run_cleaning(grid, strategy, renderer)
    print("Done.")
    return 0
