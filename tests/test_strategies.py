"""Tests for the perimeter, spiral and serpentine traversal strategies."""

import pytest

from cleanerbot.environment import CellState, build_grid
from cleanerbot.robot import Robot
from cleanerbot.strategies import (
    PerimeterHuggerStrategy,
    SerpentineStrategy,
    SpiralStrategy,
    STRATEGIES,
    is_known_strategy,
    resolve_strategy,
)


def _perimeter_cells(width, height):
    return {
        (x, y)
        for x in range(width)
        for y in range(height)
        if x in (0, width - 1) or y in (0, height - 1)
    }


def _run(grid, strategy):
    robot = Robot(grid, strategy, quiet=True)
    report = robot.run()
    return robot, report


def test_perimeter_visits_exactly_the_outer_ring():
    grid = build_grid(10, 6, dirt=[(4, 2), (5, 3)])

    robot, report = _run(grid, PerimeterHuggerStrategy())

    visited = set(robot.path)
    assert len(visited) == 2 * (10 + 6) - 4 == 28
    assert visited == _perimeter_cells(10, 6)
    # Lap closes back at the origin.
    assert robot.position == (0, 0)
    # Interior dirt is left alone.
    assert grid.is_dirt(4, 2) and grid.is_dirt(5, 3)
    assert report.remaining_dirt == 2


def test_perimeter_cleans_dirt_on_the_ring():
    grid = build_grid(10, 6, dirt=[(0, 0), (9, 3), (5, 5), (0, 2)])

    _, report = _run(grid, PerimeterHuggerStrategy())

    assert report.cells_cleaned == 4
    assert grid.has_remaining_dirt() is False
    assert grid.cell(0, 0) is CellState.CLEANED


def test_perimeter_sweep_stops_at_obstacle():
    grid = build_grid(10, 6, obstacles=[(5, 0)])

    robot, _ = _run(grid, PerimeterHuggerStrategy())

    # Top sweep halts at x=4, so column 4 becomes the right edge of the lap.
    expected = _perimeter_cells(5, 6)
    assert set(robot.path) == expected
    assert (5, 0) not in robot.path
    assert (9, 0) not in robot.path


def test_perimeter_is_single_pass_on_tiny_grid():
    grid = build_grid(1, 1, dirt=[(0, 0)])

    robot, report = _run(grid, PerimeterHuggerStrategy())

    assert robot.path == [(0, 0)]
    assert report.fully_clean


def test_spiral_stops_when_dirt_is_gone():
    grid = build_grid(10, 6, dirt=[(5, 3), (8, 2)], obstacles=[(2, 4), (7, 1)])

    robot, report = _run(grid, SpiralStrategy())

    assert grid.has_remaining_dirt() is False
    assert grid.cell(5, 3) is CellState.CLEANED
    assert grid.cell(8, 2) is CellState.CLEANED
    assert robot.position == (5, 3)
    # Outer ring (28) + second ring (18) + part of the third ring (9).
    assert report.moves == 55
    assert report.blocked_moves == 2
    # The third ring's bottom sweep is cut short right after the last dirt.
    assert (4, 3) not in robot.path
    assert (2, 4) not in robot.path
    assert (7, 1) not in robot.path
    assert grid.is_obstacle(2, 4) and grid.is_obstacle(7, 1)


def test_spiral_steps_over_obstacles_without_detour():
    grid = build_grid(5, 1, dirt=[(4, 0)], obstacles=[(2, 0)])

    robot, _ = _run(grid, SpiralStrategy())

    assert robot.path == [(0, 0), (1, 0), (3, 0), (4, 0)]


def test_spiral_without_dirt_does_not_move():
    grid = build_grid(10, 6, obstacles=[(2, 4)])
    assert grid.has_remaining_dirt() is False

    robot, report = _run(grid, SpiralStrategy())

    assert robot.path == []
    assert report.moves == 0
    assert report.blocked_moves == 0


def test_spiral_covers_whole_grid_when_dirt_is_last():
    grid = build_grid(4, 4, dirt=[(1, 2)])

    robot, _ = _run(grid, SpiralStrategy())

    # Ring order: 12 outer cells, then (1,1), (2,1), (2,2), (1,2).
    assert robot.path[-4:] == [(1, 1), (2, 1), (2, 2), (1, 2)]
    assert len(robot.path) == 16
    assert len(set(robot.path)) == 16


@pytest.mark.parametrize("width,height", [(1, 5), (5, 1), (3, 2), (2, 3), (7, 4)])
def test_spiral_never_revisits_a_cell(width, height):
    # Every cell dirty: the run only ends once the last ring cell is cleaned.
    grid = build_grid(width, height, dirt=[(x, y) for x in range(width) for y in range(height)])

    robot, report = _run(grid, SpiralStrategy())

    assert len(robot.path) == len(set(robot.path)) == width * height
    assert report.fully_clean


def test_serpentine_alternates_row_direction():
    grid = build_grid(3, 2, dirt=[(2, 1)])

    robot, report = _run(grid, SerpentineStrategy())

    assert robot.path == [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)]
    assert report.fully_clean


def test_serpentine_skips_obstacles_and_cleans_everything_reachable():
    grid = build_grid(20, 10, dirt=[(5, 3), (10, 8)], obstacles=[(2, 5), (12, 1)])

    robot, report = _run(grid, SerpentineStrategy())

    assert report.fully_clean
    assert report.blocked_moves == 2
    assert (2, 5) not in robot.path and (12, 1) not in robot.path


def test_strategies_are_reusable_between_runs():
    strategy = SpiralStrategy()
    first = build_grid(4, 3, dirt=[(3, 2)])
    second = build_grid(4, 3, dirt=[(3, 2)])

    _, report_a = _run(first, strategy)
    _, report_b = _run(second, strategy)

    assert report_a == report_b


@pytest.mark.parametrize(
    "choice,expected",
    [
        ("1", PerimeterHuggerStrategy),
        ("perimeter", PerimeterHuggerStrategy),
        ("2", SpiralStrategy),
        (" Spiral ", SpiralStrategy),
        ("3", SerpentineStrategy),
        ("serpentine", SerpentineStrategy),
        ("", PerimeterHuggerStrategy),
        (None, PerimeterHuggerStrategy),
        ("zigzag", PerimeterHuggerStrategy),
        ("42", PerimeterHuggerStrategy),
    ],
)
def test_resolve_strategy(choice, expected):
    strategy = resolve_strategy(choice)
    assert type(strategy) is expected


def test_is_known_strategy():
    assert all(is_known_strategy(name) for name in STRATEGIES)
    assert is_known_strategy("SPIRAL")
    assert not is_known_strategy("zigzag")
    assert not is_known_strategy(None)
