"""Tests for text rendering of the grid and the console renderer."""

import io

from cleanerbot.display import CLEAR_SEQUENCE, TITLE, ConsoleRenderer
from cleanerbot.environment import CellState, LEGEND, build_grid, render_grid
from cleanerbot.robot import Robot
from cleanerbot.strategies import SpiralStrategy


def test_render_grid_uses_legend_symbols():
    grid = build_grid(4, 2, dirt=[(1, 0)], obstacles=[(2, 1)])
    grid.mark_dirt(3, 0)
    grid.mark_cleaned(3, 0)

    assert render_grid(grid) == ". D . C \n. . # . "


def test_robot_overrides_cell_in_display_only():
    grid = build_grid(3, 1, dirt=[(1, 0)])

    assert render_grid(grid, (1, 0)) == ". R . "
    assert grid.cell(1, 0) is CellState.DIRT


def test_render_grid_custom_symbols():
    grid = build_grid(2, 1, obstacles=[(0, 0)])

    assert render_grid(grid, symbols={CellState.OBSTACLE: "X"}) == "X . "


def test_renderer_frame_has_header_and_grid():
    grid = build_grid(2, 2, dirt=[(1, 1)])
    renderer = ConsoleRenderer(delay_seconds=0, clear_screen=False)

    lines = renderer.frame(grid, (0, 0)).splitlines()

    assert lines[0] == TITLE
    assert lines[1] == "-" * 32
    assert lines[2] == LEGEND
    assert lines[3:] == ["R . ", ". D "]


def test_renderer_writes_clears_and_sleeps():
    stream = io.StringIO()
    naps = []
    renderer = ConsoleRenderer(delay_seconds=0.2, clear_screen=True, stream=stream, sleep=naps.append)

    renderer(build_grid(1, 1), (0, 0))

    assert stream.getvalue().startswith(CLEAR_SEQUENCE)
    assert "R " in stream.getvalue()
    assert naps == [0.2]
    assert renderer.frames == 1


def test_renderer_zero_delay_never_sleeps():
    naps = []
    renderer = ConsoleRenderer(delay_seconds=0, clear_screen=False, stream=io.StringIO(), sleep=naps.append)

    renderer(build_grid(2, 2), (1, 1))

    assert naps == []


def test_renderer_observes_every_move_and_clean():
    grid = build_grid(10, 6, dirt=[(5, 3), (8, 2)], obstacles=[(2, 4), (7, 1)])
    stream = io.StringIO()
    renderer = ConsoleRenderer(delay_seconds=0, clear_screen=False, stream=stream)

    report = Robot(grid, SpiralStrategy(), observer=renderer, quiet=True).run()

    assert renderer.frames == report.moves + report.cells_cleaned
    assert stream.getvalue().count(TITLE) == renderer.frames
