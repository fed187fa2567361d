"""Pydantic schemas for grid snapshots, layouts and run reports.

These models mirror the in-memory :class:`~cleanerbot.environment.grid.Grid`
but stay serializable so a layout can be loaded from JSON and a finished run
can be reported or dumped.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class GridState(BaseModel):
    """Sparse representation of a grid; missing cells are empty."""

    width: int
    height: int
    cells: Dict[Tuple[int, int], str] = Field(
        default_factory=dict,
        description="Sparse map: (x, y) → cell state value",
    )


class GridLayout(BaseModel):
    """Seed description for a grid: dimensions plus dirt and obstacle cells."""

    name: Optional[str] = None
    width: int
    height: int
    dirt: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Cells seeded with dirt",
    )
    obstacles: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Cells seeded with obstacles (applied after dirt)",
    )


class CleaningReport(BaseModel):
    """Summary of one cleaning run."""

    strategy: str
    moves: int = 0
    blocked_moves: int = 0
    cells_cleaned: int = 0
    remaining_dirt: int = 0
    final_position: Tuple[int, int] = (0, 0)

    @property
    def fully_clean(self) -> bool:
        return self.remaining_dirt == 0
