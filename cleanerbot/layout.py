"""
Layout loading for JSON-defined grids.

A layout file describes the starting grid for a run: its size and which
cells hold dirt or obstacles. Coordinates are ``[x, y]`` pairs.

Layout file structure:
```json
{
  "name": "Default room",
  "width": 10,
  "height": 6,
  "dirt": [[5, 3], [8, 2]],
  "obstacles": [[2, 4], [7, 1]]
}
```

Usage:
    loader = LayoutLoader()
    grid = loader.load_grid("default")
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from .config import Config
from .environment import Grid, GridLayout, grid_from_layout


class LayoutLoader:
    """Load and validate grid layouts from JSON files.

    Layouts are looked up as ``{layouts_dir}/{name}.json``; a value that
    already points at an existing file is used as-is. Field types are
    checked by pydantic, coordinates against the grid when it is built.
    """

    REQUIRED_FIELDS = ("width", "height")

    def __init__(self, layouts_dir: Optional[Path] = None):
        """Initialize layout loader.

        Args:
            layouts_dir: Directory containing layout files.
                         Defaults to ``Config.LAYOUTS_DIR``
        """
        self.layouts_dir = layouts_dir or Config.LAYOUTS_DIR

    def resolve_path(self, layout: Union[str, Path]) -> Path:
        candidate = Path(layout)
        if candidate.suffix == ".json" and candidate.exists():
            return candidate
        return self.layouts_dir / f"{layout}.json"

    def load(self, layout: Union[str, Path]) -> GridLayout:
        """Read and validate a layout.

        Raises:
            FileNotFoundError: If no layout file can be found
            ValueError: If required fields are missing
            json.JSONDecodeError: If the file contains invalid JSON
            pydantic.ValidationError: If fields have the wrong shape
        """
        path = self.resolve_path(layout)
        if not path.exists():
            raise FileNotFoundError(f"Layout '{layout}' not found at {path}")

        data = json.loads(path.read_text())
        self._validate_layout(data)
        data.setdefault("name", path.stem)
        return GridLayout(**data)

    def load_grid(self, layout: Union[str, Path]) -> Grid:
        """Load a layout and build the seeded grid.

        Raises:
            InvalidDimensionsError: If width/height are not positive
            OutOfRangeError: If a seeded cell lies outside the grid
        """
        return grid_from_layout(self.load(layout))

    def _validate_layout(self, data: Dict) -> None:
        if not isinstance(data, dict):
            raise ValueError("Layout file must contain a JSON object")

        missing = [field for field in self.REQUIRED_FIELDS if field not in data]
        if missing:
            raise ValueError(f"Layout missing required fields: {missing}")
