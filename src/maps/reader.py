# map files -> SlideGrid
# src/maps/reader.py
"""
Map reader: turns puzzle text into a validated SlideGrid.

File format:
- One grid row per line; empty lines are skipped.
- Width is taken from the first row. Shorter rows are padded with the
  wall marker (absent cells are impassable); longer rows are cut.
- Exactly one start and one goal marker.

Errors:
- OSError / UnicodeDecodeError from reading propagate to the caller.
- MalformedGridError for content the search cannot run on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from slide_nav.grid import (
    GOAL_MARKER,
    START_MARKER,
    WALL_MARKER,
    MalformedGridError,
    SlideGrid,
)

log = logging.getLogger(__name__)


def read_map_lines(path: Union[str, Path]) -> List[str]:
    """Read non-empty lines from a map file, without line terminators."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        lines = [line.rstrip("\r\n") for line in f]
    return [line for line in lines if line]


def parse_grid(
    lines: Iterable[str],
    *,
    wall: str = WALL_MARKER,
    start: str = START_MARKER,
    goal: str = GOAL_MARKER,
) -> SlideGrid:
    """Normalize raw lines to a rectangle and build the grid."""
    rows = [line for line in lines if line]
    if not rows:
        raise MalformedGridError("empty_map", "Map file contains no rows.")

    width = len(rows[0])
    normalized = []
    for idx, row in enumerate(rows):
        if len(row) < width:
            log.debug("row %d is short (%d < %d); padding with walls", idx + 1, len(row), width)
            row = row + wall * (width - len(row))
        normalized.append(row[:width])

    return SlideGrid(
        rows=tuple(normalized),
        wall_marker=wall,
        start_marker=start,
        goal_marker=goal,
    )


def load_map(
    path: Union[str, Path],
    *,
    wall: str = WALL_MARKER,
    start: str = START_MARKER,
    goal: str = GOAL_MARKER,
) -> SlideGrid:
    """Read and parse a map file in one step."""
    grid = parse_grid(read_map_lines(path), wall=wall, start=start, goal=goal)
    log.debug("loaded %s: %dx%d", path, grid.height, grid.width)
    return grid
