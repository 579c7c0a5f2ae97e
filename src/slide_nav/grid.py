# immutable slide-puzzle grid and cell queries
# src/slide_nav/grid.py
"""
SlideGrid: read-only grid abstraction for sliding-move search.

This module does not know about files or reporting. It only:
- Holds the cell symbols of a rectangular map.
- Locates the start and goal markers.
- Answers validity queries (in bounds and not a wall).

Map parsing lives in maps.reader; search lives in slide_nav.pathfinder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

# (row, col) integer coordinates, 0-indexed
Position = Tuple[int, int]

WALL_MARKER = "0"
START_MARKER = "S"
GOAL_MARKER = "F"


@dataclass(frozen=True)
class Direction:
    """A cardinal slide direction: display name plus (d_row, d_col) offset."""

    name: str
    d_row: int
    d_col: int

    def step(self, pos: Position) -> Position:
        return (pos[0] + self.d_row, pos[1] + self.d_col)


RIGHT = Direction("Right", 0, 1)
LEFT = Direction("Left", 0, -1)
DOWN = Direction("Down", 1, 0)
UP = Direction("Up", -1, 0)

# Expansion order and deflection scan order.
DIRECTIONS: Tuple[Direction, ...] = (RIGHT, LEFT, DOWN, UP)


class MalformedGridError(ValueError):
    """
    Raised when a map cannot be searched.

    `code` is a short machine-readable tag:
      missing_start, missing_goal, duplicate_start, duplicate_goal,
      ragged_rows, empty_map
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def describe_position(pos: Position) -> str:
    """Human-facing coordinates: 1-indexed (col, row)."""
    row, col = pos
    return f"({col + 1},{row + 1})"


@dataclass(frozen=True)
class SlideGrid:
    """
    Immutable rectangular grid of cell symbols.

    Responsibilities:
    - Provide validity tests (is_valid) for the move expander.
    - Expose start and goal positions.

    It does NOT:
    - Read files.
    - Run any search.
    """

    rows: Tuple[str, ...]
    wall_marker: str = WALL_MARKER
    start_marker: str = START_MARKER
    goal_marker: str = GOAL_MARKER

    start: Position = field(init=False)
    goal: Position = field(init=False)

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        object.__setattr__(self, "rows", rows)

        if not rows or not rows[0]:
            raise MalformedGridError("empty_map", "Map has no cells.")

        width = len(rows[0])
        for idx, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(
                    "ragged_rows",
                    f"Row {idx + 1} has {len(row)} cells, expected {width}.",
                )

        object.__setattr__(self, "start", self._locate(self.start_marker, "start"))
        object.__setattr__(self, "goal", self._locate(self.goal_marker, "goal"))

    @classmethod
    def from_rows(cls, rows: Iterable[str], **markers: str) -> "SlideGrid":
        """Convenience constructor from any iterable of row strings."""
        return cls(rows=tuple(rows), **markers)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, pos: Position) -> str:
        row, col = pos
        return self.rows[row][col]

    def is_wall(self, pos: Position) -> bool:
        return self.cell(pos) == self.wall_marker

    def is_valid(self, pos: Position) -> bool:
        """A cell can be entered: in bounds on both axes and not a wall."""
        return self.in_bounds(pos) and not self.is_wall(pos)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _locate(self, marker: str, label: str) -> Position:
        found: list[Position] = [
            (r, c)
            for r, row in enumerate(self.rows)
            for c, ch in enumerate(row)
            if ch == marker
        ]
        if not found:
            raise MalformedGridError(
                f"missing_{label}", f"Map has no {label} marker {marker!r}."
            )
        if len(found) > 1:
            raise MalformedGridError(
                f"duplicate_{label}",
                f"Map has {len(found)} {label} markers {marker!r}, expected one.",
            )
        return found[0]

