# sliding-move expansion over SlideGrid
# src/slide_nav/expander.py
"""
Move expander: where does a slide end?

A slide travels from a cell in one direction until the next cell is a
wall or off the grid. Two special cases:

- Goal short-circuit: passing through the goal stops the slide on it.
- Deflection: if the resting cell is itself a wall (only possible when
  the slide starts on a wall and cannot move), take one corrective step
  to the first valid, unvisited neighbour in DIRECTIONS order.

Dead ends (zero-length slide, failed deflection) return None; nothing
is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterator, Optional

from .grid import DIRECTIONS, Direction, Position, SlideGrid, describe_position


@dataclass(frozen=True)
class SlideMove:
    """One emitted transition of the search graph."""

    direction: Direction
    origin: Position
    target: Position
    reached_goal: bool = False
    deflected: bool = False

    @property
    def description(self) -> str:
        return f"Move {self.direction.name} to {describe_position(self.target)}"


def slide(
    grid: SlideGrid,
    position: Position,
    direction: Direction,
    visited: AbstractSet[Position] = frozenset(),
    goal: Optional[Position] = None,
) -> Optional[SlideMove]:
    """
    Slide from `position` in `direction`.

    Returns a SlideMove, or None when this direction yields no transition.
    `visited` is only consulted by the deflection step. `goal` defaults to
    the grid's goal marker.
    """
    if goal is None:
        goal = grid.goal
    current = position

    while grid.is_valid(direction.step(current)):
        current = direction.step(current)
        if current == goal:
            return SlideMove(direction, position, current, reached_goal=True)

    deflected = False
    if grid.is_wall(current):
        current = _deflect(grid, current, visited)
        if current is None:
            return None
        deflected = True

    if current == position:
        return None

    return SlideMove(
        direction,
        position,
        current,
        reached_goal=current == goal,
        deflected=deflected,
    )


def expand(
    grid: SlideGrid,
    position: Position,
    visited: AbstractSet[Position] = frozenset(),
    goal: Optional[Position] = None,
) -> Iterator[SlideMove]:
    """Yield the moves available from `position`, in DIRECTIONS order."""
    for direction in DIRECTIONS:
        move = slide(grid, position, direction, visited, goal)
        if move is not None:
            yield move


def _deflect(
    grid: SlideGrid,
    wall: Position,
    visited: AbstractSet[Position],
) -> Optional[Position]:
    for direction in DIRECTIONS:
        candidate = direction.step(wall)
        if grid.is_valid(candidate) and candidate not in visited:
            return candidate
    return None
