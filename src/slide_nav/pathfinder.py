# best-first search over slide moves
# src/slide_nav/pathfinder.py
"""
A* pathfinding over SlideGrid where every edge is one slide.

- Unit cost per slide.
- Euclidean (truncated) heuristic by default; slide_lower_bound when
  optimality must be guaranteed.
- Visited positions are finalized on pop; stale frontier entries are
  skipped instead of decreased in place.
- Equal priorities pop in insertion order (FIFO).
- max_steps guard to avoid huge searches on open maps.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set, Tuple, Union

from .expander import SlideMove, expand
from .grid import Position, SlideGrid

log = logging.getLogger(__name__)

HeuristicFn = Callable[[Position, Position], int]

DEFAULT_MAX_STEPS = 100_000


def euclidean_heuristic(pos: Position, goal: Position) -> int:
    """Straight-line distance in cells, truncated to an int."""
    d_row = pos[0] - goal[0]
    d_col = pos[1] - goal[1]
    return int(math.sqrt(d_row * d_row + d_col * d_col))


def slide_lower_bound(pos: Position, goal: Position) -> int:
    """
    Lower bound on the remaining slide count.

    A slide only moves along one row or column, so a position off the
    goal's row and column needs at least two more slides.
    """
    if pos == goal:
        return 0
    if pos[0] == goal[0] or pos[1] == goal[1]:
        return 1
    return 2


HEURISTICS: Dict[str, HeuristicFn] = {
    "euclidean": euclidean_heuristic,
    "slide_lower_bound": slide_lower_bound,
}


def resolve_heuristic(heuristic: Union[str, HeuristicFn]) -> HeuristicFn:
    if callable(heuristic):
        return heuristic
    try:
        return HEURISTICS[heuristic]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {heuristic!r}; expected one of {sorted(HEURISTICS)}"
        ) from None


@dataclass(frozen=True)
class SearchState:
    """
    Immutable frontier entry.

    The path is stored as a parent link plus the single move that reached
    this state; the full sequence is rebuilt only when needed.
    """

    position: Position
    cost: int
    heuristic: int
    parent: Optional["SearchState"] = None
    move: Optional[SlideMove] = None

    @property
    def priority(self) -> int:
        return self.cost + self.heuristic

    def moves(self) -> List[SlideMove]:
        out: List[SlideMove] = []
        state: Optional[SearchState] = self
        while state is not None and state.move is not None:
            out.append(state.move)
            state = state.parent
        out.reverse()
        return out

    @property
    def path(self) -> List[str]:
        return [m.description for m in self.moves()]


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[str]
    success: bool
    reason: str | None = None
    moves: List[SlideMove] = field(default_factory=list)
    expansions: int = 0

    @property
    def cost(self) -> int:
        return len(self.moves)


def find_path(
    grid: SlideGrid,
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
    *,
    heuristic: Union[str, HeuristicFn] = "euclidean",
    max_steps: Optional[int] = DEFAULT_MAX_STEPS,
) -> PathfindingResult:
    """
    Best-first search for a slide sequence from start to goal.

    start/goal default to the grid's markers. Returns a PathfindingResult
    with:
      - path: move descriptions, empty when start == goal
      - success: bool
      - reason: "no_path_found" or "max_steps_exhausted" on failure

    max_steps=None removes the expansion budget.
    """
    h = resolve_heuristic(heuristic)
    start = grid.start if start is None else start
    goal = grid.goal if goal is None else goal
    for label, pos in (("start", start), ("goal", goal)):
        if not grid.in_bounds(pos):
            raise ValueError(f"{label} {pos} is outside the {grid.height}x{grid.width} grid")

    log.debug("find_path start=%s goal=%s max_steps=%s", start, goal, max_steps)

    seq = itertools.count()
    root = SearchState(position=start, cost=0, heuristic=h(start, goal))
    frontier: List[Tuple[int, int, SearchState]] = [(root.priority, next(seq), root)]
    visited: Set[Position] = set()
    expansions = 0

    while frontier:
        _, _, current = heapq.heappop(frontier)

        if current.position == goal:
            moves = current.moves()
            log.debug("find_path success: %d moves, %d expansions", len(moves), expansions)
            return PathfindingResult(
                path=[m.description for m in moves],
                success=True,
                moves=moves,
                expansions=expansions,
            )

        if current.position in visited:
            continue

        if max_steps is not None and expansions >= max_steps:
            log.debug("find_path gave up after %d expansions", expansions)
            return PathfindingResult(
                path=[], success=False, reason="max_steps_exhausted", expansions=expansions
            )

        visited.add(current.position)
        expansions += 1

        for move in expand(grid, current.position, visited, goal):
            nxt = SearchState(
                position=move.target,
                cost=current.cost + 1,
                heuristic=h(move.target, goal),
                parent=current,
                move=move,
            )
            heapq.heappush(frontier, (nxt.priority, next(seq), nxt))

    log.debug("find_path exhausted frontier after %d expansions", expansions)
    return PathfindingResult(
        path=[], success=False, reason="no_path_found", expansions=expansions
    )

