# tests/test_slide_pathfinder.py
"""
Unit tests for the best-first slide pathfinder.

Optimality is checked against a plain breadth-first search over the same
slide moves, so no expected path lengths are hard-coded for those grids.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Optional

import pytest

from slide_nav import (
    RIGHT,
    Position,
    SearchState,
    SlideGrid,
    euclidean_heuristic,
    expand,
    find_path,
    slide,
    slide_lower_bound,
)


def bfs_slide_count(grid: SlideGrid) -> Optional[int]:
    """Exhaustive minimum slide count from start to goal, or None."""
    dist: Dict[Position, int] = {grid.start: 0}
    queue = deque([grid.start])
    while queue:
        pos = queue.popleft()
        if pos == grid.goal:
            return dist[pos]
        for move in expand(grid, pos):
            if move.target not in dist:
                dist[move.target] = dist[pos] + 1
                queue.append(move.target)
    return None


def replay(grid: SlideGrid, result) -> Position:
    """Re-run each returned move and check it lands where it says."""
    pos = grid.start
    for move, text in zip(result.moves, result.path):
        again = slide(grid, pos, move.direction)
        assert again is not None
        assert again.target == move.target
        assert again.description == text
        assert move.target != pos
        pos = move.target
    return pos


PUZZLES = {
    "open_room": [
        "S....",
        ".....",
        ".....",
        "....F",
    ],
    "ice_cave": [
        ".....0...S",
        "....0.....",
        "0.....0..0",
        "...0....0.",
        ".F......0.",
        ".0........",
        ".......0..",
        ".0.0..0..0",
        "0.........",
        ".00.....0.",
    ],
    "corridor_turns": [
        "S.0...",
        "..0.0.",
        "....0.",
        "00.00.",
        "F.....",
    ],
    "goal_in_middle": [
        "0.....",
        ".S..0.",
        "...F..",
        "0.....",
        "...0..",
    ],
}


def test_single_slide_to_goal() -> None:
    grid = SlideGrid.from_rows(["S..F"])

    result = find_path(grid)

    assert result.success
    assert result.reason is None
    assert result.path == ["Move Right to (4,1)"]
    assert result.cost == 1


def test_two_slides_around_corner() -> None:
    grid = SlideGrid.from_rows([
        "S...",
        "....",
        "...F",
    ])

    result = find_path(grid)

    assert result.success
    assert result.path == ["Move Right to (4,1)", "Move Down to (4,3)"]


def test_equal_priorities_pop_in_insertion_order() -> None:
    # Right and Down both reach a cell with the same priority; Right is
    # pushed first and must win.
    grid = SlideGrid.from_rows([
        "S..",
        "...",
        "..F",
    ])

    first = find_path(grid)
    second = find_path(grid)

    assert first.path == ["Move Right to (3,1)", "Move Down to (3,3)"]
    assert second.path == first.path


def test_start_equals_goal_is_empty_success() -> None:
    grid = SlideGrid.from_rows(["S..F"])

    result = find_path(grid, start=grid.goal)

    assert result.success
    assert result.path == []
    assert result.moves == []
    assert result.reason is None


def test_explicit_start_and_goal() -> None:
    grid = SlideGrid.from_rows([
        "S....",
        ".....",
        "....F",
    ])

    result = find_path(grid, start=(0, 4), goal=(0, 0))

    assert result.success
    assert result.path == ["Move Left to (1,1)"]


def test_wall_column_blocks_only_route() -> None:
    grid = SlideGrid.from_rows([
        "S0F",
        "000",
        "000",
    ])

    result = find_path(grid)

    assert not result.success
    assert result.reason == "no_path_found"
    assert result.path == []


def test_walled_off_goal_has_no_path() -> None:
    grid = SlideGrid.from_rows([
        "S...",
        "....",
        ".000",
        ".0F0",
    ])

    result = find_path(grid)

    assert not result.success
    assert result.reason == "no_path_found"


def test_max_steps_exhaustion() -> None:
    grid = SlideGrid.from_rows([
        "S...",
        "....",
        "...F",
    ])

    result = find_path(grid, max_steps=1)

    assert not result.success
    assert result.reason == "max_steps_exhausted"
    assert result.path == []
    assert result.expansions == 1


def test_unlimited_budget() -> None:
    grid = SlideGrid.from_rows(PUZZLES["ice_cave"])

    result = find_path(grid, max_steps=None)

    assert result.success == (bfs_slide_count(grid) is not None)


@pytest.mark.parametrize("name", sorted(PUZZLES))
def test_admissible_heuristic_is_optimal(name: str) -> None:
    grid = SlideGrid.from_rows(PUZZLES[name])

    result = find_path(grid, heuristic="slide_lower_bound")
    expected = bfs_slide_count(grid)

    if expected is None:
        assert not result.success
        return
    assert result.success
    assert result.cost == expected
    assert replay(grid, result) == grid.goal


@pytest.mark.parametrize("name", sorted(PUZZLES))
def test_euclidean_paths_are_valid(name: str) -> None:
    grid = SlideGrid.from_rows(PUZZLES[name])

    result = find_path(grid)

    assert result.success == (bfs_slide_count(grid) is not None)
    if result.success:
        assert replay(grid, result) == grid.goal


def test_callable_heuristic_is_accepted() -> None:
    grid = SlideGrid.from_rows(PUZZLES["corridor_turns"])

    result = find_path(grid, heuristic=lambda pos, goal: 0)

    assert result.success == (bfs_slide_count(grid) is not None)
    if result.success:
        assert result.cost == bfs_slide_count(grid)


def test_unknown_heuristic_rejected() -> None:
    grid = SlideGrid.from_rows(["S..F"])

    with pytest.raises(ValueError):
        find_path(grid, heuristic="manhattan")


def test_euclidean_heuristic_truncates() -> None:
    assert euclidean_heuristic((0, 0), (3, 4)) == 5
    assert euclidean_heuristic((0, 0), (1, 1)) == 1
    assert euclidean_heuristic((2, 2), (2, 2)) == 0


def test_slide_lower_bound_values() -> None:
    goal = (2, 3)
    assert slide_lower_bound(goal, goal) == 0
    assert slide_lower_bound((2, 0), goal) == 1
    assert slide_lower_bound((5, 3), goal) == 1
    assert slide_lower_bound((0, 0), goal) == 2


def test_search_state_rebuilds_path_from_parents() -> None:
    grid = SlideGrid.from_rows([
        "S...",
        "....",
        "...F",
    ])
    first = slide(grid, grid.start, RIGHT)
    assert first is not None

    root = SearchState(position=grid.start, cost=0, heuristic=3)
    child = SearchState(position=first.target, cost=1, heuristic=2, parent=root, move=first)

    assert root.path == []
    assert child.path == ["Move Right to (4,1)"]
    assert child.priority == 3


def test_out_of_bounds_start_rejected() -> None:
    grid = SlideGrid.from_rows(["S..F"])

    with pytest.raises(ValueError):
        find_path(grid, start=(-1, 0))
