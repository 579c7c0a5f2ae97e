# src/slide_nav/__init__.py
"""
Sliding-move navigation core.

Provides:
- SlideGrid: immutable grid with start/goal markers and validity queries
- slide / expand: where a slide in each direction ends
- find_path: best-first search over slides, returning PathfindingResult
"""

from __future__ import annotations

from .grid import (
    DIRECTIONS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    Direction,
    MalformedGridError,
    Position,
    SlideGrid,
    describe_position,
)
from .expander import SlideMove, expand, slide
from .pathfinder import (
    DEFAULT_MAX_STEPS,
    HEURISTICS,
    PathfindingResult,
    SearchState,
    euclidean_heuristic,
    find_path,
    slide_lower_bound,
)

__all__ = [
    "DIRECTIONS",
    "DOWN",
    "LEFT",
    "RIGHT",
    "UP",
    "Direction",
    "MalformedGridError",
    "Position",
    "SlideGrid",
    "describe_position",
    "SlideMove",
    "expand",
    "slide",
    "DEFAULT_MAX_STEPS",
    "HEURISTICS",
    "PathfindingResult",
    "SearchState",
    "euclidean_heuristic",
    "find_path",
    "slide_lower_bound",
]
