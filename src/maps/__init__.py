# src/maps/__init__.py
"""
Puzzle map I/O around the slide_nav core.

Provides:
- load_map / parse_grid / read_map_lines: text -> SlideGrid
- format_solution / render_solution: PathfindingResult -> step listing
"""

from __future__ import annotations

from .reader import load_map, parse_grid, read_map_lines
from .report import NO_SOLUTION, format_solution, render_solution

__all__ = [
    "load_map",
    "parse_grid",
    "read_map_lines",
    "NO_SOLUTION",
    "format_solution",
    "render_solution",
]
