# search results -> numbered step text
# src/maps/report.py
"""
Solution reporter.

format_solution() produces the plain numbered listing:

    1. Start at (1,1)
    2. Move Right to (4,1)
    3. Done!

or the start line followed by "No solution found.". Coordinates are 1-indexed
(col, row). render_solution() prints the same lines inside a rich
panel.
"""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from slide_nav.grid import Position, describe_position
from slide_nav.pathfinder import PathfindingResult

NO_SOLUTION = "No solution found."
BUDGET_EXHAUSTED = "No solution found (search budget exhausted)."


def format_solution(start: Position, result: PathfindingResult) -> List[str]:
    lines = [f"1. Start at {describe_position(start)}"]
    if not result.success:
        if result.reason == "max_steps_exhausted":
            lines.append(BUDGET_EXHAUSTED)
        else:
            lines.append(NO_SOLUTION)
        return lines

    for idx, move in enumerate(result.path, start=2):
        lines.append(f"{idx}. {move}")
    lines.append(f"{len(result.path) + 2}. Done!")
    return lines


def render_solution(
    title: str,
    start: Position,
    result: PathfindingResult,
    console: Optional[Console] = None,
) -> None:
    """Print the formatted solution as a rich panel."""
    console = console or Console()

    txt = Text()
    for line in format_solution(start, result):
        if line.endswith("Done!"):
            txt.append(line + "\n", style="bold green")
        elif not result.success and not line.startswith("1. "):
            txt.append(line + "\n", style="bold red")
        else:
            txt.append(line + "\n")

    subtitle = None
    if result.success:
        subtitle = f"{result.cost} moves, {result.expansions} expansions"

    console.print(
        Panel(
            txt,
            title=title,
            subtitle=subtitle,
            border_style="cyan" if result.success else "red",
        )
    )
