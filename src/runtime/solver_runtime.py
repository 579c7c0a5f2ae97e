# path: src/runtime/solver_runtime.py
"""
Batch solver runtime.

Stitches together:
- maps.reader (file -> SlideGrid)
- slide_nav.find_path (search)
- maps.report (result -> numbered lines)
- monitoring (MAP_LOADED / MAP_ERROR / SEARCH_* events)

Per-file failures (missing file, unreadable file, malformed map) are
logged, published and turned into a MapOutcome; they never stop the
remaining files from being processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from env.schema import SolverConfig
from maps.reader import load_map
from maps.report import format_solution
from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from slide_nav.grid import MalformedGridError, SlideGrid, describe_position
from slide_nav.pathfinder import PathfindingResult, find_path

log = logging.getLogger(__name__)

MODULE = "runtime.solver"


@dataclass
class MapOutcome:
    """What happened to one map file."""

    path: str
    status: str                 # "solved" | "no_solution" | "not_found" | "error"
    lines: List[str] = field(default_factory=list)
    grid: Optional[SlideGrid] = None
    result: Optional[PathfindingResult] = None

    @property
    def failed(self) -> bool:
        """True when the map could not be loaded at all."""
        return self.status in ("not_found", "error")


class SolverRuntime:
    """
    Solves map files with one SolverConfig and reports to one EventBus.

    Each call owns its own search state; instances hold no per-map state.
    """

    def __init__(self, config: Optional[SolverConfig] = None, bus: Optional[EventBus] = None) -> None:
        self._config = config or SolverConfig()
        self._bus = bus or EventBus()

    @property
    def config(self) -> SolverConfig:
        return self._config

    @property
    def bus(self) -> EventBus:
        return self._bus

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def solve_grid(self, grid: SlideGrid, correlation_id: Optional[str] = None) -> PathfindingResult:
        """Run find_path with the configured heuristic and budget."""
        search = self._config.search
        log_event(
            bus=self._bus,
            module=MODULE,
            event_type=EventType.SEARCH_STARTED,
            message="Search started",
            payload={
                "start": describe_position(grid.start),
                "goal": describe_position(grid.goal),
                "heuristic": search.heuristic,
                "max_steps": search.max_steps,
            },
            correlation_id=correlation_id,
        )

        result = find_path(grid, heuristic=search.heuristic, max_steps=search.max_steps)

        log_event(
            bus=self._bus,
            module=MODULE,
            event_type=EventType.SEARCH_FINISHED,
            message="Path found" if result.success else "No path found",
            payload={
                "success": result.success,
                "reason": result.reason,
                "moves": result.cost,
                "expansions": result.expansions,
                "path": list(result.path),
            },
            correlation_id=correlation_id,
        )
        return result

    def solve_file(self, path: Union[str, Path]) -> MapOutcome:
        """Load, solve and format one map file."""
        name = str(path)
        path = Path(path)

        if not path.exists():
            log.warning("map file not found: %s", name)
            self._map_error(name, "not_found", "File not found")
            return MapOutcome(path=name, status="not_found", lines=[f"File not found: {name}"])

        markers = self._config.markers
        try:
            grid = load_map(path, wall=markers.wall, start=markers.start, goal=markers.goal)
        except MalformedGridError as exc:
            log.warning("invalid map %s: %s", name, exc)
            self._map_error(name, exc.code, str(exc))
            return MapOutcome(path=name, status="error", lines=[f"Error: Invalid map - {exc}"])
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("failed to read %s: %s", name, exc)
            self._map_error(name, "read_failed", str(exc))
            return MapOutcome(
                path=name, status="error", lines=[f"Error: Failed to read the file - {exc}"]
            )

        log_event(
            bus=self._bus,
            module=MODULE,
            event_type=EventType.MAP_LOADED,
            message="Map loaded",
            payload={"height": grid.height, "width": grid.width},
            correlation_id=name,
        )

        result = self.solve_grid(grid, correlation_id=name)
        status = "solved" if result.success else "no_solution"
        log.info("%s: %s (%d moves, %d expansions)", name, status, result.cost, result.expansions)
        return MapOutcome(
            path=name,
            status=status,
            lines=format_solution(grid.start, result),
            grid=grid,
            result=result,
        )

    def solve_many(self, paths: Iterable[Union[str, Path]]) -> List[MapOutcome]:
        """Solve every path in order; failures are recorded, not raised."""
        return [self.solve_file(p) for p in paths]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _map_error(self, name: str, code: str, detail: str) -> None:
        log_event(
            bus=self._bus,
            module=MODULE,
            event_type=EventType.MAP_ERROR,
            message="Map could not be loaded",
            payload={"code": code, "detail": detail},
            correlation_id=name,
        )
