# SolverConfig and section dataclasses
# src/env/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MarkerConfig:
    """Cell symbols understood by the map reader."""
    wall: str = "0"
    start: str = "S"
    goal: str = "F"         # "finish" in map files


@dataclass
class SearchConfig:
    """Knobs for slide_nav.find_path."""
    heuristic: str = "euclidean"        # only "slide_lower_bound" guarantees minimal moves
    max_steps: Optional[int] = 100_000  # None disables the expansion budget


@dataclass
class LoggingConfig:
    """Where log lines and monitoring events go."""
    level: str = "INFO"
    events_log: Optional[str] = None    # JSONL path, relative to the working dir


@dataclass
class MapsConfig:
    """Map files solved when the CLI gets no paths."""
    default_files: List[str] = field(
        default_factory=lambda: ["input.txt", "maze10_4.txt", "puzzle_10.txt"]
    )


@dataclass
class SolverConfig:
    """Resolved configuration for one solver run."""
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    maps: MapsConfig = field(default_factory=MapsConfig)
