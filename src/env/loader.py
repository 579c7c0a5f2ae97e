from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from slide_nav.pathfinder import HEURISTICS

from .schema import (
    LoggingConfig,
    MapsConfig,
    MarkerConfig,
    SearchConfig,
    SolverConfig,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "solver.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file, requiring a mapping at the top level."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    raw = cfg.get(name) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(raw)}")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_solver_config(path: Optional[Path] = None) -> SolverConfig:
    """
    Main entry point: returns a validated SolverConfig.

    With no path, reads config/solver.yaml from the project root and falls
    back to built-in defaults if that file is absent. An explicit path
    must exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return SolverConfig()
        path = DEFAULT_CONFIG_PATH

    return config_from_dict(_load_yaml(Path(path)))


def config_from_dict(cfg: Dict[str, Any]) -> SolverConfig:
    """Build a SolverConfig from a raw mapping; missing keys use defaults."""
    defaults = SolverConfig()

    markers_raw = _section(cfg, "markers")
    markers = MarkerConfig(
        wall=str(markers_raw.get("wall", defaults.markers.wall)),
        start=str(markers_raw.get("start", defaults.markers.start)),
        goal=str(markers_raw.get("goal", defaults.markers.goal)),
    )

    search_raw = _section(cfg, "search")
    search = SearchConfig(
        heuristic=search_raw.get("heuristic", defaults.search.heuristic),
        max_steps=search_raw.get("max_steps", defaults.search.max_steps),
    )

    logging_raw = _section(cfg, "logging")
    logging_cfg = LoggingConfig(
        level=str(logging_raw.get("level", defaults.logging.level)).upper(),
        events_log=logging_raw.get("events_log", defaults.logging.events_log),
    )

    maps_raw = _section(cfg, "maps")
    # checked by validate_config
    maps = MapsConfig(default_files=maps_raw.get("default_files", defaults.maps.default_files))

    config = SolverConfig(
        markers=markers,
        search=search,
        logging=logging_cfg,
        maps=maps,
    )
    # perform basic validation before returning
    validate_config(config)
    return config


def validate_config(config: SolverConfig) -> None:
    """Minimal sanity checks; raises ValueError on the first problem."""
    symbols = (config.markers.wall, config.markers.start, config.markers.goal)
    for symbol in symbols:
        if len(symbol) != 1:
            raise ValueError(f"Markers must be single characters, got {symbol!r}")
    if len(set(symbols)) != len(symbols):
        raise ValueError(f"Markers must be distinct, got {symbols!r}")

    if config.search.heuristic not in HEURISTICS:
        raise ValueError(
            f"Unknown heuristic {config.search.heuristic!r}; "
            f"expected one of {sorted(HEURISTICS)}"
        )

    max_steps = config.search.max_steps
    if max_steps is not None:
        if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps <= 0:
            raise ValueError(f"search.max_steps must be a positive int or null, got {max_steps!r}")

    if config.logging.level not in LOG_LEVELS:
        raise ValueError(f"Invalid logging level: {config.logging.level}")

    files = config.maps.default_files
    if not isinstance(files, list) or not all(isinstance(p, str) and p for p in files):
        raise ValueError(f"maps.default_files must be a list of non-empty paths, got {files!r}")
