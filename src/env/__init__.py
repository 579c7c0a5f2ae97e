# src/env/__init__.py
"""Solver configuration: YAML file -> SolverConfig dataclasses."""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_PATH, config_from_dict, load_solver_config, validate_config
from .schema import LoggingConfig, MapsConfig, MarkerConfig, SearchConfig, SolverConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "config_from_dict",
    "load_solver_config",
    "validate_config",
    "LoggingConfig",
    "MapsConfig",
    "MarkerConfig",
    "SearchConfig",
    "SolverConfig",
]
