# src/cli/solve_maps.py

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from env.loader import load_solver_config, validate_config
from maps.report import render_solution
from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger
from runtime.logging_config import configure_logging
from runtime.solver_runtime import MapOutcome, SolverRuntime
from slide_nav.pathfinder import HEURISTICS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slide-solve",
        description="Solve sliding (ice-tile) puzzle maps with best-first search.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Map files to solve (default: maps.default_files from the config)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to solver.yaml")
    parser.add_argument("--max-steps", type=int, default=None, help="Expansion budget per map")
    parser.add_argument(
        "--heuristic",
        choices=sorted(HEURISTICS),
        default=None,
        help=(
            "Search heuristic (overrides config); only slide_lower_bound "
            "guarantees the minimum number of moves"
        ),
    )
    parser.add_argument("--log-level", default=None, help="Logging level (overrides config)")
    parser.add_argument("--events-log", type=Path, default=None, help="Write JSONL events here")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print bare numbered lines instead of rich panels",
    )
    return parser


def _print_outcome(outcome: MapOutcome, console: Optional[Console]) -> None:
    if outcome.status == "not_found":
        print("\n".join(outcome.lines))
        return

    print(f"Path finding for puzzle: {outcome.path}")
    if console is None or outcome.failed:
        print("\n".join(outcome.lines))
    else:
        render_solution(outcome.path, outcome.grid.start, outcome.result, console=console)
    print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_solver_config(args.config)
        if args.max_steps is not None:
            config.search.max_steps = args.max_steps
        if args.heuristic is not None:
            config.search.heuristic = args.heuristic
        if args.log_level is not None:
            config.logging.level = args.log_level.upper()
        validate_config(config)
    except (OSError, ValueError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.logging.level)

    bus = EventBus()
    events_path = args.events_log or config.logging.events_log
    event_logger = JsonFileLogger(Path(events_path), bus) if events_path else None

    runtime = SolverRuntime(config, bus)
    console = None if args.plain else Console()
    paths = args.paths or config.maps.default_files

    failures = 0
    try:
        for path in paths:
            outcome = runtime.solve_file(path)
            _print_outcome(outcome, console)
            failures += outcome.failed
    finally:
        if event_logger is not None:
            event_logger.close()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
