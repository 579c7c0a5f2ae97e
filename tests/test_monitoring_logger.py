#tests/test_monitoring_logger.py
"""
Tests for monitoring.logger.JsonFileLogger and log_event.

Covers:
- JSON structure validity
- Correct field encoding
- Parent directory creation
- close() detaches the logger from the bus
"""

from __future__ import annotations

import json
from pathlib import Path

from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger, log_event
from monitoring.events import EventType


def test_json_file_logger_writes_valid_json(tmp_path: Path):
    bus = EventBus()
    log_path = tmp_path / "events.log"

    logger = JsonFileLogger(log_path, bus)

    log_event(
        bus=bus,
        module="runtime.solver",
        event_type=EventType.SEARCH_FINISHED,
        message="Path found",
        payload={"moves": 2, "path": ["Move Right to (4,1)", "Move Down to (4,3)"]},
        correlation_id="maps/input.txt",
    )

    logger.close()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1

    data = json.loads(lines[0])

    assert data["module"] == "runtime.solver"
    assert data["event_type"] == "SEARCH_FINISHED"
    assert data["message"] == "Path found"
    assert data["payload"]["moves"] == 2
    assert data["payload"]["path"][1] == "Move Down to (4,3)"
    assert data["correlation_id"] == "maps/input.txt"
    assert isinstance(data["ts"], (int, float))


def test_logger_parent_dir_created(tmp_path: Path):
    log_path = tmp_path / "nested" / "logs" / "events.log"

    bus = EventBus()
    logger = JsonFileLogger(log_path, bus)

    log_event(
        bus=bus,
        module="test.module",
        event_type=EventType.MAP_LOADED,
        message="hello",
    )
    logger.close()

    assert log_path.exists()
    assert log_path.read_text(encoding="utf-8").strip()


def test_closed_logger_stops_receiving(tmp_path: Path):
    bus = EventBus()
    log_path = tmp_path / "events.log"
    logger = JsonFileLogger(log_path, bus)
    logger.close()

    # detached: nothing may reach the file
    log_event(bus=bus, module="test", event_type=EventType.MAP_LOADED, message="late")

    assert log_path.read_text(encoding="utf-8") == ""
