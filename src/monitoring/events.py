# path: src/monitoring/events.py
"""
Event schema for solver monitoring.

This module defines:
- EventType enum
- MonitoringEvent (structured solver events)

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum, auto
from typing import Any, Dict, Optional


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed monitoring events emitted by the solver runtime."""

    # Map file parsed into a grid
    MAP_LOADED = auto()

    # Map file missing, unreadable or malformed
    MAP_ERROR = auto()

    # find_path invoked / returned
    SEARCH_STARTED = auto()
    SEARCH_FINISHED = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Runtime event emitted while solving map files.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("runtime.solver", "cli", etc.)
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (grid size, path, reason)
    correlation_id: Optional[str] = None  # Used for grouping events per map file

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data
