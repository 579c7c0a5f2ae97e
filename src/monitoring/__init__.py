# src/monitoring/__init__.py
"""In-process monitoring: event schema, event bus and JSONL logger."""
