from __future__ import annotations

import time
from collections import deque
from typing import Any

# Oldest events drop off once the log is full.
MAX_EVENTS = 10_000

_events: deque[dict[str, Any]] = deque(maxlen=MAX_EVENTS)


def record_event(event_type: str, data: dict[str, Any]) -> dict[str, Any]:
    event = {"type": event_type, "timestamp": time.time(), **data}
    _events.append(event)
    return event


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    """Snapshot of the log, optionally narrowed to one event type."""
    if event_type is None:
        return list(_events)
    return [e for e in _events if e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
