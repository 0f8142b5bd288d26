"""Web-facing observers for planner change events.

This module subscribes to the GLOBAL_EVENT_BUS for every planner event and
stores a lightweight in-memory ring buffer of recent events that the web
layer serves from ``/api/events`` so a calendar page can refresh itself
without a full reload.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Thread-safety ensured with a simple Lock.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from mealweek.utilities.constants import MAX_EVENTS
from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            entity = payload.get('meal') or payload.get('recipe')
            if isinstance(entity, dict):
                for k in ('id', 'name', 'type', 'date'):
                    if k in entity:
                        evt[k] = entity[k]
            for k in ('count', 'errors'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus=GLOBAL_EVENT_BUS):
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in ALL_EVENTS:
        bus.subscribe(name, _record)
    _started = True
    logger.info("Web observers subscribed to %d planner events", len(ALL_EVENTS))


def reset():
    """Drop buffered events (used by tests)."""
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'reset', 'get_events']
