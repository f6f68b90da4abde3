"""Web-facing observers for planner events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - planner.role_pool_empty
  - planner.slot_exhausted
  - planner.day_shortfall

and stores a lightweight in-memory ring buffer of recent events that the web
layer exposes at /api/planner/alerts, so the page can tell the user why a
day came back with fewer combos than asked for.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Guarded by a Lock since uvicorn may run sync endpoints in a thread pool.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, PLANNER_ROLE_POOL_EMPTY, PLANNER_SLOT_EXHAUSTED, PLANNER_DAY_SHORTFALL
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False

_RECORDED_FIELDS = ('day', 'day_index', 'slot', 'attempts', 'generated', 'requested', 'missing_roles')


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in _RECORDED_FIELDS:
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (PLANNER_ROLE_POOL_EMPTY, PLANNER_SLOT_EXHAUSTED, PLANNER_DAY_SHORTFALL):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.debug("Planner web observers subscribed")


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


__all__ = ['start', 'get_events', 'MAX_EVENTS']
