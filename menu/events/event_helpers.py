"""Event helper utilities.

This module provides helper functions for publishing planner-related events
using the global event bus.

Quick import:
    from menu.events.event_helpers import (
        publish_role_pool_empty, publish_slot_exhausted, publish_day_shortfall,
    )

"""
from __future__ import annotations
from typing import Iterable
from .Event_Bus import (
    create_event,
    PLANNER_ROLE_POOL_EMPTY, PLANNER_SLOT_EXHAUSTED, PLANNER_DAY_SHORTFALL,
)

__all__ = [
    'publish_role_pool_empty', 'publish_slot_exhausted', 'publish_day_shortfall',
    'PLANNER_ROLE_POOL_EMPTY', 'PLANNER_SLOT_EXHAUSTED', 'PLANNER_DAY_SHORTFALL',
]


def publish_role_pool_empty(day_index: int, missing_roles: Iterable[str]):
    """Publish a planner.role_pool_empty event."""
    create_event(PLANNER_ROLE_POOL_EMPTY, {
        'day_index': day_index,
        'missing_roles': list(missing_roles),
    })


def publish_slot_exhausted(day_index: int, slot: int, attempts: int):
    """Publish a planner.slot_exhausted event (slot is 1-based)."""
    create_event(PLANNER_SLOT_EXHAUSTED, {
        'day_index': day_index,
        'slot': slot,
        'attempts': attempts,
    })


def publish_day_shortfall(day: str, generated: int, requested: int):
    """Publish a planner.day_shortfall event."""
    create_event(PLANNER_DAY_SHORTFALL, {
        'day': day,
        'generated': generated,
        'requested': requested,
    })
