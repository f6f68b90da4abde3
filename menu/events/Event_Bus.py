"""Simple Event Bus / Observer implementation for planner alerts.

Event names used so far:
  planner.role_pool_empty -> payload {"day_index": int, "missing_roles": [str]}
  planner.slot_exhausted -> payload {"day_index": int, "slot": int, "attempts": int}
  planner.day_shortfall -> payload {"day": str, "generated": int, "requested": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLANNER_ROLE_POOL_EMPTY = "planner.role_pool_empty"
PLANNER_SLOT_EXHAUSTED = "planner.slot_exhausted"
PLANNER_DAY_SHORTFALL = "planner.day_shortfall"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# a broken subscriber must not abort plan generation
				logger.exception("Error delivering %s to %r", event_name, cb)


# Shared instance for the process; holds subscriptions only, no planner state
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'PLANNER_ROLE_POOL_EMPTY', 'PLANNER_SLOT_EXHAUSTED', 'PLANNER_DAY_SHORTFALL'
]
