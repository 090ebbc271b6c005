"""Simple Event Bus / Observer implementation for storefront notifications.

Event names used so far:
  profile.updated -> payload {"profile": UserProfile}
  plan.generated  -> payload {"days": int, "entries": int}
  order.placed    -> payload {"order": Order}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PROFILE_UPDATED = "profile.updated"
PLAN_GENERATED = "plan.generated"
ORDER_PLACED = "order.placed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:  # pragma: no cover
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'PROFILE_UPDATED', 'PLAN_GENERATED', 'ORDER_PLACED'
]
