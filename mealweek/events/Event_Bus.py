"""Simple Event Bus / Observer implementation for planner change notifications.

Event names:
  meal.created / meal.updated / meal.deleted -> payload {"meal": dict}
  meals.cleared -> payload {"count": int}
  recipe.created / recipe.updated / recipe.deleted -> payload {"recipe": dict}
  recipe.favorite_toggled -> payload {"recipe": dict}
  sync.partial -> payload {"errors": [str, ...]}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MEAL_CREATED = "meal.created"
MEAL_UPDATED = "meal.updated"
MEAL_DELETED = "meal.deleted"
MEALS_CLEARED = "meals.cleared"
RECIPE_CREATED = "recipe.created"
RECIPE_UPDATED = "recipe.updated"
RECIPE_DELETED = "recipe.deleted"
RECIPE_FAVORITE_TOGGLED = "recipe.favorite_toggled"
SYNC_PARTIAL = "sync.partial"

ALL_EVENTS = (
	MEAL_CREATED, MEAL_UPDATED, MEAL_DELETED, MEALS_CLEARED,
	RECIPE_CREATED, RECIPE_UPDATED, RECIPE_DELETED, RECIPE_FAVORITE_TOGGLED,
	SYNC_PARTIAL,
)


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
			except Exception as e:  # pragma: no cover - a broken listener must not fail the write
				logger.error(f"[EventBus] Error delivering {event_name} to {cb}: {e}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS'] + [
	'MEAL_CREATED', 'MEAL_UPDATED', 'MEAL_DELETED', 'MEALS_CLEARED',
	'RECIPE_CREATED', 'RECIPE_UPDATED', 'RECIPE_DELETED', 'RECIPE_FAVORITE_TOGGLED', 'SYNC_PARTIAL',
]
