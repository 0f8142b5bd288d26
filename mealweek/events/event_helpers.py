"""Event helper utilities.

Quick import:
    from mealweek.events.event_helpers import publish_meal, publish_recipe, publish_sync_partial
"""
from __future__ import annotations
from typing import Any, Iterable

from .Event_Bus import EventBus, MEALS_CLEARED, SYNC_PARTIAL

__all__ = ['publish_meal', 'publish_recipe', 'publish_meals_cleared', 'publish_sync_partial']


def publish_meal(bus: EventBus, event_name: str, meal: Any):
    """Publish a meal.* event with the meal serialized."""
    bus.publish(event_name, {'meal': meal.to_dict()})


def publish_recipe(bus: EventBus, event_name: str, recipe: Any):
    bus.publish(event_name, {'recipe': recipe.to_dict()})


def publish_meals_cleared(bus: EventBus, count: int):
    bus.publish(MEALS_CLEARED, {'count': count})


def publish_sync_partial(bus: EventBus, errors: Iterable[str]):
    """Publish a sync.partial event; payload {'errors': [...]}."""
    bus.publish(SYNC_PARTIAL, {'errors': list(errors)})
