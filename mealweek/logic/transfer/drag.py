"""Drag-and-drop transfer protocol as a pure state machine.

The drag state is passed in and returned by every transition instead of
living in a module global:

    state = start_meal_drag(IDLE, meal)
    state = drag_over(state, modifier_held=True)
    state, action = drop_on_day(state, "2024-06-05", meals)

Transitions never touch a store; the returned TransferAction says what the
caller has to write (create / move / delete) or that nothing happens.
"""
from enum import Enum
from typing import Iterable, Optional, Tuple
from uuid import uuid4

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.Recipe import Recipe
from mealweek.domain.errors import ValidationError
from mealweek.logic.ordering.views import max_order


class TransferMode(str, Enum):
    MOVE = "move"
    COPY = "copy"


def transfer_mode(source_has_date: bool, modifier_held: bool) -> TransferMode:
    """Copy when the modifier is held or the source is an undated recipe template."""
    if modifier_held or not source_has_date:
        return TransferMode.COPY
    return TransferMode.MOVE


class DragPhase(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragState:
    def __init__(self, phase: DragPhase = DragPhase.IDLE, payload: Optional[MealInstance] = None,
                 source_id: Optional[str] = None, modifier_held: bool = False):
        self.phase = phase
        self.payload = payload
        # id of the stored meal being dragged; None for recipe-library drags
        self.source_id = source_id
        self.modifier_held = modifier_held

    @property
    def dragging(self) -> bool:
        return self.phase is DragPhase.DRAGGING

    @property
    def mode(self) -> TransferMode:
        return transfer_mode(self.payload is not None and self.payload.has_date, self.modifier_held)

    def __repr__(self):
        return f"DragState({self.phase.value}, payload={self.payload!r}, modifier={self.modifier_held})"


IDLE = DragState()


class TransferAction:
    NOOP = "noop"
    CREATE = "create"
    MOVE = "move"
    DELETE = "delete"

    def __init__(self, kind: str, meal: Optional[MealInstance] = None, source_id: Optional[str] = None):
        self.kind = kind
        self.meal = meal
        self.source_id = source_id

    def __repr__(self):
        return f"TransferAction({self.kind}, meal={self.meal!r}, source_id={self.source_id!r})"

    def to_dict(self):
        return {
            "kind": self.kind,
            "meal": self.meal.to_dict() if self.meal else None,
            "source_id": self.source_id,
        }


def _require_idle(state: DragState) -> None:
    if state.dragging:
        raise ValidationError("A drag is already in progress")


def _require_dragging(state: DragState) -> None:
    if not state.dragging:
        raise ValidationError("No drag in progress")


def start_meal_drag(state: DragState, meal: MealInstance, modifier_held: bool = False) -> DragState:
    _require_idle(state)
    return DragState(DragPhase.DRAGGING, payload=meal.copy(), source_id=meal.id, modifier_held=modifier_held)


def start_recipe_drag(state: DragState, recipe: Recipe, modifier_held: bool = False) -> DragState:
    """Recipes travel as a synthetic undated meal with its own fresh id."""
    _require_idle(state)
    payload = MealInstance(id=uuid4().hex, name=recipe.name, type=recipe.type, recipe=recipe.recipe, date="")
    return DragState(DragPhase.DRAGGING, payload=payload, source_id=None, modifier_held=modifier_held)


def drag_over(state: DragState, modifier_held: bool) -> DragState:
    _require_dragging(state)
    return DragState(DragPhase.DRAGGING, payload=state.payload, source_id=state.source_id,
                     modifier_held=modifier_held)


def drop_on_day(state: DragState, target_date: str,
                meals: Iterable[MealInstance]) -> Tuple[DragState, TransferAction]:
    _require_dragging(state)
    payload = state.payload
    if not target_date:
        return cancel(state), TransferAction(TransferAction.NOOP)
    if payload.has_date and payload.date == target_date:
        return IDLE, TransferAction(TransferAction.NOOP, source_id=state.source_id)

    order = max_order(meals, target_date) + 1
    if state.mode is TransferMode.COPY:
        new_meal = MealInstance(name=payload.name, type=payload.type, date=target_date, order=order,
                                recipe=payload.recipe, notes=payload.notes)
        return IDLE, TransferAction(TransferAction.CREATE, meal=new_meal, source_id=state.source_id)
    moved = payload.copy(date=target_date, order=order)
    return IDLE, TransferAction(TransferAction.MOVE, meal=moved, source_id=state.source_id)


def drop_on_library(state: DragState) -> Tuple[DragState, TransferAction]:
    """Scheduled meals dropped on the library leave the schedule; recipes dropped back do nothing."""
    _require_dragging(state)
    if not state.payload.has_date or state.source_id is None:
        return IDLE, TransferAction(TransferAction.NOOP)
    return IDLE, TransferAction(TransferAction.DELETE, meal=state.payload, source_id=state.source_id)


def cancel(state: DragState) -> DragState:
    return IDLE


__all__ = [
    "TransferMode", "transfer_mode", "DragPhase", "DragState", "IDLE", "TransferAction",
    "start_meal_drag", "start_recipe_drag", "drag_over", "drop_on_day", "drop_on_library", "cancel",
]
