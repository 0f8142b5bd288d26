import logging
from typing import List, Optional

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.MealType import MealType
from mealweek.domain.errors import NotFound, ValidationError
from mealweek.infra.Document_Store import DocumentStore, MEALS

logger = logging.getLogger(__name__)


def _require_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Meal name cannot be empty")
    return name.strip()


def _require_date(date) -> str:
    if not isinstance(date, str) or not date.strip():
        raise ValidationError("Meal date cannot be empty")
    return date.strip()


class MealRepository:
    """Day-scheduled meal instances on top of the document store."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def list(self) -> List[MealInstance]:
        return [MealInstance.from_dict(r) for r in self.store.meals_get_all()]

    def list_by_date(self, date: str) -> List[MealInstance]:
        return [m for m in self.list() if m.date == date]

    def get(self, meal_id: str) -> MealInstance:
        for meal in self.list():
            if meal.id == meal_id:
                return meal
        raise NotFound(MEALS, meal_id)

    def max_order(self, date: str) -> int:
        """Highest order on a date, -1 when the day is empty."""
        return max((m.order for m in self.list_by_date(date)), default=-1)

    def create(self, name: str, type, date: str, order: int, recipe: str = "",
               notes: str = "", owner_id: Optional[str] = None) -> MealInstance:
        meal = MealInstance(name=_require_name(name), type=MealType.parse(type), date=_require_date(date),
                            order=order, recipe=recipe, notes=notes, owner_id=owner_id)
        meal.id = self.store.meals_create(meal.fields())
        logger.info(f"Scheduled meal '{meal.name}' on {meal.date} (order {meal.order})")
        return meal

    def update(self, meal_id: str, fields) -> MealInstance:
        """Full replace of the mutable fields (name, type, date, notes, order, recipe)."""
        current = self.get(meal_id)
        updated = MealInstance(
            id=meal_id,
            name=_require_name(fields.get("name", current.name)),
            type=MealType.parse(fields.get("type", current.type)),
            date=_require_date(fields.get("date", current.date)),
            order=fields.get("order", current.order),
            recipe=fields.get("recipe", current.recipe),
            notes=fields.get("notes", current.notes),
            owner_id=current.owner_id,
        )
        self.store.meals_update(meal_id, updated.fields())
        return updated

    def delete(self, meal_id: str) -> None:
        self.store.meals_delete(meal_id)

    def clear(self) -> int:
        return self.store.clear(MEALS)
