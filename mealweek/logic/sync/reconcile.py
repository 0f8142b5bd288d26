"""Name-keyed synchronization between scheduled meals and the recipe library.

Rules:
  - meal edit   -> the first recipe named like the meal's *old* name takes
                   the meal's new name / type / recipe text.
  - recipe edit -> every meal named like the recipe's *old* name takes the
                   recipe's new name / type / recipe text.
  - reconcile   -> every distinct meal name without a recipe gets one.
  - deletes never cascade in either direction.

Secondary writes never undo the primary write that triggered them: their
failures are collected on a SyncReport and handed back to the caller.
"""
import logging
from typing import Iterable, List

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.Recipe import Recipe
from mealweek.domain.errors import PlannerError
from mealweek.infra.Meal_Repository import MealRepository
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.logic.ordering.views import unique_meal_names

logger = logging.getLogger(__name__)


def synced_fields(entity) -> dict:
    return {"name": entity.name, "type": entity.type, "recipe": entity.recipe}


def missing_recipes(meals: Iterable[MealInstance], recipes: Iterable[Recipe]) -> List[Recipe]:
    """Unsaved recipes for meal names that have no recipe yet (exact name match)."""
    known = {r.name for r in recipes}
    return [Recipe.from_meal(m) for m in unique_meal_names(meals) if m.name not in known]


def reconcile(meals: Iterable[MealInstance], recipes: Iterable[Recipe]) -> List[Recipe]:
    """Recipe collection extended with an entry for every unmatched meal name."""
    recipes = list(recipes)
    return recipes + missing_recipes(meals, recipes)


class SyncReport:
    def __init__(self):
        self.recipes_created: List[Recipe] = []
        self.recipes_updated: List[Recipe] = []
        self.meals_updated: List[MealInstance] = []
        self.errors: List[str] = []

    @property
    def partial(self) -> bool:
        return bool(self.errors)

    def to_dict(self):
        return {
            "recipes_created": [r.to_dict() for r in self.recipes_created],
            "recipes_updated": [r.to_dict() for r in self.recipes_updated],
            "meals_updated": [m.to_dict() for m in self.meals_updated],
            "errors": list(self.errors),
            "partial": self.partial,
        }


class SyncEngine:
    def __init__(self, meals: MealRepository, recipes: RecipeRepository):
        self.meals = meals
        self.recipes = recipes

    def propagate_meal_edit(self, before: MealInstance, after: MealInstance, report: SyncReport) -> None:
        if synced_fields(before) == synced_fields(after):
            return
        try:
            match = self.recipes.find_by_name(before.name)
            if match is None:
                return
            report.recipes_updated.append(self.recipes.update(match.id, synced_fields(after)))
            logger.info(f"Recipe '{before.name}' synced from meal {after.id} as '{after.name}'")
        except PlannerError as e:
            logger.warning(f"Recipe sync after meal {after.id} edit failed: {e}")
            report.errors.append(f"recipe sync for '{before.name}': {e}")

    def propagate_recipe_edit(self, before: Recipe, after: Recipe, report: SyncReport) -> None:
        if synced_fields(before) == synced_fields(after):
            return
        try:
            targets = [m for m in self.meals.list() if m.name == before.name]
        except PlannerError as e:
            logger.warning(f"Meal sync after recipe {after.id} edit failed: {e}")
            report.errors.append(f"meal sync for '{before.name}': {e}")
            return
        for meal in targets:
            try:
                report.meals_updated.append(self.meals.update(meal.id, synced_fields(after)))
            except PlannerError as e:
                logger.warning(f"Meal {meal.id} sync from recipe {after.id} failed: {e}")
                report.errors.append(f"meal sync for {meal.id}: {e}")
        if targets:
            logger.info(f"Recipe '{after.name}' pushed to {len(targets)} scheduled meal(s)")

    def reconcile(self, report: SyncReport) -> None:
        """Create recipes for meal names the library does not have yet."""
        try:
            drafts = missing_recipes(self.meals.list(), self.recipes.list())
        except PlannerError as e:
            logger.warning(f"Reconciliation skipped: {e}")
            report.errors.append(f"reconciliation: {e}")
            return
        for draft in drafts:
            try:
                report.recipes_created.append(
                    self.recipes.create(draft.name, draft.type, recipe=draft.recipe))
            except PlannerError as e:
                logger.warning(f"Auto-creating recipe '{draft.name}' failed: {e}")
                report.errors.append(f"auto-create '{draft.name}': {e}")
        if drafts:
            logger.info(f"Reconciliation created {len(report.recipes_created)} recipe(s)")


__all__ = ["missing_recipes", "reconcile", "SyncReport", "SyncEngine"]
