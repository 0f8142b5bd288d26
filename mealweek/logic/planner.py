"""Planner: the command/read surface the web layer talks to.

Every meal mutation commits first and only then runs the sync follow-ups
(recipe propagation, reconciliation) on the committed state. Commands
return the primary result together with the SyncReport of those
follow-ups; a partial sync is reported, never rolled back.
"""
import logging
from datetime import date
from typing import List, Optional, Tuple

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.Recipe import Recipe
from mealweek.domain.errors import ValidationError
from mealweek.events.Event_Bus import (
    GLOBAL_EVENT_BUS, MEAL_CREATED, MEAL_UPDATED, MEAL_DELETED,
    RECIPE_CREATED, RECIPE_UPDATED, RECIPE_DELETED, RECIPE_FAVORITE_TOGGLED,
)
from mealweek.events.event_helpers import (
    publish_meal, publish_recipe, publish_meals_cleared, publish_sync_partial,
)
from mealweek.infra.Document_Store import DocumentStore
from mealweek.infra.Meal_Repository import MealRepository
from mealweek.infra.Recipe_Repository import RecipeRepository
from mealweek.logic.ordering import views
from mealweek.logic.sync.reconcile import SyncEngine, SyncReport
from mealweek.logic.transfer import drag
from mealweek.utilities.validators import MealInput, RecipeInput, parse_form

logger = logging.getLogger(__name__)


class Planner:
    def __init__(self, store: Optional[DocumentStore] = None, bus=GLOBAL_EVENT_BUS):
        self.store = store or DocumentStore()
        self.meals = MealRepository(self.store)
        self.recipes = RecipeRepository(self.store)
        self.sync = SyncEngine(self.meals, self.recipes)
        self.bus = bus

    # --- read views --------------------------------------------------------
    def meals_for_day(self, day: str) -> List[MealInstance]:
        return views.meals_for_day(self.meals.list(), day)

    def week(self, reference=None, today: Optional[date] = None) -> List[dict]:
        meals = self.meals.list()
        days = views.week_days(reference, today=today)
        for day in days:
            day["meals"] = views.meals_for_day(meals, day["date"])
        return days

    def sorted_recipes(self) -> List[Recipe]:
        return views.sorted_recipes(self.recipes.list())

    def filtered_recipes(self, type, search_text: str = "") -> List[Recipe]:
        return views.filtered_recipes(self.recipes.list(), type, search_text)

    def favorite_recipes(self) -> List[Recipe]:
        return views.sorted_recipes(self.recipes.list_favorites())

    def unique_meal_names(self) -> List[MealInstance]:
        return views.unique_meal_names(self.meals.list())

    # --- sync follow-up ----------------------------------------------------
    def _after_meal_change(self, report: SyncReport) -> SyncReport:
        self.sync.reconcile(report)
        for recipe in report.recipes_created:
            publish_recipe(self.bus, RECIPE_CREATED, recipe)
        return self._finish(report)

    def _finish(self, report: SyncReport) -> SyncReport:
        if report.partial:
            logger.warning(f"Partial synchronization: {report.errors}")
            publish_sync_partial(self.bus, report.errors)
        return report

    # --- meal commands -------------------------------------------------------
    def save_meal(self, form) -> Tuple[MealInstance, SyncReport]:
        data = parse_form(MealInput, form)
        report = SyncReport()
        if data.id:
            before = self.meals.get(data.id)
            fields = {"name": data.name, "type": data.type, "date": data.date,
                      "recipe": data.recipe, "notes": data.notes}
            if data.order is not None:
                fields["order"] = data.order
            elif data.date != before.date:
                fields["order"] = self.meals.max_order(data.date) + 1
            meal = self.meals.update(data.id, fields)
            publish_meal(self.bus, MEAL_UPDATED, meal)
            self.sync.propagate_meal_edit(before, meal, report)
            for recipe in report.recipes_updated:
                publish_recipe(self.bus, RECIPE_UPDATED, recipe)
        else:
            order = data.order if data.order is not None else self.meals.max_order(data.date) + 1
            meal = self.meals.create(data.name, data.type, data.date, order,
                                     recipe=data.recipe, notes=data.notes)
            publish_meal(self.bus, MEAL_CREATED, meal)
        return meal, self._after_meal_change(report)

    def delete_meal(self, meal_id: str) -> SyncReport:
        meal = self.meals.get(meal_id)
        self.meals.delete(meal_id)
        publish_meal(self.bus, MEAL_DELETED, meal)
        return self._after_meal_change(SyncReport())

    def clear_all_meals(self) -> int:
        count = self.meals.clear()
        publish_meals_cleared(self.bus, count)
        return count

    # --- recipe commands -----------------------------------------------------
    def add_recipe(self, form) -> Recipe:
        """Library add-flow: refuses a name that already exists (case-insensitive)."""
        data = parse_form(RecipeInput, form)
        if self.recipes.find_by_name(data.name, case_sensitive=False) is not None:
            raise ValidationError("Recipe with this name already exists")
        recipe = self.recipes.create(data.name, data.type, recipe=data.recipe,
                                     favorite=bool(data.favorite))
        publish_recipe(self.bus, RECIPE_CREATED, recipe)
        return recipe

    def save_recipe(self, form) -> Tuple[Recipe, SyncReport]:
        data = parse_form(RecipeInput, form)
        if not data.id:
            return self.add_recipe(data), SyncReport()
        before = self.recipes.get(data.id)
        fields = {"name": data.name, "type": data.type, "recipe": data.recipe}
        if data.favorite is not None:
            fields["favorite"] = data.favorite
        recipe = self.recipes.update(data.id, fields)
        publish_recipe(self.bus, RECIPE_UPDATED, recipe)
        report = SyncReport()
        self.sync.propagate_recipe_edit(before, recipe, report)
        for meal in report.meals_updated:
            publish_meal(self.bus, MEAL_UPDATED, meal)
        if report.meals_updated:
            return recipe, self._after_meal_change(report)
        return recipe, self._finish(report)

    def delete_recipe(self, recipe_id: str) -> None:
        recipe = self.recipes.get(recipe_id)
        self.recipes.delete(recipe_id)
        publish_recipe(self.bus, RECIPE_DELETED, recipe)

    def toggle_favorite(self, recipe_id: str) -> Recipe:
        recipe = self.recipes.toggle_favorite(recipe_id)
        publish_recipe(self.bus, RECIPE_FAVORITE_TOGGLED, recipe)
        return recipe

    # --- drag and drop -------------------------------------------------------
    def start_drag(self, source_kind: str, source_id: str, modifier_held: bool = False,
                   state: drag.DragState = drag.IDLE) -> drag.DragState:
        if source_kind == "meal":
            return drag.start_meal_drag(state, self.meals.get(source_id), modifier_held)
        if source_kind == "recipe":
            return drag.start_recipe_drag(state, self.recipes.get(source_id), modifier_held)
        raise ValidationError(f"Unknown drag source: {source_kind!r}")

    def drop(self, state: drag.DragState, target_kind: str,
             target_date: Optional[str] = None) -> Tuple[drag.TransferAction, Optional[MealInstance], SyncReport]:
        """Finish a drag on a day, on the recipe library, or nowhere ('none')."""
        if target_kind == "day":
            _, action = drag.drop_on_day(state, target_date, self.meals.list())
        elif target_kind == "library":
            _, action = drag.drop_on_library(state)
        elif target_kind == "none":
            drag.cancel(state)
            action = drag.TransferAction(drag.TransferAction.NOOP)
        else:
            raise ValidationError(f"Unknown drop target: {target_kind!r}")
        meal, report = self.apply_transfer(action)
        return action, meal, report

    def apply_transfer(self, action: drag.TransferAction) -> Tuple[Optional[MealInstance], SyncReport]:
        if action.kind == drag.TransferAction.NOOP:
            return None, SyncReport()
        if action.kind == drag.TransferAction.DELETE:
            return None, self.delete_meal(action.source_id)
        if action.kind == drag.TransferAction.MOVE:
            meal = self.meals.update(action.source_id, {"date": action.meal.date, "order": action.meal.order})
            publish_meal(self.bus, MEAL_UPDATED, meal)
        else:
            new = action.meal
            meal = self.meals.create(new.name, new.type, new.date, new.order, recipe=new.recipe, notes=new.notes)
            publish_meal(self.bus, MEAL_CREATED, meal)
        logger.info(f"Transfer {action.kind}: '{meal.name}' -> {meal.date} #{meal.order}")
        return meal, self._after_meal_change(SyncReport())


__all__ = ["Planner"]
