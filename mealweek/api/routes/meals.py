from fastapi import APIRouter, Body, Depends

from mealweek.api.dependencies import get_planner
from mealweek.logic.planner import Planner
from mealweek.logic.ordering.views import capitalize_words

router = APIRouter()


def meal_view(meal):
    """Serialized meal plus render-only fields (never persisted)."""
    data = meal.to_dict()
    data["display_name"] = capitalize_words(meal.name)
    data["type_label"] = meal.type.label
    data["type_icon"] = meal.type.icon
    return data


@router.get("/api/meals")
def list_meals(planner: Planner = Depends(get_planner)):
    return [meal_view(m) for m in planner.meals.list()]


@router.get("/api/days/{day}/meals")
def meals_for_day(day: str, planner: Planner = Depends(get_planner)):
    return [meal_view(m) for m in planner.meals_for_day(day)]


@router.post("/api/meals")
def create_meal(form: dict = Body(...), planner: Planner = Depends(get_planner)):
    form = dict(form)
    form.pop("id", None)
    meal, report = planner.save_meal(form)
    return {"status": "success", "meal": meal_view(meal), "sync": report.to_dict()}


@router.put("/api/meals/{meal_id}")
def update_meal(meal_id: str, form: dict = Body(...), planner: Planner = Depends(get_planner)):
    form = dict(form, id=meal_id)
    meal, report = planner.save_meal(form)
    return {"status": "success", "meal": meal_view(meal), "sync": report.to_dict()}


@router.delete("/api/meals/{meal_id}")
def delete_meal(meal_id: str, planner: Planner = Depends(get_planner)):
    report = planner.delete_meal(meal_id)
    return {"status": "success", "deleted": meal_id, "sync": report.to_dict()}


@router.delete("/api/meals")
def clear_meals(planner: Planner = Depends(get_planner)):
    return {"status": "success", "deleted": planner.clear_all_meals()}
