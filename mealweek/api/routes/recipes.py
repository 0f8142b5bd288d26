from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from mealweek.api.dependencies import get_planner
from mealweek.logic.planner import Planner
from mealweek.logic.ordering.views import capitalize_words

router = APIRouter()


def recipe_view(recipe):
    data = recipe.to_dict()
    data["display_name"] = capitalize_words(recipe.name)
    data["type_label"] = recipe.type.label
    return data


@router.get("/api/recipes")
def list_recipes(type: Optional[str] = Query(default=None), search: str = Query(default=""),
                 planner: Planner = Depends(get_planner)):
    """Favorites first, then alphabetical; narrowed to one type group when given."""
    if type is None:
        recipes = planner.sorted_recipes()
    else:
        recipes = planner.filtered_recipes(type, search)
    return [recipe_view(r) for r in recipes]


@router.get("/api/recipes/favorites")
def favorite_recipes(planner: Planner = Depends(get_planner)):
    return [recipe_view(r) for r in planner.favorite_recipes()]


@router.get("/api/recipes/from-meals")
def recipes_from_meals(planner: Planner = Depends(get_planner)):
    """One meal per distinct name, as recipe templates."""
    return [{"name": m.name, "type": m.type.value, "recipe": m.recipe} for m in planner.unique_meal_names()]


@router.post("/api/recipes")
def add_recipe(form: dict = Body(...), planner: Planner = Depends(get_planner)):
    form = dict(form)
    form.pop("id", None)
    recipe = planner.add_recipe(form)
    return {"status": "success", "recipe": recipe_view(recipe)}


@router.put("/api/recipes/{recipe_id}")
def update_recipe(recipe_id: str, form: dict = Body(...), planner: Planner = Depends(get_planner)):
    recipe, report = planner.save_recipe(dict(form, id=recipe_id))
    return {"status": "success", "recipe": recipe_view(recipe), "sync": report.to_dict()}


@router.delete("/api/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, planner: Planner = Depends(get_planner)):
    planner.delete_recipe(recipe_id)
    return {"status": "success", "deleted": recipe_id}


@router.post("/api/recipes/{recipe_id}/favorite")
def toggle_favorite(recipe_id: str, planner: Planner = Depends(get_planner)):
    return {"status": "success", "recipe": recipe_view(planner.toggle_favorite(recipe_id))}
