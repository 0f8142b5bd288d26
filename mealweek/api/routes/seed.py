from fastapi import APIRouter, Depends

from mealweek.api.dependencies import get_planner
from mealweek.logic.planner import Planner
from mealweek.utilities.seed import Seeder

router = APIRouter()


def get_seeder(planner: Planner = Depends(get_planner)) -> Seeder:
    return Seeder(planner.store)


@router.post("/api/seed")
def seed_database(seeder: Seeder = Depends(get_seeder)):
    return seeder.seed_database()


@router.post("/api/seed/recipes")
def seed_recipes(seeder: Seeder = Depends(get_seeder)):
    return seeder.seed_recipes_only()


@router.post("/api/seed/meals")
def seed_meals(seeder: Seeder = Depends(get_seeder)):
    return seeder.seed_meals_only()


@router.delete("/api/data")
def clear_database(seeder: Seeder = Depends(get_seeder)):
    return seeder.clear_database()
