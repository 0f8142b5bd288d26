"""
Seed and clear helpers for the meal and recipe collections.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from mealweek.domain.MealType import MealType
from mealweek.domain.errors import PersistenceUnavailable, ValidationError
from mealweek.infra.Document_Store import DocumentStore, MEALS, RECIPES
from mealweek.infra.paths import SEED_MEALS_FILE, SEED_RECIPES_FILE

logger = logging.getLogger(__name__)


def _meal_fields(row: Dict) -> Dict:
    return {
        "name": row["name"],
        "type": MealType.parse(row["type"]).value,
        "date": row["date"],
        "notes": row.get("notes") or "",
        "order": row.get("order") or 0,
        "recipe": row.get("recipe") or "",
        "userId": None,
    }


def _recipe_fields(row: Dict) -> Dict:
    return {
        "name": row["name"],
        "type": MealType.parse(row["type"]).value,
        "recipe": row.get("recipe") or "",
        "favorite": bool(row.get("favorite") or False),
        "userId": None,
    }


class Seeder:
    """Fill an empty store from seed JSON files, or wipe it."""

    def __init__(self, store: DocumentStore, meals_file: Optional[Path] = None,
                 recipes_file: Optional[Path] = None):
        self.store = store
        self.meals_file = Path(meals_file or SEED_MEALS_FILE)
        self.recipes_file = Path(recipes_file or SEED_RECIPES_FILE)

    def _read_seed(self, path: Path) -> List[Dict]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                rows = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read seed file {path}: {e}")
            raise PersistenceUnavailable(f"Cannot read seed file {path.name}: {e}") from e
        return rows if isinstance(rows, list) else []

    def _insert(self, collection: str, rows: List[Dict], to_fields) -> int:
        added = 0
        for row in rows:
            try:
                fields = to_fields(row)
            except (KeyError, TypeError, ValidationError) as e:
                logger.error(f"Skipping malformed {collection} seed row {row!r}: {e}")
                continue
            self.store.create(collection, fields)
            added += 1
        return added

    def _seed_meals(self) -> int:
        return self._insert(MEALS, self._read_seed(self.meals_file), _meal_fields)

    def _seed_recipes(self) -> int:
        return self._insert(RECIPES, self._read_seed(self.recipes_file), _recipe_fields)

    def seed_database(self) -> Dict:
        if self.store.meals_get_all() or self.store.recipes_get_all():
            logger.info("Database already has data; skipping seed")
            return {"mealsAdded": 0, "recipesAdded": 0, "message": "Database already has data"}
        meals_added = self._seed_meals()
        recipes_added = self._seed_recipes()
        logger.info(f"Seed finished: {meals_added} meals, {recipes_added} recipes")
        return {
            "mealsAdded": meals_added,
            "recipesAdded": recipes_added,
            "message": f"Seeded {meals_added} meals and {recipes_added} recipes",
        }

    def seed_recipes_only(self) -> Dict:
        if self.store.recipes_get_all():
            return {"recipesAdded": 0, "message": "Recipes already present"}
        added = self._seed_recipes()
        logger.info(f"Recipe seed finished: {added} recipes")
        return {"recipesAdded": added, "message": f"Seeded {added} recipes"}

    def seed_meals_only(self) -> Dict:
        if self.store.meals_get_all():
            return {"mealsAdded": 0, "message": "Meals already present"}
        added = self._seed_meals()
        logger.info(f"Meal seed finished: {added} meals")
        return {"mealsAdded": added, "message": f"Seeded {added} meals"}

    def clear_database(self) -> Dict:
        meals_deleted = self.store.clear(MEALS)
        recipes_deleted = self.store.clear(RECIPES)
        return {
            "mealsDeleted": meals_deleted,
            "recipesDeleted": recipes_deleted,
            "message": f"Deleted {meals_deleted} meals and {recipes_deleted} recipes",
        }


__all__ = ["Seeder"]
