import logging
from typing import List, Optional

from mealweek.domain.MealType import MealType
from mealweek.domain.Recipe import Recipe
from mealweek.domain.errors import NotFound, ValidationError
from mealweek.infra.Document_Store import DocumentStore, RECIPES

logger = logging.getLogger(__name__)


def _require_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Recipe name cannot be empty")
    return name.strip()


class RecipeRepository:
    """Reusable recipe library. Name uniqueness is left to callers."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def list(self) -> List[Recipe]:
        return [Recipe.from_dict(r) for r in self.store.recipes_get_all()]

    def list_by_type(self, type) -> List[Recipe]:
        wanted = MealType.parse(type)
        return [r for r in self.list() if r.type == wanted]

    def list_favorites(self) -> List[Recipe]:
        return [r for r in self.list() if r.favorite]

    def get(self, recipe_id: str) -> Recipe:
        for recipe in self.list():
            if recipe.id == recipe_id:
                return recipe
        raise NotFound(RECIPES, recipe_id)

    def find_by_name(self, name: str, case_sensitive: bool = True) -> Optional[Recipe]:
        """First recipe in store order with this name, or None."""
        for recipe in self.list():
            if case_sensitive and recipe.name == name:
                return recipe
            if not case_sensitive and recipe.name.casefold() == name.strip().casefold():
                return recipe
        return None

    def create(self, name: str, type, recipe: str = "", favorite: bool = False,
               owner_id: Optional[str] = None) -> Recipe:
        entry = Recipe(name=_require_name(name), type=MealType.parse(type), recipe=recipe,
                       favorite=favorite, owner_id=owner_id)
        entry.id = self.store.recipes_create(entry.fields())
        logger.info(f"Added recipe '{entry.name}' ({entry.type.value})")
        return entry

    def update(self, recipe_id: str, fields) -> Recipe:
        current = self.get(recipe_id)
        updated = Recipe(
            id=recipe_id,
            name=_require_name(fields.get("name", current.name)),
            type=MealType.parse(fields.get("type", current.type)),
            recipe=fields.get("recipe", current.recipe),
            favorite=fields.get("favorite", current.favorite),
            owner_id=current.owner_id,
        )
        self.store.recipes_update(recipe_id, updated.fields())
        return updated

    def delete(self, recipe_id: str) -> None:
        self.store.recipes_delete(recipe_id)

    def toggle_favorite(self, recipe_id: str) -> Recipe:
        self.store.recipes_toggle_favorite(recipe_id)
        return self.get(recipe_id)

    def clear(self) -> int:
        return self.store.clear(RECIPES)
