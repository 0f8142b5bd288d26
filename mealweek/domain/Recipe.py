"""Recipe domain entity: reusable, date-independent dish (name, type, text, favorite)."""
from typing import Optional

from mealweek.domain.MealType import MealType


class Recipe:
    def __init__(self, name: str = "", type=MealType.MAIN, recipe: str = "", favorite: bool = False,
                 id: Optional[str] = None, owner_id: Optional[str] = None):
        self.id = id
        self.name = name
        self.type = MealType.parse(type)
        self.recipe = recipe or ""
        self.favorite = bool(favorite)
        self.owner_id = owner_id

    def __str__(self) -> str:
        star = " *" if self.favorite else ""
        return f"{self.name} ({self.type.value}){star}"

    def __repr__(self) -> str:
        return f"Recipe(id={self.id!r}, {self})"

    def __eq__(self, other):
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self, **changes) -> "Recipe":
        data = self.to_dict()
        data.update(changes)
        return Recipe.from_dict(data)

    @staticmethod
    def from_meal(meal) -> "Recipe":
        """Template recipe carrying a meal's name, type and recipe text."""
        return Recipe(name=meal.name, type=meal.type, recipe=meal.recipe)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=d.get("id"),
            name=d.get("name", ""),
            type=d.get("type", MealType.MAIN),
            recipe=d.get("recipe", ""),
            favorite=d.get("favorite") or False,
            owner_id=d.get("userId", d.get("owner_id")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "recipe": self.recipe,
            "favorite": self.favorite,
            "userId": self.owner_id,
        }

    def fields(self):
        d = self.to_dict()
        d.pop("id")
        return d
