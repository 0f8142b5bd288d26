"""Meal type taxonomy: breakfast / main / snack with display rank and labels."""
from enum import Enum
from typing import List

from mealweek.domain.errors import ValidationError


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    MAIN = "main"
    SNACK = "snack"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def icon(self) -> str:
        return _LABELS[self][1]

    @classmethod
    def parse(cls, value) -> "MealType":
        """Accept a MealType or its string value; anything else is a ValidationError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown meal type: {value!r}") from None


_RANKS = {MealType.BREAKFAST: 0, MealType.MAIN: 1, MealType.SNACK: 2}

_LABELS = {
    MealType.BREAKFAST: ("Kahvaltı", "🌅"),
    MealType.MAIN: ("Ana Yemek", "🍽️"),
    MealType.SNACK: ("Ara Öğün", "🍎"),
}


def rank(meal_type) -> int:
    return MealType.parse(meal_type).rank


def all_types() -> List[MealType]:
    return sorted(MealType, key=lambda t: t.rank)


__all__ = ["MealType", "rank", "all_types"]
