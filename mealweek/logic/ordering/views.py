"""Read-side views over meal and recipe snapshots.

All functions here are pure: they take lists of entities and return new
lists, never touching a store.
"""
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.MealType import MealType
from mealweek.domain.Recipe import Recipe
from mealweek.utilities.constants import DATE_FORMAT, WEEK_LENGTH_DAYS, WEEK_STARTS_ON, WEEKDAY_NAMES, TURKISH_ALPHABET


def meals_for_day(meals: Iterable[MealInstance], day: str) -> List[MealInstance]:
    """Meals on ``day`` sorted by type rank, then order; ties keep their input order."""
    return sorted((m for m in meals if m.date == day), key=lambda m: (m.type.rank, m.order))


def max_order(meals: Iterable[MealInstance], day: str) -> int:
    return max((m.order for m in meals if m.date == day), default=-1)


_LETTER_RANK = {c: i for i, c in enumerate(TURKISH_ALPHABET)}


def _turkish_lower(text: str) -> str:
    return text.replace("I", "ı").replace("İ", "i").lower()


def _collation_key(name: str) -> tuple:
    """Turkish alphabetical key: non-letters first, then letters in alphabet order."""
    key = []
    for ch in _turkish_lower(name):
        if ch in _LETTER_RANK:
            key.append((1, _LETTER_RANK[ch]))
        elif ch.isalpha():
            key.append((2, ord(ch)))
        else:
            key.append((0, ord(ch)))
    return tuple(key)


def sorted_recipes(recipes: Iterable[Recipe]) -> List[Recipe]:
    """Favorites first, then by name in Turkish alphabet order (exact name breaks ties)."""
    return sorted(recipes, key=lambda r: (not r.favorite, _collation_key(r.name), r.name))


def filtered_recipes(recipes: Iterable[Recipe], type, search_text: str = "") -> List[Recipe]:
    wanted = MealType.parse(type)
    needle = (search_text or "").casefold()
    return [r for r in sorted_recipes(recipes)
            if r.type == wanted and needle in r.name.casefold()]


def unique_meal_names(meals: Iterable[MealInstance]) -> List[MealInstance]:
    """First meal seen for each distinct name."""
    seen: Dict[str, MealInstance] = {}
    for meal in meals:
        seen.setdefault(meal.name, meal)
    return list(seen.values())


def capitalize_words(text: str) -> str:
    """Display transform: first letter of each word upper, rest lower."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in (text or "").split(" "))


def parse_day(value) -> date:
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def week_days(reference=None, today: Optional[date] = None) -> List[dict]:
    """The 7 days of the week containing ``reference`` (default: today)."""
    today = today or date.today()
    ref = parse_day(reference) if reference else today
    start = ref - timedelta(days=(ref.weekday() - WEEK_STARTS_ON) % WEEK_LENGTH_DAYS)
    days = []
    for i in range(WEEK_LENGTH_DAYS):
        d = start + timedelta(days=i)
        days.append({
            "date": d.strftime(DATE_FORMAT),
            "weekday": WEEKDAY_NAMES[d.weekday()],
            "is_today": d == today,
        })
    return days


__all__ = [
    "meals_for_day", "max_order", "sorted_recipes", "filtered_recipes",
    "unique_meal_names", "capitalize_words", "parse_day", "week_days",
]
