from pathlib import Path

from mealweek.utilities.config import DATA_DIR as _DATA_DIR, SEED_DIR as _SEED_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_DATA_DIR).resolve()
SEED_DIR = Path(_SEED_DIR).resolve()
SEED_MEALS_FILE = SEED_DIR / 'meals.json'
SEED_RECIPES_FILE = SEED_DIR / 'recipes.json'

__all__ = ['DATA_DIR', 'SEED_DIR', 'SEED_MEALS_FILE', 'SEED_RECIPES_FILE']
