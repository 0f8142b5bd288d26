"""FastAPI dependencies shared by the route modules."""
from functools import lru_cache

from mealweek.infra.Document_Store import DocumentStore
from mealweek.infra.paths import DATA_DIR
from mealweek.logic.planner import Planner


@lru_cache(maxsize=1)
def get_store() -> DocumentStore:
    return DocumentStore(DATA_DIR)


def get_planner() -> Planner:
    return Planner(get_store())
