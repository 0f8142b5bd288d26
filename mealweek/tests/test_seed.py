import json

import pytest

from mealweek.domain.errors import PersistenceUnavailable
from mealweek.infra.Document_Store import DocumentStore
from mealweek.utilities.seed import Seeder


@pytest.fixture
def seed_files(tmp_path):
    seed_dir = tmp_path / "seed"
    seed_dir.mkdir()
    meals = [
        {"name": "Menemen", "type": "breakfast", "date": "2024-06-03"},
        {"name": "Mercimek Çorbası", "type": "main", "date": "2024-06-03", "order": 1, "notes": "Vejetaryen"},
        {"name": "Broken"},
    ]
    recipes = [
        {"name": "Menemen", "type": "breakfast", "favorite": True},
        {"name": "Tavuk Sote", "type": "main", "recipe": "sotele"},
    ]
    (seed_dir / "meals.json").write_text(json.dumps(meals), encoding="utf-8")
    (seed_dir / "recipes.json").write_text(json.dumps(recipes), encoding="utf-8")
    return seed_dir


@pytest.fixture
def seeder(tmp_path, seed_files):
    store = DocumentStore(tmp_path / "data")
    return Seeder(store, seed_files / "meals.json", seed_files / "recipes.json")


def test_seed_database_fills_defaults_and_skips_bad_rows(seeder):
    result = seeder.seed_database()
    assert result["mealsAdded"] == 2
    assert result["recipesAdded"] == 2

    meals = seeder.store.meals_get_all()
    assert meals[0]["notes"] == "" and meals[0]["recipe"] == "" and meals[0]["order"] == 0
    recipes = seeder.store.recipes_get_all()
    assert recipes[1]["favorite"] is False


def test_seed_database_skips_when_data_present(seeder):
    seeder.store.recipes_create({"name": "X", "type": "main"})
    result = seeder.seed_database()
    assert result["mealsAdded"] == 0 and result["recipesAdded"] == 0
    assert seeder.store.meals_get_all() == []


def test_partial_seeds_check_only_their_collection(seeder):
    seeder.store.recipes_create({"name": "X", "type": "main"})
    assert seeder.seed_recipes_only()["recipesAdded"] == 0
    assert seeder.seed_meals_only()["mealsAdded"] == 2
    assert seeder.seed_meals_only()["mealsAdded"] == 0


def test_clear_database(seeder):
    seeder.seed_database()
    result = seeder.clear_database()
    assert result["mealsDeleted"] == 2
    assert result["recipesDeleted"] == 2
    assert seeder.store.meals_get_all() == [] and seeder.store.recipes_get_all() == []


def test_missing_seed_file(tmp_path):
    seeder = Seeder(DocumentStore(tmp_path), tmp_path / "nope.json", tmp_path / "nope2.json")
    with pytest.raises(PersistenceUnavailable):
        seeder.seed_meals_only()
