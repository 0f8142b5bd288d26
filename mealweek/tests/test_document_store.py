import json

import pytest

from mealweek.domain.errors import NotFound, PersistenceUnavailable
from mealweek.infra.Document_Store import DocumentStore


def test_missing_files_read_as_empty(tmp_path):
    store = DocumentStore(tmp_path)
    assert store.meals_get_all() == []
    assert store.recipes_get_all() == []


def test_create_assigns_id_and_persists(tmp_path):
    store = DocumentStore(tmp_path)
    meal_id = store.meals_create({"name": "Menemen", "type": "breakfast", "date": "2024-06-03", "order": 0})
    assert meal_id

    on_disk = json.loads((tmp_path / "meals.json").read_text(encoding="utf-8"))
    assert on_disk == [{"name": "Menemen", "type": "breakfast", "date": "2024-06-03", "order": 0, "id": meal_id}]
    # a fresh store instance sees the same data
    assert DocumentStore(tmp_path).meals_get_all()[0]["id"] == meal_id


def test_ids_are_unique(tmp_path):
    store = DocumentStore(tmp_path)
    ids = {store.recipes_create({"name": f"R{i}", "type": "main"}) for i in range(5)}
    assert len(ids) == 5


def test_update_and_delete_unknown_id_raise_not_found(tmp_path):
    store = DocumentStore(tmp_path)
    with pytest.raises(NotFound):
        store.meals_update("nope", {"name": "x"})
    with pytest.raises(NotFound):
        store.meals_delete("nope")
    with pytest.raises(NotFound):
        store.recipes_toggle_favorite("nope")


def test_update_patches_fields_but_not_id(tmp_path):
    store = DocumentStore(tmp_path)
    rid = store.recipes_create({"name": "Tavuk Sote", "type": "main", "recipe": ""})
    store.recipes_update(rid, {"recipe": "Sotele", "id": "hijack"})
    (record,) = store.recipes_get_all()
    assert record["id"] == rid
    assert record["recipe"] == "Sotele"
    assert record["name"] == "Tavuk Sote"


def test_toggle_favorite_flips(tmp_path):
    store = DocumentStore(tmp_path)
    rid = store.recipes_create({"name": "Menemen", "type": "breakfast"})
    store.recipes_toggle_favorite(rid)
    assert store.recipes_get_all()[0]["favorite"] is True
    store.recipes_toggle_favorite(rid)
    assert store.recipes_get_all()[0]["favorite"] is False


def test_corrupt_file_is_persistence_unavailable(tmp_path):
    (tmp_path / "meals.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(PersistenceUnavailable):
        DocumentStore(tmp_path).meals_get_all()


def test_clear_returns_count(tmp_path):
    store = DocumentStore(tmp_path)
    store.meals_create({"name": "A", "type": "main", "date": "2024-06-03"})
    store.meals_create({"name": "B", "type": "main", "date": "2024-06-03"})
    assert store.clear("meals") == 2
    assert store.meals_get_all() == []
