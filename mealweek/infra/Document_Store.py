"""JSON-file document store backing the meal and recipe collections.

Each collection lives in its own file (``meals.json`` / ``recipes.json``)
as a list of records. Every record carries a store-assigned ``id``.
Writes go through a temp file + move so a crash never leaves a
half-written collection behind.

Failures reading or writing the files surface as PersistenceUnavailable;
unknown ids surface as NotFound. Nothing here retries.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from mealweek.domain.errors import NotFound, PersistenceUnavailable
from mealweek.infra.paths import DATA_DIR

logger = logging.getLogger(__name__)

MEALS = "meals"
RECIPES = "recipes"


class DocumentStore:
    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir or DATA_DIR)
        self._files = {
            MEALS: self.data_dir / "meals.json",
            RECIPES: self.data_dir / "recipes.json",
        }

    # --- file helpers -----------------------------------------------------
    def _load(self, collection: str) -> List[Dict[str, Any]]:
        path = self._files[collection]
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f) or []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            raise PersistenceUnavailable(f"Cannot read {collection}: invalid JSON") from e
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            raise PersistenceUnavailable(f"Cannot read {collection}: {e}") from e
        if not isinstance(records, list):
            raise PersistenceUnavailable(f"Cannot read {collection}: expected a list of records")
        return records

    def _atomic_write(self, collection: str, records: List[Dict[str, Any]]) -> None:
        path = self._files[collection]
        try:
            os.makedirs(path.parent, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{collection}_", suffix=".json")
        except OSError as e:
            logger.error(f"Error preparing write to {path}: {e}")
            raise PersistenceUnavailable(f"Cannot write {collection}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, path)
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            raise PersistenceUnavailable(f"Cannot write {collection}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    @staticmethod
    def _index_of(records, record_id: str) -> int:
        for i, record in enumerate(records):
            if record.get("id") == record_id:
                return i
        return -1

    # --- generic operations -------------------------------------------------
    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        return self._load(collection)

    def create(self, collection: str, fields: Dict[str, Any]) -> str:
        records = self._load(collection)
        record_id = uuid4().hex
        record = dict(fields)
        record["id"] = record_id
        records.append(record)
        self._atomic_write(collection, records)
        logger.info(f"Created {collection} record {record_id}")
        return record_id

    def update(self, collection: str, record_id: str, fields: Dict[str, Any]) -> None:
        records = self._load(collection)
        idx = self._index_of(records, record_id)
        if idx < 0:
            raise NotFound(collection, record_id)
        patched = dict(records[idx])
        patched.update({k: v for k, v in fields.items() if k != "id"})
        records[idx] = patched
        self._atomic_write(collection, records)
        logger.info(f"Updated {collection} record {record_id}")

    def delete(self, collection: str, record_id: str) -> None:
        records = self._load(collection)
        idx = self._index_of(records, record_id)
        if idx < 0:
            raise NotFound(collection, record_id)
        del records[idx]
        self._atomic_write(collection, records)
        logger.info(f"Deleted {collection} record {record_id}")

    def clear(self, collection: str) -> int:
        records = self._load(collection)
        if records:
            self._atomic_write(collection, [])
        logger.info(f"Cleared {len(records)} {collection} records")
        return len(records)

    # --- collection-specific surface ---------------------------------------
    def meals_get_all(self):
        return self.get_all(MEALS)

    def meals_create(self, fields) -> str:
        return self.create(MEALS, fields)

    def meals_update(self, record_id, fields) -> None:
        self.update(MEALS, record_id, fields)

    def meals_delete(self, record_id) -> None:
        self.delete(MEALS, record_id)

    def recipes_get_all(self):
        return self.get_all(RECIPES)

    def recipes_create(self, fields) -> str:
        return self.create(RECIPES, fields)

    def recipes_update(self, record_id, fields) -> None:
        self.update(RECIPES, record_id, fields)

    def recipes_delete(self, record_id) -> None:
        self.delete(RECIPES, record_id)

    def recipes_toggle_favorite(self, record_id) -> None:
        records = self._load(RECIPES)
        idx = self._index_of(records, record_id)
        if idx < 0:
            raise NotFound(RECIPES, record_id)
        records[idx]["favorite"] = not records[idx].get("favorite", False)
        self._atomic_write(RECIPES, records)
        logger.info(f"Toggled favorite on recipe {record_id} -> {records[idx]['favorite']}")


__all__ = ["DocumentStore", "MEALS", "RECIPES"]
