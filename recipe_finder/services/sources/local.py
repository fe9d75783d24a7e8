import json
import os
import threading
from typing import List, Optional
from recipe_finder.services.sources.base import RecipeSource
from recipe_finder.models import Recipe
from recipe_finder.core.logging_config import get_logger
from recipe_finder.utils.list_fields import join_list_field, split_list_field

logger = get_logger(__name__)

REQUIRED_FIELDS = ("id", "name", "cuisine", "category")


class RecipeStoreError(Exception):
    """The local store exists but cannot be safely rewritten."""


class LocalSource(RecipeSource):
    name = "Local"

    def __init__(self, file_path: str = "data/recipes.json"):
        self.file_path = file_path
        self._write_lock = threading.Lock()

    def _load_data(self, file_path: str) -> List[dict]:
        if not os.path.exists(file_path):
            logger.warning(f"{file_path} not found.")
            return []
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Error decoding {file_path}")
            return []
        if not isinstance(data, list):
            logger.error(f"{file_path} must contain a JSON array of recipes")
            return []
        return data

    def get_recipes(self) -> List[Recipe]:
        """
        Reads the store and adapts its rows to the canonical Recipe model.
        The file is read on every call so rows written by other processes show up.
        Rows missing a required field are skipped.
        """
        recipes = []
        for row in self._load_data(self.file_path):
            recipe = self._adapt(row)
            if recipe:
                recipes.append(recipe)
        return recipes

    def insert(self, recipe: Recipe) -> bool:
        """Append a recipe. Returns False if the id is already stored."""
        with self._write_lock:
            rows = self._rows_for_write()
            if any(str(row.get("id")) == recipe.id for row in rows if isinstance(row, dict)):
                return False
            rows.append(self.to_row(recipe))
            self._write_rows(rows)
        logger.info(f"Created recipe {recipe.id} in {self.file_path}")
        return True

    def replace(self, recipe: Recipe) -> bool:
        """Overwrite the stored row with the recipe's id. Returns False if there is none."""
        with self._write_lock:
            rows = self._rows_for_write()
            for index, row in enumerate(rows):
                if isinstance(row, dict) and str(row.get("id")) == recipe.id:
                    rows[index] = self.to_row(recipe)
                    self._write_rows(rows)
                    break
            else:
                return False
        logger.info(f"Updated recipe {recipe.id} in {self.file_path}")
        return True

    def remove(self, recipe_id: str) -> bool:
        """Delete the row with recipe_id. Returns False if there is none."""
        with self._write_lock:
            rows = self._rows_for_write()
            kept = [row for row in rows if not (isinstance(row, dict) and str(row.get("id")) == recipe_id)]
            if len(kept) == len(rows):
                return False
            self._write_rows(kept)
        logger.info(f"Deleted recipe {recipe_id} from {self.file_path}")
        return True

    @staticmethod
    def to_row(recipe: Recipe) -> dict:
        # Same shape as the catalog table: list columns stored comma-joined.
        return {
            "id": recipe.id,
            "name": recipe.name,
            "cuisine": recipe.cuisine,
            "category": recipe.category,
            # A comma inside a step would split it on the next read.
            "instructions": join_list_field(step.replace(",", ";") for step in recipe.instructions),
            "ingredients": join_list_field(recipe.ingredients),
            "tags": join_list_field(recipe.tags),
            "image_url": recipe.image_url,
            "youtube": recipe.youtube,
            "source": recipe.source,
        }

    def _rows_for_write(self) -> List[dict]:
        # Unlike reads, an unreadable store must not be treated as empty and overwritten.
        if not os.path.exists(self.file_path):
            return []
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise RecipeStoreError(f"{self.file_path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise RecipeStoreError(f"{self.file_path} must contain a JSON array of recipes")
        return data

    def _write_rows(self, rows: List[dict]) -> None:
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.file_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)
        os.replace(tmp_path, self.file_path)

    def _adapt(self, row: dict) -> Optional[Recipe]:
        if not isinstance(row, dict):
            logger.warning(f"Skipping non-object row in {self.file_path}")
            return None
        missing = [field for field in REQUIRED_FIELDS if not row.get(field)]
        if missing:
            logger.warning(f"Skipping recipe {row.get('id', '?')}: missing {', '.join(missing)}")
            return None

        # The table stores list columns as comma-joined text; split them once here.
        return Recipe(
            id=str(row["id"]),
            name=row["name"],
            cuisine=row["cuisine"],
            category=row["category"],
            tags=split_list_field(row.get("tags")),
            ingredients=split_list_field(row.get("ingredients")),
            instructions=split_list_field(row.get("instructions")),
            image_url=row.get("image_url") or None,
            youtube=row.get("youtube") or None,
            source=row.get("source") or None
        )
