from typing import Dict, List, Optional
import time
from recipe_finder.services.sources.base import RecipeSource
from recipe_finder.services.sources.local import LocalSource, RecipeStoreError
from recipe_finder.services.sources.mealdb import MealDBSource
from recipe_finder.services.recommender import recommend
from recipe_finder.models import Recipe, RecipePayload, RecommendationResult
from recipe_finder.core.config import RecommenderConfig, load_config, resolve_data_path
from recipe_finder.utils.list_fields import split_lines, split_list_field
from recipe_finder.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SOURCES = ["Local"]

CREATE_REQUIRED_FIELDS = ("id", "name", "cuisine", "category", "instructions", "ingredients")
UPDATE_REQUIRED_FIELDS = ("name", "cuisine", "category", "instructions", "ingredients")


class RecipeSourceError(Exception):
    def __init__(self, sources: List[str], errors: List[str]):
        super().__init__("Failed to fetch recipes from sources")
        self.sources = sources
        self.errors = errors


class RecipeNotFoundError(Exception):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


class RecipeValidationError(Exception):
    def __init__(self, missing_fields: List[str]):
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields


class RecipeConflictError(Exception):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe {recipe_id} already exists")
        self.recipe_id = recipe_id


class CatalogService:
    def __init__(self, config: Optional[RecommenderConfig] = None, sources: Optional[List[RecipeSource]] = None):
        self.config = config or load_config()
        self.cache: Dict[str, Dict] = {}
        self.cache_ttl_seconds = self.config.cache_ttl_seconds

        if sources is not None:
            self.sources: List[RecipeSource] = list(sources)
        else:
            self.sources = [LocalSource(resolve_data_path(self.config.data_path)), MealDBSource()]

    def get_recipes(self, sources: Optional[List[str]] = None) -> List[Recipe]:
        """
        Aggregates recipes from the requested sources (default: Local).
        Raises RecipeSourceError only when nothing was fetched and a source failed.
        """
        all_recipes: List[Recipe] = []
        errors = []
        active_source_names = sources if sources else DEFAULT_SOURCES

        now = time.time()
        for source in self.sources:
            if source.name not in active_source_names:
                continue
            try:
                cached = self.cache.get(source.name)
                if cached and (now - cached["timestamp"] < self.cache_ttl_seconds):
                    recipes = cached["recipes"]
                else:
                    recipes = source.get_recipes()
                    self.cache[source.name] = {
                        "timestamp": now,
                        "recipes": recipes
                    }
                    logger.info(f"Loaded {len(recipes)} recipes from {source.name}")
                all_recipes.extend(recipes)
            except Exception as e:
                logger.error(f"Error fetching from source {source.name}: {e}")
                errors.append(f"{source.name}: {e}")

        if not all_recipes and errors:
            raise RecipeSourceError(active_source_names, errors)

        return all_recipes

    def list_recipes(
        self,
        cuisine: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        sources: Optional[List[str]] = None
    ) -> List[Recipe]:
        """Filter the catalog, ordered by name.

        Cuisine and category must match exactly; search is a case-insensitive
        substring match over the name and tags.
        """
        recipes = self.get_recipes(sources)
        if cuisine:
            recipes = [r for r in recipes if r.cuisine == cuisine]
        if category:
            recipes = [r for r in recipes if r.category == category]
        if search:
            needle = search.strip().lower()
            recipes = [r for r in recipes if self._matches_search(r, needle)]
        return sorted(recipes, key=lambda r: r.name)

    def get_recipe(self, recipe_id: str, sources: Optional[List[str]] = None) -> Recipe:
        for recipe in self.get_recipes(sources):
            if recipe.id == recipe_id:
                return recipe
        raise RecipeNotFoundError(recipe_id)

    def cuisines(self, sources: Optional[List[str]] = None) -> List[str]:
        return sorted({r.cuisine for r in self.get_recipes(sources)})

    def categories(self, sources: Optional[List[str]] = None) -> List[str]:
        return sorted({r.category for r in self.get_recipes(sources)})

    def similar_recipes(
        self,
        recipe_id: str,
        limit: Optional[int] = None,
        sources: Optional[List[str]] = None
    ) -> List[RecommendationResult]:
        """
        Recommend recipes similar to the one with recipe_id.
        The rest of the catalog, ordered by name, is the candidate pool.
        """
        target = self.get_recipe(recipe_id, sources)
        pool = sorted(
            (r for r in self.get_recipes(sources) if r.id != target.id),
            key=lambda r: r.name
        )
        if limit is None:
            limit = self.config.default_limit
        limit = min(limit, self.config.max_limit)
        results = recommend(
            target,
            pool,
            limit=limit,
            min_score=self.config.min_score,
            workers=self.config.workers
        )
        logger.info(f"Recommended {len(results)} recipes for {recipe_id} from {len(pool)} candidates")
        return results

    def create_recipe(self, payload: RecipePayload) -> Recipe:
        """Add a recipe to the local store. Raises RecipeConflictError on a taken id."""
        self._require(payload, CREATE_REQUIRED_FIELDS)
        recipe = self._build_recipe(str(payload.id).strip(), payload)
        if not self._write(lambda store: store.insert(recipe)):
            raise RecipeConflictError(recipe.id)
        return recipe

    def update_recipe(self, recipe_id: str, payload: RecipePayload) -> Recipe:
        """Replace the stored recipe; the id in the path wins over any id in the body."""
        self._require(payload, UPDATE_REQUIRED_FIELDS)
        recipe = self._build_recipe(recipe_id, payload)
        if not self._write(lambda store: store.replace(recipe)):
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def delete_recipe(self, recipe_id: str) -> None:
        if not self._write(lambda store: store.remove(recipe_id)):
            raise RecipeNotFoundError(recipe_id)

    def clear_cache(self) -> None:
        self.cache.clear()

    def _writable_store(self) -> LocalSource:
        for source in self.sources:
            if isinstance(source, LocalSource):
                return source
        raise RecipeSourceError(["Local"], ["No writable recipe store configured"])

    def _write(self, operation) -> bool:
        store = self._writable_store()
        try:
            changed = operation(store)
        except (RecipeStoreError, OSError) as e:
            logger.error(f"Failed to write recipe store {store.file_path}: {e}")
            raise RecipeSourceError([store.name], [f"{store.name}: {e}"]) from e
        if changed:
            self.clear_cache()
        return changed

    @staticmethod
    def _require(payload: RecipePayload, fields) -> None:
        missing = []
        for field in fields:
            value = getattr(payload, field)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        if missing:
            raise RecipeValidationError(missing)

    @staticmethod
    def _build_recipe(recipe_id: str, payload: RecipePayload) -> Recipe:
        return Recipe(
            id=recipe_id,
            name=payload.name.strip(),
            cuisine=payload.cuisine.strip(),
            category=payload.category.strip(),
            tags=split_list_field(payload.tags),
            ingredients=split_list_field(payload.ingredients),
            instructions=split_lines(payload.instructions),
            image_url=payload.image_url or None,
            youtube=payload.youtube or None,
            source=payload.source or "Local"
        )

    def _matches_search(self, recipe: Recipe, needle: str) -> bool:
        if needle in recipe.name.lower():
            return True
        return any(needle in tag.lower() for tag in recipe.tags)


catalog_service = CatalogService()
