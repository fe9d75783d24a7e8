import time
from typing import Dict, List, Optional
import requests
from recipe_finder.services.sources.base import RecipeSource
from recipe_finder.models import Recipe
from recipe_finder.core.logging_config import get_logger
from recipe_finder.utils.list_fields import split_lines, split_list_field

logger = get_logger(__name__)


class MealDBSource(RecipeSource):
    name = "TheMealDB"
    BASE_URL = "https://www.themealdb.com/api/json/v1/1/"
    REQUEST_TIMEOUT_SECONDS = 10
    MAX_INGREDIENTS = 20

    def __init__(self, search_terms: Optional[List[str]] = None, max_recipes: int = 50):
        # The free API has no "list everything" call; searching by first letter gives a broad catalog.
        self.search_terms = search_terms or ["a", "b", "c"]
        self.max_recipes = max_recipes

    def get_recipes(self) -> List[Recipe]:
        """
        Fetch meals from TheMealDB and adapt them to the canonical Recipe model.
        A failed search is logged and skipped; if every search fails the last error is raised.
        """
        fetched_meals: List[Dict] = []
        last_error: Optional[Exception] = None
        for term in self.search_terms:
            if len(fetched_meals) >= self.max_recipes:
                break
            try:
                fetched_meals.extend(self._search_meals(term))
            except (requests.RequestException, ValueError) as e:
                logger.warning(f"TheMealDB search '{term}' failed: {e}")
                last_error = e

        if not fetched_meals and last_error is not None:
            raise last_error

        # Deduplicate by idMeal
        seen_ids = set()
        recipes = []
        for meal in fetched_meals:
            meal_id = meal.get("idMeal")
            if not meal_id or meal_id in seen_ids:
                continue
            seen_ids.add(meal_id)
            recipe = self._adapt(meal)
            if recipe:
                recipes.append(recipe)

        return recipes[:self.max_recipes]

    def _search_meals(self, query: str) -> List[Dict]:
        return self._get("search.php", {"s": query})

    def _get(self, endpoint: str, params: Dict[str, str]) -> List[Dict]:
        api_start = time.time()
        res = requests.get(
            f"{self.BASE_URL}{endpoint}",
            params=params,
            timeout=self.REQUEST_TIMEOUT_SECONDS
        )
        res.raise_for_status()
        data = res.json()
        api_time = time.time() - api_start
        logger.info(f"TheMealDB {endpoint} {params}: {api_time:.2f}s")
        return data.get("meals") or []

    def _adapt(self, data: Dict) -> Optional[Recipe]:
        name = data.get("strMeal")
        if not name:
            return None

        ingredients = []
        for i in range(1, self.MAX_INGREDIENTS + 1):
            ing = data.get(f"strIngredient{i}")
            if ing and ing.strip():
                ingredients.append(ing.strip())

        return Recipe(
            id=f"mealdb_{data.get('idMeal')}",
            name=name,
            cuisine=data.get("strArea") or "Unknown",
            category=data.get("strCategory") or "Unknown",
            tags=split_list_field(data.get("strTags")),
            ingredients=ingredients,
            instructions=split_lines(data.get("strInstructions")),
            image_url=data.get("strMealThumb") or None,
            youtube=data.get("strYoutube") or None,
            source=data.get("strSource") or None
        )
