import pytest
from typing import List
from fastapi.testclient import TestClient
from recipe_finder.core.config import RecommenderConfig
from recipe_finder.models import Recipe
from recipe_finder.services.catalog_service import CatalogService, catalog_service
from recipe_finder.services.sources.base import RecipeSource


def make_recipe(recipe_id, cuisine="Italian", category="Dessert", tags=None, ingredients=None, name=None):
    return Recipe(
        id=recipe_id,
        name=name or f"Recipe {recipe_id}",
        cuisine=cuisine,
        category=category,
        tags=tags or [],
        ingredients=ingredients or [],
        instructions=["step"]
    )


class StaticSource(RecipeSource):
    """In-memory source serving a fixed list of recipes."""

    def __init__(self, recipes: List[Recipe], name: str = "Local"):
        self.recipes = recipes
        self.name = name
        self.calls = 0

    def get_recipes(self) -> List[Recipe]:
        self.calls += 1
        return list(self.recipes)


@pytest.fixture
def sample_recipes():
    return [
        make_recipe("1", "Italian", "Dessert", ["sweet", "baked"], ["flour", "sugar"], name="Tiramisu"),
        make_recipe("2", "Italian", "Dessert", ["sweet", "quick"], ["flour", "butter"], name="Cannoli"),
        make_recipe("3", "Indian", "Curry", ["spicy"], ["chicken"], name="Butter Chicken"),
        make_recipe("4", "American", "Dessert", [], [], name="Brownies"),
        make_recipe("5", "Italian", "Main Course", ["Baked"], ["Flour", "tomato"], name="Lasagna"),
    ]


@pytest.fixture
def catalog(sample_recipes):
    """CatalogService over the sample recipes, independent of files and network."""
    return CatalogService(config=RecommenderConfig(), sources=[StaticSource(sample_recipes)])


@pytest.fixture
def client(monkeypatch, sample_recipes):
    """API client whose catalog serves the sample recipes."""
    monkeypatch.setattr(catalog_service, "sources", [StaticSource(sample_recipes)])
    catalog_service.clear_cache()
    from recipe_finder.main import app
    yield TestClient(app)
    catalog_service.clear_cache()
