import json
import pytest
from conftest import make_recipe
from recipe_finder.services.sources.local import LocalSource, RecipeStoreError
from recipe_finder.utils.list_fields import split_lines, split_list_field


@pytest.fixture
def local_data_file(tmp_path):
    data = [
        {
            "id": 1,
            "name": "Margherita Pizza",
            "cuisine": "Italian",
            "category": "Main Course",
            "instructions": "Stretch the dough, Add toppings, Bake",
            "ingredients": "pizza dough, tomato sauce ,mozzarella,, basil",
            "tags": "Vegetarian, baked",
            "image_url": "/uploads/recipes/pizza.jpg",
            "youtube": None,
            "source": ""
        },
        {
            "id": "2",
            "name": "Dal Bhat",
            "cuisine": "Nepali",
            "category": "Main Course",
            "instructions": ["Cook lentils", "Serve with rice"],
            "ingredients": ["lentils", " rice "],
            "tags": None
        },
        {
            "id": "3",
            "name": "Nameless cuisine",
            "category": "Snack",
            "ingredients": "chicken"
        }
    ]
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_local_source_splits_comma_joined_fields(local_data_file):
    source = LocalSource(local_data_file)
    recipes = source.get_recipes()

    pizza = next(r for r in recipes if r.id == "1")
    assert pizza.ingredients == ["pizza dough", "tomato sauce", "mozzarella", "basil"]
    assert pizza.tags == ["Vegetarian", "baked"]
    assert pizza.instructions == ["Stretch the dough", "Add toppings", "Bake"]
    assert pizza.image_url == "/uploads/recipes/pizza.jpg"
    assert pizza.youtube is None
    assert pizza.source is None


def test_local_source_accepts_list_fields(local_data_file):
    recipes = LocalSource(local_data_file).get_recipes()

    dal = next(r for r in recipes if r.id == "2")
    assert dal.ingredients == ["lentils", "rice"]
    assert dal.instructions == ["Cook lentils", "Serve with rice"]
    assert dal.tags == []


def test_local_source_skips_rows_missing_required_fields(local_data_file):
    recipes = LocalSource(local_data_file).get_recipes()

    assert [r.id for r in recipes] == ["1", "2"]


def test_local_source_missing_file_is_empty(tmp_path):
    source = LocalSource(str(tmp_path / "missing.json"))
    assert source.get_recipes() == []


def test_local_source_invalid_json_is_empty(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert LocalSource(str(path)).get_recipes() == []


def test_split_list_field():
    assert split_list_field("a, b ,, c") == ["a", "b", "c"]
    assert split_list_field(["a ", "", None, "b"]) == ["a", "b"]
    assert split_list_field(None) == []
    assert split_list_field("") == []


def test_split_lines():
    assert split_lines("Step one.\r\n\r\nStep two.\nStep three.") == ["Step one.", "Step two.", "Step three."]
    assert split_lines(None) == []


def test_bundled_catalog_loads():
    recipes = LocalSource("data/recipes.json").get_recipes()

    assert len(recipes) >= 10
    assert len({r.id for r in recipes}) == len(recipes)
    assert all(r.ingredients for r in recipes)


def test_get_recipes_rereads_the_file(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([{"id": "1", "name": "Soup", "cuisine": "French", "category": "Starter"}]))
    source = LocalSource(str(path))
    assert [r.id for r in source.get_recipes()] == ["1"]

    path.write_text(json.dumps([
        {"id": "1", "name": "Soup", "cuisine": "French", "category": "Starter"},
        {"id": "2", "name": "Quiche", "cuisine": "French", "category": "Main Course"}
    ]))

    assert [r.id for r in source.get_recipes()] == ["1", "2"]


def test_insert_writes_comma_joined_row(tmp_path):
    path = tmp_path / "store" / "recipes.json"
    source = LocalSource(str(path))
    recipe = make_recipe("7", tags=["sweet", "baked"], ingredients=["flour", "eggs"], name="Sponge")
    recipe = recipe.model_copy(update={"instructions": ["Whisk eggs, sugar", "Bake"]})

    assert source.insert(recipe) is True
    assert source.insert(recipe) is False

    rows = json.loads(path.read_text(encoding="utf-8"))
    assert rows == [{
        "id": "7",
        "name": "Sponge",
        "cuisine": "Italian",
        "category": "Dessert",
        "instructions": "Whisk eggs; sugar, Bake",
        "ingredients": "flour, eggs",
        "tags": "sweet, baked",
        "image_url": None,
        "youtube": None,
        "source": None
    }]
    stored = source.get_recipes()[0]
    assert stored.instructions == ["Whisk eggs; sugar", "Bake"]
    assert stored.ingredients == ["flour", "eggs"]


def test_replace_and_remove(local_data_file):
    source = LocalSource(local_data_file)

    assert source.replace(make_recipe("2", cuisine="Nepali", name="Dal Bhat Tarkari")) is True
    assert source.replace(make_recipe("404")) is False
    assert next(r for r in source.get_recipes() if r.id == "2").name == "Dal Bhat Tarkari"

    assert source.remove("1") is True
    assert source.remove("1") is False
    assert "1" not in {r.id for r in source.get_recipes()}
    # Rows the reader skips are still kept on disk.
    with open(local_data_file, encoding="utf-8") as f:
        assert any(row.get("id") == "3" for row in json.load(f))


def test_writes_refuse_unreadable_store(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"id": "1"}))
    source = LocalSource(str(path))

    assert source.get_recipes() == []
    with pytest.raises(RecipeStoreError):
        source.insert(make_recipe("1"))
    assert json.loads(path.read_text()) == {"id": "1"}
