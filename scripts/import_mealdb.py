import sys
from recipe_finder.core.config import load_config, resolve_data_path
from recipe_finder.core.logging_config import setup_logging
from recipe_finder.services.sources.local import LocalSource
from recipe_finder.services.sources.mealdb import MealDBSource


def main():
    setup_logging()
    store = LocalSource(resolve_data_path(load_config().data_path))
    letters = sys.argv[1] if len(sys.argv) > 1 else "abc"

    source = MealDBSource(search_terms=list(letters), max_recipes=500)
    added = 0
    for recipe in source.get_recipes():
        if store.insert(recipe):
            added += 1

    print(f"Imported {added} recipes from TheMealDB into {store.file_path}.")


if __name__ == "__main__":
    main()
