import streamlit as st


def render_documentation() -> None:
    st.header("📚 Documentation")
    st.markdown(
        """
A quick, engineering-focused map of how the recipe finder works and where to extend it.
"""
    )

    st.divider()
    st.subheader("✅ Quickstart Walkthrough")
    st.markdown(
        """
- **Start the app:** `python run.py` (or run API + UI separately).
- **Open the UI:** `http://127.0.0.1:8501`.
- **Pick sources:** `Local` and/or `TheMealDB`.
- **Filter:** by cuisine, category, or a search term matching names and tags.
- **Select a recipe:** the right-hand column lists similar recipes with a score and reasons.
"""
    )

    st.markdown(
        """
Environment setup:
- `RECIPES_DATA_PATH` points at the local catalog (default `data/recipes.json`, relative to the project root).
- `LOG_LEVEL` sets the log level (default `INFO`).
- `RECOMMEND_DEFAULT_LIMIT`, `RECOMMEND_MAX_LIMIT`, `RECOMMEND_MIN_SCORE`, `RECOMMEND_WORKERS`
  override `config/recommender_config.json`.
- `API_URL` / `API_DOCS_URL` override Streamlit links.

Editing the catalog:
- `POST /api/recipes`, `PUT /api/recipes/{id}` and `DELETE /api/recipes/{id}` write to the local store.
- `scripts/import_mealdb.py abc` imports TheMealDB meals; new rows show up after the cache TTL.
"""
    )

    st.subheader("🧠 What happens when you select a recipe?")
    st.markdown(
        """
1. **UI requests** `/api/recipes/{id}/recommendations` (`recipe_finder/frontend.py`).
2. **Catalog lookup** finds the target and takes the rest of the catalog, ordered by name,
   as the candidate pool (`recipe_finder/services/catalog_service.py`).
3. **Scoring** compares each candidate with the target (`recipe_finder/services/similarity.py`).
4. **Reasons** describe what the two recipes share (`recipe_finder/services/reasons.py`).
5. **Ranking** drops weak matches, sorts and truncates (`recipe_finder/services/recommender.py`).
"""
    )

    st.divider()
    st.subheader("🧮 Similarity Score")
    st.markdown(
        """
| Factor | Weight | Rule |
|---|---|---|
| Cuisine | 0.40 | exact match on the stored value |
| Category | 0.30 | exact match on the stored value |
| Tags | 0.20 | Jaccard overlap of lower-cased tags |
| Ingredients | 0.10 | Jaccard overlap of lower-cased ingredients |

- Scores fall in `[0, 1]`; only candidates scoring **above 0.1** are returned.
- Equal scores keep catalog (name) order.
- Weights live in `recipe_finder/core/rules.py`.
"""
    )

    st.markdown(
        """
Reasons, in this order:
- `Same cuisine (Italian)`
- `Same category (Dessert)`
- `Similar tags: sweet, baked` (up to 3, in the selected recipe's casing)
- `Similar ingredients: flour` (up to 2)
- `Similar recipe` when nothing specific matched.
"""
    )

    st.divider()
    st.subheader("🛠️ How to extend")
    st.markdown(
        """
- **New recipe source:** implement `RecipeSource` in
  `recipe_finder/services/sources/base.py`, then register it in `CatalogService`.
- **Tune weights or threshold:** `recipe_finder/core/rules.py` and `config/recommender_config.json`.
- **Large catalogs:** set `RECOMMEND_WORKERS` to score candidates on a thread pool.
"""
    )

    st.divider()
    st.subheader("❓ FAQ / Troubleshooting")
    st.markdown(
        """
- **“Backend not running” error:** start FastAPI with
  `uvicorn recipe_finder.main:app --reload --port 8000`.
- **MealDB failures:** source errors surface as 502 only when no recipes could be loaded.
"""
    )
