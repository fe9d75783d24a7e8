import streamlit as st
import requests
import os

from recipe_finder.ui.documentation import render_documentation

# Configuration
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000").rstrip("/")
API_DOCS_URL = os.getenv("API_DOCS_URL", f"{API_URL}/docs")
REQUEST_TIMEOUT_SECONDS = 10

st.set_page_config(page_title="Recipe Finder", layout="wide")


def fetch(path: str, params=None):
    response = requests.get(f"{API_URL}{path}", params=params, timeout=REQUEST_TIMEOUT_SECONDS)
    response.raise_for_status()
    return response.json()


def render_recipe(recipe: dict) -> None:
    st.markdown(f"### {recipe['name']}")
    st.caption(f"{recipe['cuisine']} | {recipe['category']}")
    if recipe.get("tags"):
        st.write(" ".join(f"`{tag}`" for tag in recipe["tags"]))
    if (recipe.get("image_url") or "").startswith("http"):
        st.image(recipe["image_url"], width=300)

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**Ingredients**")
        for ing in recipe["ingredients"]:
            st.markdown(f"- {ing}")
    with c2:
        st.markdown("**Instructions**")
        for i, step in enumerate(recipe.get("instructions", []), 1):
            st.markdown(f"{i}. {step}")
    if recipe.get("youtube"):
        st.link_button("Watch on YouTube", recipe["youtube"])


def render_recommendations(recipe_id: str, limit: int, sources) -> None:
    data = fetch(f"/api/recipes/{recipe_id}/recommendations", {"limit": limit, "sources": sources})
    recommendations = data["recommendations"]
    if not recommendations:
        st.info("No similar recipes found.")
        return

    for rec in recommendations:
        candidate = rec["recipe"]
        with st.container(border=True):
            st.markdown(f"**{candidate['name']}** ({candidate['cuisine']}, {candidate['category']})")
            st.progress(min(1.0, rec["score"]), text=f"Similarity {rec['score'] * 100:.0f}%")
            for reason in rec["reasons"]:
                st.caption(f"- {reason}")


col1, col2 = st.columns([5, 1])
with col1:
    st.title("Recipe Finder")
with col2:
    st.link_button("API Docs", API_DOCS_URL, type="secondary", use_container_width=True)

browse_tab, docs_tab = st.tabs(["Browse", "Documentation"])

with browse_tab:
    try:
        sources = st.multiselect("Recipe Sources", ["Local", "TheMealDB"], default=["Local"])
        cuisines = fetch("/api/cuisines", {"sources": sources})
        categories = fetch("/api/categories", {"sources": sources})

        f1, f2, f3 = st.columns(3)
        with f1:
            cuisine = st.selectbox("Cuisine", ["All"] + cuisines)
        with f2:
            category = st.selectbox("Category", ["All"] + categories)
        with f3:
            search = st.text_input("Search", placeholder="Name or tag, e.g. spicy")

        params = {"sources": sources}
        if cuisine != "All":
            params["cuisine"] = cuisine
        if category != "All":
            params["category"] = category
        if search:
            params["search"] = search

        listing = fetch("/api/recipes", params)
        st.caption(f"{listing['total']} recipes")

        recipes = listing["recipes"]
        if recipes:
            names = {r["id"]: r["name"] for r in recipes}
            selected_id = st.selectbox("Recipe", list(names.keys()), format_func=lambda rid: names[rid])
            limit = st.slider("Similar recipes to show", min_value=1, max_value=12, value=6)

            left, right = st.columns([3, 2])
            with left:
                render_recipe(next(r for r in recipes if r["id"] == selected_id))
            with right:
                st.subheader("You might also like")
                render_recommendations(selected_id, limit, sources)
        else:
            st.warning("No recipes match these filters.")

    except requests.exceptions.ConnectionError:
        st.error("Could not connect to the API. Is the backend running? (`uvicorn recipe_finder.main:app`)")
    except requests.exceptions.HTTPError as e:
        st.error(f"Error {e.response.status_code}: {e.response.text}")

with docs_tab:
    render_documentation()
