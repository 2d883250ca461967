"""
Recipe Book - Streamlit Frontend Main Entry Point (Browse page).

This is the main Streamlit application entry point. It renders the recipe browser:
a search form, the active filter chips, and a grid of recipe cards. Picking a card
opens the detail page.

Run with:
    streamlit run streamlit_app/app.py

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
"""

import sys
from pathlib import Path

# Add project root to path so we can import api.config, recipebook and streamlit_app
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from recipebook.filters import describe_filters
from recipebook.models import FilterQuery
from streamlit_app.ui.feedback import loading, show_empty_state, show_error
from streamlit_app.ui.layout import filter_chips, page_header, recipe_grid
from streamlit_app.ui.styles import load_global_styles
from streamlit_app.utils.api_client import BackendError, get_health_status, get_recipes
from streamlit_app.utils.state import (
    clear_filters,
    get_active_filters,
    open_recipe,
    set_filter,
    sync_query_params,
)

SEARCH_MODES = {
    "Recipe name": "search",
    "Ingredient": "ingredient",
    "Country": "country",
    "Category": "category",
}

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Book",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()

with st.sidebar:
    st.markdown("### 🍳 **Recipe Book**")
    st.caption("Recipes from TheMealDB")
    st.divider()

    health = get_health_status()
    if health:
        st.success("Backend online")
    else:
        st.error("Backend offline")
        st.caption("Start it with `uvicorn api.main:app --reload`")

filters = get_active_filters()
sync_query_params(filters)

page_header(
    describe_filters(FilterQuery(**filters)),
    "Search by name, or browse by ingredient, country or category.",
)

with st.form("recipe_search", clear_on_submit=False):
    mode_col, text_col, button_col = st.columns([1, 3, 1], gap="small")
    with mode_col:
        mode_label = st.selectbox("Search by", list(SEARCH_MODES.keys()), label_visibility="collapsed")
    with text_col:
        query_text = st.text_input(
            "Search",
            placeholder="e.g. Arrabiata, chicken, Italian, Seafood",
            label_visibility="collapsed",
        )
    with button_col:
        submitted = st.form_submit_button("Search", type="primary", width="stretch")

if submitted:
    if query_text.strip():
        set_filter(SEARCH_MODES[mode_label], query_text)
    else:
        clear_filters()
    st.rerun()

if filters:
    chips_col, clear_col = st.columns([5, 1])
    with chips_col:
        filter_chips(filters)
    with clear_col:
        st.button("Clear filters", key="clear_filters", on_click=clear_filters, width="stretch")

try:
    with loading():
        recipes = get_recipes(filters)
except BackendError as e:
    show_error(e.message, hint="Check that the backend is running, then reload the page.")
    st.stop()

if not recipes:
    show_empty_state(
        "No recipes found",
        "Try a different search term or clear the filters.",
        action_label="Clear filters" if filters else None,
        on_action=clear_filters if filters else None,
    )
    st.stop()

st.caption(f"{len(recipes)} recipe{'s' if len(recipes) != 1 else ''}")

selected_id = recipe_grid(recipes, key_prefix="browse")
if selected_id:
    open_recipe(selected_id)
