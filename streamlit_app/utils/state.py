"""
Navigation State Module.

This module wraps Streamlit's session_state and query params to carry the browse
filters and the selected recipe between the two pages.

- The browse filters live in st.session_state[FILTERS_KEY] as a dict with at most the
  keys ingredient / country / category / search. On first load they are seeded from the
  URL query params, so links like ``/?ingredient=chicken`` work.
- The selected recipe id lives in st.session_state[SELECTED_RECIPE_KEY]; the detail page
  also accepts ``?id=52772``.

# NOTE: Clicking an ingredient, area or category on the detail page replaces all
    filters with that single one, mirroring how the backend only applies one filter.
"""

from typing import Dict, Optional

import streamlit as st

from streamlit_app.utils.api_client import FILTER_KEYS

FILTERS_KEY = "recipe_filters"
SELECTED_RECIPE_KEY = "selected_recipe_id"

BROWSE_PAGE = "app.py"
DETAIL_PAGE = "pages/01_🍳_Recipe_Details.py"


def get_active_filters() -> Dict[str, str]:
    """
    Get the current browse filters.

    Returns:
        Dict of the non-blank filters (copy; mutate via set_filter / clear_filters)
    """
    if FILTERS_KEY not in st.session_state:
        seeded: Dict[str, str] = {}
        for key in FILTER_KEYS:
            value = st.query_params.get(key)
            if value and value.strip():
                seeded[key] = value.strip()
        st.session_state[FILTERS_KEY] = seeded
    return dict(st.session_state[FILTERS_KEY])


def set_filter(name: str, value: str) -> None:
    """Replace the browse filters with a single filter (blank value clears them)."""
    if name not in FILTER_KEYS:
        raise ValueError(f"Unknown filter: {name!r}. Valid filters: {', '.join(FILTER_KEYS)}")
    value = (value or "").strip()
    st.session_state[FILTERS_KEY] = {name: value} if value else {}


def clear_filters() -> None:
    """Remove all browse filters."""
    st.session_state[FILTERS_KEY] = {}


def sync_query_params(filters: Dict[str, str]) -> None:
    """Mirror the browse filters into the URL so the page can be bookmarked."""
    st.query_params.clear()
    for key, value in filters.items():
        st.query_params[key] = value


def browse_with_filter(name: str, value: str) -> None:
    """Set a single filter and go to the browse page."""
    set_filter(name, value)
    st.query_params.clear()
    st.switch_page(BROWSE_PAGE)


def open_recipe(recipe_id: str) -> None:
    """Remember the chosen recipe and go to the detail page."""
    st.session_state[SELECTED_RECIPE_KEY] = str(recipe_id)
    # A stale ?id= would otherwise win over the new selection
    st.query_params.clear()
    st.switch_page(DETAIL_PAGE)


def get_selected_recipe_id() -> Optional[str]:
    """Recipe id from ``?id=`` if present, otherwise the last recipe opened."""
    from_url = st.query_params.get("id")
    if from_url and from_url.strip():
        return from_url.strip()
    return st.session_state.get(SELECTED_RECIPE_KEY)
