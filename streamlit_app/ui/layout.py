"""
Layout primitives for consistent page structure.

Provides the page header, active-filter chips, and the recipe card grid used by the
browse page and the related-recipes strip on the detail page.
"""

from html import escape
from typing import Any, Dict, List, Optional

import streamlit as st

from streamlit_app.utils.recipes import card_meta, escape_markdown

FILTER_LABELS = {
    "search": "Search",
    "ingredient": "Ingredient",
    "country": "Country",
    "category": "Category",
}


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown(f"# {escape_markdown(title)}")
    if subtitle:
        st.markdown(f'<div class="rb-subtitle">{escape(subtitle)}</div>', unsafe_allow_html=True)


def pills(values: List[str], css_class: str = "rb-chip") -> None:
    """Render a row of pill-shaped labels."""
    if not values:
        return
    html = "".join(f'<span class="{css_class}">{escape(v)}</span>' for v in values)
    st.markdown(html, unsafe_allow_html=True)


def filter_chips(filters: Dict[str, str]) -> None:
    """
    Render the active browse filters as chips, e.g. "Ingredient: chicken".

    Args:
        filters: Active filters (see utils.state.get_active_filters)
    """
    if not filters:
        return
    st.caption("Active filters:")
    pills([f"{FILTER_LABELS.get(k, k.title())}: {v}" for k, v in filters.items()])


def recipe_card(recipe: Dict[str, Any], key: str) -> bool:
    """
    Render one recipe card.

    Args:
        recipe: Recipe dict from the backend (full, summary, or reduced category record)
        key: Unique widget key for the card's button

    Returns:
        True if the "View recipe" button was clicked on this run
    """
    with st.container(border=True):
        thumbnail = recipe.get("thumbnailUrl")
        if thumbnail:
            st.image(thumbnail, width="stretch")

        title = recipe.get("title") or "Untitled recipe"
        st.markdown(f'<div class="rb-card-title">{escape(title)}</div>', unsafe_allow_html=True)

        meta = " · ".join(card_meta(recipe))
        st.markdown(f'<div class="rb-card-meta">{escape(meta) or "&nbsp;"}</div>', unsafe_allow_html=True)

        return st.button("View recipe", key=key, width="stretch")


def recipe_grid(recipes: List[Dict[str, Any]], key_prefix: str, columns: int = 4) -> Optional[str]:
    """
    Render recipes as a grid of cards.

    Args:
        recipes: Recipe dicts, rendered in order, row by row
        key_prefix: Prefix for widget keys (must differ between grids on one page)
        columns: Cards per row

    Returns:
        Id of the recipe whose button was clicked, or None
    """
    clicked: Optional[str] = None
    for row_start in range(0, len(recipes), columns):
        row = recipes[row_start:row_start + columns]
        cols = st.columns(columns)
        for col, recipe in zip(cols, row):
            with col:
                if recipe_card(recipe, key=f"{key_prefix}_{recipe.get('id')}_{row_start}"):
                    clicked = str(recipe.get("id"))
    return clicked
