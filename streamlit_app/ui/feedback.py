"""
Standardized feedback utilities for error, empty, and loading states.

Both pages use these so a failed backend call, an empty listing, and a slow request
look the same everywhere.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display an error message with an optional hint.

    Args:
        message: Main error message (usually BackendError.message)
        hint: Optional text telling the user what to try next
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    on_action: Optional[Callable[[], None]] = None,
    key: str = "empty_state_action",
) -> None:
    """
    Display an empty state, optionally with one action button.

    Args:
        title: Main empty state title (e.g. "No recipes found")
        subtitle: Optional description text
        action_label: Button label; the button is only shown with on_action
        on_action: Callback run when the button is clicked
        key: Streamlit widget key for the button
    """
    st.info(f"🍽️ **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_label and on_action is not None:
        st.button(action_label, key=key, type="primary", on_click=on_action)


@contextmanager
def loading(label: str = "Loading delicious recipes…"):
    """
    Spinner shown while a backend call is in flight.

    Usage:
        with loading("Loading recipe details…"):
            recipe = get_recipe_by_id(recipe_id)
    """
    with st.spinner(label):
        yield
