"""
Global CSS Styling for Recipe Book.

This module provides load_global_styles() to inject consistent styling
across all pages: warm orange accents, rounded recipe cards, and pill-shaped
filter chips.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Book app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles recipe cards (rounded image, clamped two-line title)
    - Styles filter chips and tag pills
    - Uses the orange accent for primary buttons
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3 {
            font-weight: 700 !important;
            letter-spacing: 0.01em !important;
        }

        .rb-subtitle {
            color: #6b7280;
            margin-top: -0.5rem;
            margin-bottom: 1rem;
        }

        .rb-card-title {
            font-weight: 600;
            font-size: 1.05rem;
            line-height: 1.3;
            min-height: 2.6em;
            overflow: hidden;
            display: -webkit-box;
            -webkit-line-clamp: 2;
            -webkit-box-orient: vertical;
        }

        .rb-card-meta {
            color: #6b7280;
            font-size: 0.85rem;
            margin-bottom: 0.5rem;
        }

        .rb-chip {
            display: inline-block;
            padding: 0.2rem 0.75rem;
            margin: 0 0.35rem 0.35rem 0;
            border-radius: 999px;
            font-size: 0.85rem;
            background: #ffedd5;
            color: #9a3412;
        }

        .rb-chip-tag {
            background: #f3f4f6;
            color: #374151;
        }

        [data-testid="stImage"] img {
            border-radius: 12px;
        }

        .stButton > button[kind="primary"] {
            background-color: #f97316;
            border-color: #f97316;
        }

        .stButton > button[kind="primary"]:hover {
            background-color: #ea580c;
            border-color: #ea580c;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
