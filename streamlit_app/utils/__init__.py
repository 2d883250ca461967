"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- recipes: Tag/instruction splitting and related-recipe selection
- state: Browse filters and selected recipe kept in session state
"""
