"""
UI Styling and Components Module.

This package provides global CSS styling, layout primitives (header, filter chips,
recipe cards) and feedback states for the Recipe Book Streamlit app.
"""
