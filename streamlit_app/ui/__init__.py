"""
UI helpers for the RecipeShare Streamlit app.

Plain building blocks only: page headers and standardized feedback states.
"""

from ui.feedback import show_error, show_empty_state, backend_call
from ui.layout import page_header

__all__ = [
    "show_error",
    "show_empty_state",
    "backend_call",
    "page_header",
]
