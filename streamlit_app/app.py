"""
RecipeShare - Streamlit Frontend Main Entry Point.

Sets up the page configuration, logging, the per-session client context and
renders the home page.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
Files in `pages/` starting with numbered prefixes (e.g., `01_📚_Recipe_Library.py`) will
appear as pages in the sidebar navigation.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipeshare
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipeshare.config import configure_logging

import streamlit as st

from utils.api_client import get_context
from ui.layout import page_header

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="RecipeShare",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

context = get_context()

page_header(
    "Your Culinary Journey Starts Here",
    subtitle="Discover, create, and share amazing recipes with our community",
    page_key="home",
)

st.markdown("#### Get started")
col_library, col_add, col_ai = st.columns(3, gap="medium")

with col_library:
    st.markdown("**Recipe Library**")
    st.caption("Browse, search and like recipes shared by the community.")
    if st.button("Browse recipes", use_container_width=True, type="primary"):
        st.switch_page("pages/01_📚_Recipe_Library.py")

with col_add:
    st.markdown("**Smart Recipe Management**")
    st.caption("Add and edit your own culinary creations.")
    if st.button("Add a recipe", use_container_width=True):
        st.switch_page("pages/03_➕_Add_Recipe.py")

with col_ai:
    st.markdown("**AI Recipe Assistant**")
    st.caption("Get recipe suggestions based on the ingredients you have.")
    if st.button("Ask the assistant", use_container_width=True):
        st.switch_page("pages/05_🤖_AI_Assistant.py")

if not context.session.is_authenticated:
    st.divider()
    col_login, col_register = st.columns(2)
    with col_login:
        if st.button("Log in", use_container_width=True):
            st.switch_page("pages/06_🔑_Login.py")
    with col_register:
        if st.button("Create an account", use_container_width=True):
            st.switch_page("pages/07_🆕_Register.py")
