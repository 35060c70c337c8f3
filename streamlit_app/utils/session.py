"""
Session and navigation utilities for Streamlit pages.

Streamlit has no router, so routes produced by the core layer are mapped onto
page files here. Navigation requested while a coroutine runs (possibly from a
worker thread) is only recorded; flush() performs the page switch afterwards
from the script thread.
"""

from typing import Dict, Optional

import streamlit as st

from recipeshare import navigation
from recipeshare.navigation import Navigator

ROUTE_PAGES: Dict[str, str] = {
    navigation.HOME: "app.py",
    navigation.ABOUT: "app.py",
    navigation.RECIPES: "pages/01_📚_Recipe_Library.py",
    "recipe_detail": "pages/02_🍲_Recipe_Detail.py",
    navigation.ADD_RECIPE: "pages/03_➕_Add_Recipe.py",
    "recipe_edit": "pages/04_📝_Edit_Recipe.py",
    navigation.AI_ASSISTANT: "pages/05_🤖_AI_Assistant.py",
    navigation.LOGIN: "pages/06_🔑_Login.py",
    navigation.REGISTER: "pages/07_🆕_Register.py",
}


class StreamlitNavigator(Navigator):
    """
    Navigator that switches Streamlit pages.

    Attributes:
        pending: Route requested but not yet switched to
        params: Parameters of the last route switched to (e.g. {"id": ...})
    """

    def __init__(self) -> None:
        super().__init__()
        self.pending: Optional[str] = None
        self.params: Dict[str, str] = {}

    def go(self, route: str) -> None:
        super().go(route)
        self.pending = route

    def flush(self) -> None:
        """Switch to the pending route's page, if any. Stops the current script run."""
        if self.pending is None:
            return
        view, params = navigation.parse_route(self.pending)
        self.pending = None
        self.params = params
        st.switch_page(ROUTE_PAGES[view])
