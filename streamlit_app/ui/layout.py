"""
Layout primitives for consistent page structure.

Renders the page header with the session badge (who is logged in, plus a
logout button) so every page shows the same account controls.
"""

from typing import Optional

import streamlit as st

from utils.api_client import get_context


def render_session_badge(page_key: str) -> None:
    """
    Render the current user and a logout button, or a login button.

    Args:
        page_key: Unique key suffix so button keys don't collide across pages
    """
    context = get_context()
    identity = context.session.identity
    if identity is not None:
        st.caption(f"Signed in as **{identity.username}**")
        if st.button("Log out", key=f"logout_btn_{page_key}", use_container_width=True):
            context.account().logout()
            context.navigator.flush()
    else:
        if st.button("Log in", key=f"login_btn_{page_key}", use_container_width=True):
            st.switch_page("pages/06_🔑_Login.py")


def page_header(title: str, subtitle: Optional[str] = None, page_key: Optional[str] = None) -> None:
    """
    Render a consistent page header with title, optional subtitle and session badge.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        page_key: Key suffix for the session badge buttons (defaults to the title)
    """
    col_title, col_right = st.columns([3, 1])
    with col_title:
        st.markdown(f"# {title}")
        if subtitle:
            st.caption(subtitle)
    with col_right:
        render_session_badge(page_key or title.lower().replace(" ", "_"))
