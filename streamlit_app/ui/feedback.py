"""
Feedback helpers: controller errors, empty results and pending backend calls.

Controllers expose errors as plain messages and navigation as routes; these
helpers render both so every page reports problems and offers next steps the
same way.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

import streamlit as st

from utils.api_client import get_context

logger = logging.getLogger(__name__)


def show_error(message: Optional[str], hint: Optional[str] = None) -> None:
    """
    Display a controller error message, if there is one.

    Args:
        message: Error text from a controller (None renders nothing)
        hint: Optional hint text to help users resolve the issue
    """
    if not message:
        return
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    action_route: Optional[str] = None,
) -> None:
    """
    Show that there is nothing to display, optionally offering a way on.

    Args:
        title: What is missing, e.g. "No recipes found"
        subtitle: Suggestion for the user
        action_label: Button text; the button is only shown with a route
        action_route: Route (see recipeshare.navigation) the button opens
    """
    st.info(f"🍽️ **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_route and action_label:
        if st.button(action_label, key=f"empty_state_{action_route}", type="primary"):
            navigator = get_context().navigator
            navigator.go(action_route)
            navigator.flush()


@contextmanager
def backend_call(label: str) -> Iterator[None]:
    """
    Show a spinner while a controller talks to the backend.

    Usage:
        with backend_call("Asking the assistant…"):
            run(wizard.request_suggestions())
    """
    started = time.perf_counter()
    with st.spinner(label):
        yield
    logger.debug("%s took %.2fs", label, time.perf_counter() - started)
