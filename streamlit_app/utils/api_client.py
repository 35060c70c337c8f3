"""
Backend client context for Streamlit pages.

Every page gets its backend access from get_context(): one AppContext per
browser session, stored in st.session_state, so the token, the session store
and long-lived controllers survive reruns and page switches.

# NOTE: Controllers are async. Pages call them through run(), which drives the
    coroutine to completion on a fresh event loop and then performs any page
    switch the controllers requested (login redirect after a 401, navigating to
    a saved recipe, ...).
"""

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import streamlit as st

from recipeshare.context import AppContext, build_context
from recipeshare.storage import MemoryStorage
from utils.session import StreamlitNavigator

CONTEXT_KEY = "recipeshare_context"

T = TypeVar("T")


def get_context() -> AppContext:
    """
    Get or create the client context of this browser session.

    The token lives in per-session memory, the equivalent of the browser tab's
    local storage.
    """
    if CONTEXT_KEY not in st.session_state:
        st.session_state[CONTEXT_KEY] = build_context(
            storage=MemoryStorage(),
            navigator=StreamlitNavigator(),
        )
    return st.session_state[CONTEXT_KEY]


def get_controller(key: str, factory: Callable[[AppContext], Any]) -> Any:
    """Get or create a controller kept across reruns under `key`."""
    if key not in st.session_state:
        st.session_state[key] = factory(get_context())
    return st.session_state[key]


def run(coro: Awaitable[T]) -> T:
    """Run a controller coroutine, then apply any navigation it requested."""
    result = asyncio.run(coro)
    get_context().navigator.flush()
    return result


def require_access(route: str) -> None:
    """
    Apply the route guard for the current page.

    Redirects (and stops the script) when the gate refuses.
    """
    context = get_context()
    gate = context.gate(route)
    if gate is not None and not gate.allows():
        context.navigator.flush()
        st.stop()
