"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Per-browser-session client context and coroutine runner
- session: Route-to-page mapping and the Streamlit navigator
"""
