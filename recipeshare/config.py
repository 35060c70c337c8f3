"""
Configuration management for the RecipeShare client.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by both the core layer and the
Streamlit front-end so .env is loaded before any other code reads the environment.

In production, .env will usually not exist; load_dotenv() is safe to call and
will no-op, so platform environment variables are used instead.

Environment Variables:
- API_URL: Optional, backend base URL (defaults to http://localhost:5000/api)
- API_TIMEOUT_SECONDS: Optional, per-request timeout; unset means the transport default
- RECIPES_PAGE_SIZE: Optional, recipes per library page (defaults to 12)
- SEARCH_DEBOUNCE_SECONDS: Optional, search-as-you-type quiet period (defaults to 0.5)
- RECIPESHARE_STORAGE_FILE: Optional, JSON file holding the persisted credential token
- LOG_LEVEL: Optional, DEBUG/INFO/WARNING/ERROR (defaults to INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_PAGE_SIZE = 12
DEFAULT_SEARCH_DEBOUNCE_SECONDS = 0.5


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file.
    """
    # recipeshare/config.py -> recipeshare/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class ApiConfig:
    """Configuration for the backend REST API."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Base URL with trailing slash removed (default: http://localhost:5000/api)
        """
        return os.getenv("API_URL", DEFAULT_API_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the per-request timeout in seconds.

        Returns:
            Timeout as float, or None to use the transport default.

        Raises:
            ValueError: If API_TIMEOUT_SECONDS is set but not a positive number
        """
        raw = os.getenv("API_TIMEOUT_SECONDS")
        if not raw:
            return None
        timeout = float(raw)
        if timeout <= 0:
            raise ValueError(f"API_TIMEOUT_SECONDS must be positive, got: {raw}")
        return timeout


class LibraryConfig:
    """Configuration for the recipe library view."""

    @staticmethod
    def get_page_size() -> int:
        """Recipes requested per page (default: 12)."""
        size = int(os.getenv("RECIPES_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
        if size < 1:
            raise ValueError(f"RECIPES_PAGE_SIZE must be at least 1, got: {size}")
        return size

    @staticmethod
    def get_search_debounce_seconds() -> float:
        """Quiet period before a search-as-you-type fetch runs (default: 0.5)."""
        delay = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", str(DEFAULT_SEARCH_DEBOUNCE_SECONDS)))
        if delay < 0:
            raise ValueError(f"SEARCH_DEBOUNCE_SECONDS must not be negative, got: {delay}")
        return delay


class StorageConfig:
    """Configuration for persisted client state."""

    @staticmethod
    def get_storage_path() -> Path:
        """
        Get the path of the JSON file used to persist the credential token.

        Returns:
            Path from RECIPESHARE_STORAGE_FILE, or ~/.recipeshare/storage.json
        """
        raw = os.getenv("RECIPESHARE_STORAGE_FILE")
        if raw:
            return Path(raw).expanduser()
        return Path.home() / ".recipeshare" / "storage.json"


def configure_logging() -> None:
    """
    Configure root logging from LOG_LEVEL.

    Unknown level names fall back to INFO.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
